# scenes/builtin.py
"""
Demo scenes. Each builder takes the output size and returns (world, camera)
ready to hand to a Renderer.
"""
import logging
import math
from typing import Callable, Dict, Tuple
from camera.camera import Camera
from core.color import BLACK, WHITE, Color
from core.errors import SceneError
from core.matrix import chain, rotation_x, rotation_y, rotation_z, scaling, shearing, translation, view_transform
from core.vector import point, vector
from geometry import Cube, Cylinder, Plane, Sphere, World
from materials.light import PointLight
from materials.material import Material
from materials.patterns import CheckerPattern, GradientPattern, RadialGradientPattern, RingPattern, StripePattern
from materials.presets import ColorPresets, DielectricPresets, MetalPresets, SurfacePresets

logger = logging.getLogger(__name__)

SceneBuilder = Callable[[int, int], Tuple[World, Camera]]

UP = vector(0, 1, 0)
GREY = Color(0.5, 0.5, 0.5)
LILAC = Color(0.7, 0.6, 0.7)


def default_scene(width: int, height: int) -> Tuple[World, Camera]:
    """The two-sphere reference world seen from the front."""
    camera = Camera(width, height, math.pi / 3,
                    view_transform(point(0, 0, -5), point(0, 0, 0), UP))
    return World.default(), camera


def glass_scene(width: int, height: int) -> Tuple[World, Camera]:
    """A striped room with a checker floor, a few matte balls and two glass ones."""
    wall_pattern = StripePattern([Color(0.45, 0.45, 0.45), Color(0.55, 0.55, 0.55)],
                                 chain(rotation_y(math.pi / 2), scaling(0.25, 0.25, 0.25)))

    def wall(placement):
        return Plane(placement, Material(pattern=wall_pattern, ambient=0.0, diffuse=0.4,
                                         specular=0.0, reflective=0.3))

    floor = Plane(rotation_y(0.31415),
                  Material(pattern=CheckerPattern(Color(0.35, 0.35, 0.35), Color(0.65, 0.65, 0.65)),
                           specular=0.0))
    ceiling = Plane(translation(0, 5, 0),
                    Material(color=Color(0.8, 0.8, 0.8), ambient=0.3, specular=0.0))
    side = chain(rotation_y(math.pi / 2), rotation_z(math.pi / 2))
    walls = [
        wall(chain(side, translation(-5, 0, 0))),
        wall(chain(side, translation(5, 0, 0))),
        wall(chain(rotation_x(math.pi / 2), translation(0, 0, 5))),
        wall(chain(rotation_x(math.pi / 2), translation(0, 0, -5))),
    ]

    def ball(center, radius, color):
        return Sphere(chain(scaling(radius, radius, radius), translation(*center)),
                      Material(color=color, shininess=50.0))

    balls = [
        ball((4.6, 0.4, 1.0), 0.4, Color(0.8, 0.5, 0.3)),
        ball((4.7, 0.3, 0.4), 0.3, Color(0.9, 0.4, 0.5)),
        ball((-1.0, 0.5, 4.5), 0.5, Color(0.4, 0.9, 0.6)),
        ball((-1.7, 0.3, 4.7), 0.3, Color(0.4, 0.6, 0.9)),
        Sphere(translation(-0.6, 1, 0.6),
               Material(color=Color(1.0, 0.3, 0.2), specular=0.4, shininess=5.0)),
    ]

    blue_glass = DielectricPresets.glass(Color(0.0, 0.0, 0.2))
    blue_glass.diffuse = 0.4
    green_glass = DielectricPresets.glass(Color(0.0, 0.2, 0.0))
    green_glass.diffuse = 0.4
    glass = [
        Sphere(chain(scaling(0.7, 0.7, 0.7), translation(0.6, 0.7, -0.6)), blue_glass),
        Sphere(chain(scaling(0.5, 0.5, 0.5), translation(-0.7, 0.5, -0.8)), green_glass),
    ]

    world = World([floor, ceiling] + walls + balls + glass,
                  [PointLight(point(-4.9, 4.9, -1), WHITE)])
    camera = Camera(width, height, 1.152,
                    view_transform(point(-2.6, 1.5, -3.9), point(-0.6, 1, -0.8), UP))
    return world, camera


def mirror_scene(width: int, height: int) -> Tuple[World, Camera]:
    """A fully reflective gradient ball next to a half transparent one."""
    floor = Plane(material=Material(pattern=CheckerPattern(WHITE, GREY), reflective=0.3))
    mirror = Sphere(translation(-1.3, 1.5, -4),
                    Material(pattern=GradientPattern(ColorPresets.BLUE, BLACK),
                             diffuse=0.7, specular=0.3, reflective=1.0))
    veiled = Sphere(translation(0, 2, -6),
                    Material(diffuse=0.7, specular=0.3, transparency=0.5))

    world = World([floor, mirror, veiled], [PointLight(point(-5, 10, -10), WHITE)])
    camera = Camera(width, height, math.pi / 1.5,
                    view_transform(point(-1, 2, -9), point(0, 1, 0), UP))
    return world, camera


def cube_scene(width: int, height: int) -> Tuple[World, Camera]:
    """A stack of shrinking cubes in a checkered corner."""
    checker = Material(pattern=CheckerPattern(WHITE, GREY))
    floor = Plane(material=checker)
    left_wall = Plane(chain(rotation_z(math.pi / 2), translation(-15, 0, 0)), checker)
    back_wall = Plane(chain(rotation_x(math.pi / 2), translation(0, 0, 15)), checker)

    def block(color, placement):
        pattern = GradientPattern(color, BLACK, chain(scaling(2, 1, 1), translation(-1, 0, 0)))
        return Cube(placement, Material(pattern=pattern, diffuse=0.7, specular=0.3, reflective=0.05))

    cubes = [
        block(ColorPresets.BLUE, chain(scaling(2, 2, 2), translation(0, 2, 0))),
        block(ColorPresets.RED, translation(0, 5, 0)),
        block(ColorPresets.GREEN, chain(scaling(0.5, 0.5, 0.5), translation(0, 6.5, 0))),
    ]

    world = World([floor, left_wall, back_wall] + cubes, [PointLight(point(-5, 10, -10), WHITE)])
    camera = Camera(width, height, math.pi / 1.9,
                    view_transform(point(5, 2.5, -7.5), point(1.5, 3, 0), UP))
    return world, camera


def pattern_scene(width: int, height: int) -> Tuple[World, Camera]:
    """One of each procedural pattern on the floor, the wall and three balls."""
    floor = Plane(material=Material(pattern=CheckerPattern(WHITE, GREY)))
    wall = Plane(chain(rotation_x(math.pi / 2), translation(0, 0, 5)),
                 Material(pattern=RingPattern([GREY, WHITE, LILAC], shearing(1, 1, 0, 0, 0, 0))))
    striped = Sphere(chain(scaling(1.5, 1.5, 1.5), translation(3, 1.5, -4)),
                     Material(pattern=StripePattern([GREY, WHITE, LILAC], scaling(0.35, 0.35, 0.35)),
                              diffuse=0.7, specular=0.3))
    ringed = Sphere(chain(scaling(1.5, 1.5, 1.5), rotation_x(math.pi / 2), translation(-3, 1.5, -4)),
                    Material(pattern=RingPattern([WHITE, LILAC], scaling(0.2, 0.2, 0.2)),
                             diffuse=0.7, specular=0.3))
    graded = Sphere(chain(scaling(0.33, 0.33, 0.33), translation(0, 1, -7)),
                    Material(pattern=GradientPattern(LILAC, BLACK,
                                                     chain(scaling(2, 1, 1), translation(-1, 0, 0))),
                             diffuse=0.7, specular=0.3))

    world = World([floor, wall, striped, ringed, graded], [PointLight(point(-7, 10, -10), WHITE)])
    camera = Camera(width, height, math.pi / 1.5,
                    view_transform(point(-1, 2, -9), point(0, 1, 0), UP))
    return world, camera


def showcase_scene(width: int, height: int, seed: int = 0) -> Tuple[World, Camera]:
    """
    Material presets side by side: gold, diamond, water, marble and wood,
    with a chrome pillar and two lights.
    """
    floor = Plane(material=SurfacePresets.checkerboard(scale=1.0, reflective=0.1))
    sky = Plane(translation(0, 30, 0),
                Material(pattern=RadialGradientPattern(ColorPresets.BLUE, WHITE, scaling(30, 30, 30)),
                         ambient=0.6, diffuse=0.2, specular=0.0))
    objects = [
        floor,
        sky,
        Sphere(translation(2, 1, 0), MetalPresets.gold()),
        Sphere(translation(-2, 1, 0), DielectricPresets.diamond()),
        Sphere(chain(scaling(0.7, 0.7, 0.7), translation(0, 0.7, 2)), DielectricPresets.water()),
        Sphere(translation(-3, 1, 3), SurfacePresets.marble(seed)),
        Cube(chain(scaling(0.6, 0.6, 0.6), rotation_y(math.pi / 5), translation(3, 0.6, 3)),
             SurfacePresets.wood(seed + 1)),
        Cylinder(chain(scaling(0.3, 1, 0.3), translation(0, 0, -3)), MetalPresets.chrome()),
    ]
    lights = [
        PointLight(point(-6, 8, -6), Color(0.8, 0.8, 0.8)),
        PointLight(point(6, 8, -4), Color(0.3, 0.3, 0.35)),
    ]
    camera = Camera(width, height, math.radians(60),
                    view_transform(point(0, 3, -9), point(0, 1, 0), UP))
    return World(objects, lights), camera


SCENES: Dict[str, SceneBuilder] = {
    "default": default_scene,
    "glass": glass_scene,
    "mirror": mirror_scene,
    "cube": cube_scene,
    "pattern": pattern_scene,
    "showcase": showcase_scene,
}


def build_scene(name: str, width: int, height: int) -> Tuple[World, Camera]:
    try:
        builder = SCENES[name]
    except KeyError:
        raise SceneError(f"unknown scene {name!r}; choose from {', '.join(sorted(SCENES))}") from None
    world, camera = builder(width, height)
    logger.info("Built scene %r: %d objects, %d light(s)", name, len(world.objects), len(world.lights))
    return world, camera
