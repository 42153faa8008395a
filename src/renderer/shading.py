# renderer/shading.py
"""
The recursive color resolver.

color_at -> shade_hit -> (reflected_color, refracted_color) -> color_at ...

Each reflective or refractive bounce spends one unit of the `remaining`
budget; at zero both branches return black, so recursion depth is bounded by
the starting budget whatever the scene looks like. Nothing here mutates the
world, so calls are safe to run concurrently.
"""
from core.color import BLACK, Color
from core.ray import Ray
from geometry.intersection import ShadingContext
from geometry.world import World
from materials.dielectric import refracted_direction, schlick
from renderer.settings import MAX_BOUNCES

# Color returned for rays that escape the scene.
BACKGROUND = BLACK


def color_at(ray: Ray, world: World, remaining: int = MAX_BOUNCES) -> Color:
    xs = world.intersect(ray)
    h = xs.hit()
    if h is None:
        return BACKGROUND
    return shade_hit(h.prepare(ray, xs), world, remaining)


def surface_color(ctx: ShadingContext, world: World) -> Color:
    """
    Local Phong contribution, summed over every light with its own shadow test.
    """
    material = ctx.shape.material
    color = BLACK
    for light in world.lights:
        shadowed = world.is_shadowed(ctx.over_point, light)
        color = color + material.lighting(light, ctx.shape, ctx.over_point, ctx.eye,
                                          ctx.normal, shadowed)
    return color


def shade_hit(ctx: ShadingContext, world: World, remaining: int = MAX_BOUNCES) -> Color:
    surface = surface_color(ctx, world)
    reflected = reflected_color(ctx, world, remaining)
    refracted = refracted_color(ctx, world, remaining)

    material = ctx.shape.material
    if material.reflective > 0 and material.transparency > 0:
        reflectance = schlick(ctx)
        return surface + reflected * reflectance + refracted * (1 - reflectance)
    return surface + reflected + refracted


def reflected_color(ctx: ShadingContext, world: World, remaining: int = MAX_BOUNCES) -> Color:
    reflective = ctx.shape.material.reflective
    if reflective == 0 or remaining <= 0:
        return BLACK
    reflect_ray = Ray(ctx.over_point, ctx.reflect)
    return color_at(reflect_ray, world, remaining - 1) * reflective


def refracted_color(ctx: ShadingContext, world: World, remaining: int = MAX_BOUNCES) -> Color:
    transparency = ctx.shape.material.transparency
    if transparency == 0 or remaining <= 0:
        return BLACK
    direction = refracted_direction(ctx)
    if direction is None:
        # Total internal reflection: nothing is transmitted.
        return BLACK
    refract_ray = Ray(ctx.under_point, direction)
    return color_at(refract_ray, world, remaining - 1) * transparency
