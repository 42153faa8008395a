# materials/material.py
from typing import Optional
from core.color import BLACK, Color, WHITE
from core.errors import MaterialError
from core.vector import Vector3
from materials.light import PointLight
from materials.patterns import Pattern

class Material:
    """
    Surface appearance for the Phong model plus the reflective and
    refractive properties used by the recursive shader.

    A material is built once with its shape and never changes while
    rendering.
    """
    def __init__(self, color: Color = WHITE, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0, reflective: float = 0.0,
                 transparency: float = 0.0, refractive_index: float = 1.0,
                 pattern: Optional[Pattern] = None):
        self.color = color
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.reflective = reflective
        self.transparency = transparency
        self.refractive_index = refractive_index
        self.pattern = pattern
        self.validate()

    def validate(self):
        for name in ("ambient", "diffuse", "specular", "shininess"):
            if getattr(self, name) < 0:
                raise MaterialError(f"{name} must be non-negative, got {getattr(self, name)}")
        for name in ("reflective", "transparency"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise MaterialError(f"{name} must lie in [0, 1], got {value}")
        if self.refractive_index <= 0:
            raise MaterialError(f"refractive_index must be positive, got {self.refractive_index}")

    def color_at(self, shape, point: Vector3) -> Color:
        """
        Base color at a world-space point: the pattern if there is one,
        otherwise the flat color.
        """
        if self.pattern is None:
            return self.color
        return self.pattern.pattern_at_shape(shape, point)

    def lighting(self, light: PointLight, shape, point: Vector3, eye: Vector3,
                 normal: Vector3, in_shadow: bool = False) -> Color:
        """
        Phong illumination (ambient + diffuse + specular) from a single light.
        """
        effective_color = self.color_at(shape, point) * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        light_vector = (light.position - point).normalize()
        light_dot_normal = light_vector.dot(normal)
        if light_dot_normal < 0:
            # Light is on the other side of the surface.
            return ambient

        diffuse = effective_color * self.diffuse * light_dot_normal
        reflect_dot_eye = (-light_vector).reflect(normal).dot(eye)
        if reflect_dot_eye > 0:
            specular = light.intensity * self.specular * (reflect_dot_eye ** self.shininess)
        else:
            specular = BLACK
        return ambient + diffuse + specular

    def __repr__(self) -> str:
        return (f"Material(color={self.color!r}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, reflective={self.reflective}, "
                f"transparency={self.transparency}, refractive_index={self.refractive_index})")
