# materials/light.py
from core.color import Color
from core.errors import TupleKindError
from core.vector import Vector3

class PointLight:
    """
    A light with no size: a position and an intensity (color).
    """
    def __init__(self, position: Vector3, intensity: Color):
        if not position.is_point():
            raise TupleKindError(f"light position must be a point, got {position!r}")
        self.position = position
        self.intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointLight):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    __hash__ = None

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
