# core/color.py
from core.utils import EPSILON


class Color:
    """
    An RGB color with float channels. Channels are not clamped here; values
    above 1 are legal radiance and are only clamped when written out.
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        self.red = red
        self.green = green
        self.blue = blue

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other):
        # Scalar scaling or Hadamard product.
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Color":
        return Color(self.red / t, self.green / t, self.blue / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (abs(self.red - other.red) < EPSILON and abs(self.green - other.green) < EPSILON
                and abs(self.blue - other.blue) < EPSILON)

    __hash__ = None

    def as_tuple(self) -> tuple:
        return (self.red, self.green, self.blue)

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
