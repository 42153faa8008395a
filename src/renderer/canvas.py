# renderer/canvas.py
import os
from typing import List
import numpy as np
from PIL import Image
from core.color import BLACK, Color
from core.errors import SceneError

# Plain PPM readers choke on longer lines.
PPM_LINE_LIMIT = 70


class Canvas:
    """
    A width x height grid of linear RGB floats, stored row-major as a
    (height, width, 3) array. Values are only clamped on export.
    """
    def __init__(self, width: int, height: int, fill: Color = BLACK):
        if width <= 0 or height <= 0:
            raise SceneError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 3), dtype=np.float64)
        self.pixels[:, :] = fill.as_tuple()

    def _check(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise SceneError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color):
        self._check(x, y)
        self.pixels[y, x] = color.as_tuple()

    def pixel_at(self, x: int, y: int) -> Color:
        self._check(x, y)
        r, g, b = self.pixels[y, x]
        return Color(float(r), float(g), float(b))

    def write_row(self, y: int, row: np.ndarray):
        """Copies a (width, 3) array into row y."""
        self._check(0, y)
        self.pixels[y] = row

    def to_rgb8(self) -> np.ndarray:
        """Clamps to [0, 1] and scales to 0-255, rounding halves up."""
        clipped = np.clip(self.pixels, 0.0, 1.0)
        return np.floor(clipped * 255 + 0.5).astype(np.uint8)

    def to_ppm(self) -> str:
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for row in self.to_rgb8():
            lines.extend(_wrap([str(v) for v in row.reshape(-1)]))
        return "\n".join(lines) + "\n"

    def save(self, path: str):
        """Writes .ppm files as P3 text; any other extension goes through Pillow."""
        if os.path.splitext(path)[1].lower() == ".ppm":
            with open(path, "w") as f:
                f.write(self.to_ppm())
        else:
            Image.fromarray(self.to_rgb8()).save(path)


def _wrap(values: List[str]) -> List[str]:
    lines = []
    current = ""
    for v in values:
        if not current:
            current = v
        elif len(current) + 1 + len(v) <= PPM_LINE_LIMIT:
            current += " " + v
        else:
            lines.append(current)
            current = v
    if current:
        lines.append(current)
    return lines
