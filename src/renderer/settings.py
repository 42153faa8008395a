# renderer/settings.py
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
from core.errors import SceneError

# Bounce budget for reflection and refraction rays.
MAX_BOUNCES = 5


class SuperSamplingMode(Enum):
    """How many rays are cast per pixel."""
    NONE = "none"               # One ray through the pixel center.
    STOCHASTIC = "stochastic"   # Several jittered rays, averaged.


@dataclass(frozen=True)
class RenderSettings:
    """
    Knobs for one render pass.

    Attributes:
        max_bounces: Recursion budget for reflected and refracted rays.
        samples: Rays per pixel. 1 casts through the pixel center; more
            casts that many jittered rays and averages them.
        scale: Resolution multiplier applied to the camera size.
        workers: Worker processes. None uses every CPU, 1 renders in-process.
        seed: Seed for the per-row jitter generators.
        chunk_size: Rows handed to a worker at a time.
    """
    max_bounces: int = MAX_BOUNCES
    samples: int = 1
    scale: float = 1.0
    workers: Optional[int] = None
    seed: int = 0
    chunk_size: int = 4

    def __post_init__(self):
        if self.max_bounces < 0:
            raise SceneError(f"max_bounces must be >= 0, got {self.max_bounces}")
        if self.samples < 1:
            raise SceneError(f"samples must be >= 1, got {self.samples}")
        if self.scale <= 0:
            raise SceneError(f"scale must be positive, got {self.scale}")
        if self.workers is not None and self.workers < 1:
            raise SceneError(f"workers must be >= 1, got {self.workers}")
        if self.chunk_size < 1:
            raise SceneError(f"chunk_size must be >= 1, got {self.chunk_size}")

    @property
    def supersampling(self) -> SuperSamplingMode:
        return SuperSamplingMode.STOCHASTIC if self.samples > 1 else SuperSamplingMode.NONE

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        try:
            preset = QUALITY_LEVELS[name]
        except KeyError:
            raise SceneError(f"unknown quality level {name!r}; choose from {sorted(QUALITY_LEVELS)}") from None
        return replace(preset, **overrides)


QUALITY_LEVELS = {
    "interactive": RenderSettings(max_bounces=2, samples=1, scale=0.5),
    "balanced": RenderSettings(max_bounces=4, samples=4, scale=0.75),
    "high_quality": RenderSettings(max_bounces=MAX_BOUNCES, samples=10, scale=1.0),
}
