# renderer/raytracer.py
import logging
import os
import time
from multiprocessing import Pool
from typing import Callable, List, Optional, Tuple
import numpy as np
from camera.camera import Camera
from core.color import BLACK, Color
from core.utils import row_rng
from geometry.world import World
from renderer.canvas import Canvas
from renderer.settings import RenderSettings, SuperSamplingMode
from renderer.shading import color_at

logger = logging.getLogger(__name__)

# Set once per worker process by _init_worker.
_worker_renderer: Optional["Renderer"] = None

ProgressCallback = Callable[[int, int], None]


def _init_worker(renderer: "Renderer"):
    global _worker_renderer
    _worker_renderer = renderer


def _render_rows(rows: range) -> List[Tuple[int, np.ndarray]]:
    return [(y, _worker_renderer.render_row(y)) for y in rows]


class Renderer:
    """
    Drives the camera over every pixel of the image and resolves each ray
    against the world.

    Rows are independent: jitter for row y always comes from the generator
    seeded with (settings.seed, y), so a render is reproducible for a seed
    no matter how many workers share the rows.
    """
    def __init__(self, camera: Camera, world: World, settings: Optional[RenderSettings] = None):
        self.settings = settings if settings is not None else RenderSettings()
        self.world = world
        self.camera = self._scaled(camera, self.settings.scale)

    @staticmethod
    def _scaled(camera: Camera, scale: float) -> Camera:
        if scale == 1.0:
            return camera
        hsize = max(1, round(camera.hsize * scale))
        vsize = max(1, round(camera.vsize * scale))
        return Camera(hsize, vsize, camera.field_of_view, camera.transform)

    @property
    def width(self) -> int:
        return self.camera.hsize

    @property
    def height(self) -> int:
        return self.camera.vsize

    def pixel_color(self, x: int, y: int, rng: Optional[np.random.Generator] = None) -> Color:
        bounces = self.settings.max_bounces
        if self.settings.supersampling is SuperSamplingMode.NONE:
            return color_at(self.camera.project_ray(x, y), self.world, bounces)

        if rng is None:
            rng = row_rng(self.settings.seed, y)
        rays = self.camera.project_subsample_rays(x, y, rng, self.settings.samples)
        total = BLACK
        for ray in rays:
            total = total + color_at(ray, self.world, bounces)
        return total / len(rays)

    def render_row(self, y: int) -> np.ndarray:
        rng = row_rng(self.settings.seed, y)
        row = np.zeros((self.width, 3), dtype=np.float64)
        for x in range(self.width):
            row[x] = self.pixel_color(x, y, rng).as_tuple()
        return row

    def _worker_count(self) -> int:
        if self.settings.workers is not None:
            return self.settings.workers
        return os.cpu_count() or 1

    def _chunks(self) -> List[range]:
        step = self.settings.chunk_size
        return [range(start, min(start + step, self.height)) for start in range(0, self.height, step)]

    def render(self, progress: Optional[ProgressCallback] = None) -> Canvas:
        """
        Renders the full image.

        Args:
            progress: Called as progress(rows_done, total_rows) after each
                chunk of rows lands on the canvas.
        """
        canvas = Canvas(self.width, self.height)
        workers = min(self._worker_count(), len(self._chunks()))
        logger.info("Rendering %dx%d, %d sample(s) per pixel, %d bounce(s), %d worker(s)",
                    self.width, self.height, self.settings.samples, self.settings.max_bounces, workers)
        start = time.perf_counter()

        done = 0
        for rows in self._iter_chunks(workers):
            for y, row in rows:
                canvas.write_row(y, row)
            done += len(rows)
            logger.debug("Rows %d/%d done", done, self.height)
            if progress is not None:
                progress(done, self.height)

        logger.info("Render finished in %.2fs", time.perf_counter() - start)
        return canvas

    def _iter_chunks(self, workers: int):
        chunks = self._chunks()
        if workers <= 1:
            for rows in chunks:
                yield [(y, self.render_row(y)) for y in rows]
            return
        with Pool(processes=workers, initializer=_init_worker, initargs=(self,)) as pool:
            yield from pool.imap_unordered(_render_rows, chunks)
