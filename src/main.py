# main.py
import argparse
import logging
import sys
import time
import pygame
from core.errors import RaytracerError
from renderer.raytracer import Renderer
from renderer.settings import QUALITY_LEVELS, RenderSettings
from scenes.builtin import SCENES, build_scene


class Application:
    """
    Preview window: shows the finished render and re-renders when the
    quality level changes (keys 1/2/3). S saves the current frame.
    """
    def __init__(self, scene: str, width: int, height: int, settings: RenderSettings, output: str):
        pygame.init()
        self.scene = scene
        self.width = width
        self.height = height
        self.output = output
        self.settings = settings
        self.window_width = width
        self.window_height = height
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(f"Ray Tracer - {scene}")
        self.font = pygame.font.Font(None, 24)
        self.clock = pygame.time.Clock()

        self.current_quality = None
        self.key_map = {
            pygame.K_1: "interactive",
            pygame.K_2: "balanced",
            pygame.K_3: "high_quality",
        }
        self.canvas = None
        self.frame_surface = None
        self.render_time = 0.0

    def render(self):
        world, camera = build_scene(self.scene, self.width, self.height)
        renderer = Renderer(camera, world, self.settings)
        print(f"Rendering {renderer.width}x{renderer.height} "
              f"({self.settings.samples} sample(s), {self.settings.max_bounces} bounce(s))...")

        def show_progress(done, total):
            pygame.display.set_caption(f"Ray Tracer - {self.scene} ({100 * done // total}%)")
            pygame.event.pump()

        start = time.perf_counter()
        self.canvas = renderer.render(progress=show_progress)
        self.render_time = time.perf_counter() - start
        pygame.display.set_caption(f"Ray Tracer - {self.scene}")

        # surfarray wants (width, height, 3)
        surface = pygame.surfarray.make_surface(self.canvas.to_rgb8().swapaxes(0, 1))
        if (renderer.width, renderer.height) != (self.window_width, self.window_height):
            surface = pygame.transform.scale(surface, (self.window_width, self.window_height))
        self.frame_surface = surface

    def apply_quality_settings(self, level: str):
        self.settings = RenderSettings.from_quality(level, workers=self.settings.workers,
                                                    seed=self.settings.seed)
        self.current_quality = level
        print(f"Quality changed to: {level}")
        self.render()

    def display_performance_metrics(self):
        label = self.current_quality or "custom"
        lines = [
            f"Render: {self.render_time:.2f}s | Quality: {label} (Press 1/2/3 to change)",
            f"Samples: {self.settings.samples}, Bounces: {self.settings.max_bounces}, "
            f"Scale: {self.settings.scale:.2f}",
        ]
        for i, text in enumerate(lines):
            self.screen.blit(self.font.render(text, True, (255, 255, 255)), (10, 10 + 24 * i))

    def run(self):
        try:
            self.render()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        elif event.key in self.key_map:
                            self.apply_quality_settings(self.key_map[event.key])
                        elif event.key == pygame.K_s:
                            self.canvas.save(self.output)
                            print(f"Saved {self.output}")

                self.screen.blit(self.frame_surface, (0, 0))
                self.display_performance_metrics()
                pygame.display.flip()
                self.clock.tick(30)
        finally:
            print("Cleaning up...")
            pygame.quit()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a built-in scene with the recursive ray tracer.")
    parser.add_argument("--scene", default="glass", choices=sorted(SCENES))
    parser.add_argument("--width", type=int, default=400)
    parser.add_argument("--height", type=int, default=200)
    parser.add_argument("--quality", default="high_quality", choices=sorted(QUALITY_LEVELS))
    parser.add_argument("--samples", type=int, default=None, help="rays per pixel (overrides --quality)")
    parser.add_argument("--bounces", type=int, default=None, help="reflection/refraction budget (overrides --quality)")
    parser.add_argument("--workers", type=int, default=None, help="worker processes (default: all CPUs)")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--output", default="render.png", help=".ppm writes plain P3; other extensions use Pillow")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    overrides = {"workers": args.workers, "seed": args.seed}
    if args.samples is not None:
        overrides["samples"] = args.samples
    if args.bounces is not None:
        overrides["max_bounces"] = args.bounces
    return RenderSettings.from_quality(args.quality, **overrides)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        settings = settings_from_args(args)
        if args.preview:
            app = Application(args.scene, args.width, args.height, settings, args.output)
            if args.samples is None and args.bounces is None:
                app.current_quality = args.quality
            app.run()
            return 0

        print(f"\n=== Rendering '{args.scene}' ===")
        print(f"Quality settings: {args.quality}")
        print(f"Samples per pixel: {settings.samples}")
        print(f"Max bounces: {settings.max_bounces}")
        print(f"Render scale: {settings.scale}")
        world, camera = build_scene(args.scene, args.width, args.height)
        renderer = Renderer(camera, world, settings)

        def report(done, total):
            print(f"Row {done}/{total}", end="\r")

        canvas = renderer.render(progress=report)
        print()
        canvas.save(args.output)
        print(f"Saved {canvas.width}x{canvas.height} image to {args.output}")
    except RaytracerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
