# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional

from pathtracer.config import QUALITY_LEVELS, RenderSettings
from pathtracer.errors import PathTracerError
from pathtracer.logging_config import setup_logging
from pathtracer.renderer.image_io import save_image, write_ppm
from pathtracer.renderer.raytracer import Renderer
from pathtracer.renderer.tone_mapping import to_rgb8
from pathtracer.scenes import SCENES, build_scene

logger = logging.getLogger("pathtracer.main")

# argparse destination -> RenderSettings field
_SETTING_FIELDS = {
    "width": "image_width",
    "aspect_ratio": "aspect_ratio",
    "samples": "samples_per_pixel",
    "max_depth": "max_depth",
    "seed": "seed",
    "scene": "scene",
    "output": "output",
    "texture": "texture_path",
}


def build_parser() -> argparse.ArgumentParser:
    # Options left unset fall back to RenderSettings, which reads the environment
    parser = argparse.ArgumentParser(prog="pathtracer", description="Offline Monte Carlo path tracer")
    parser.add_argument("--scene", choices=sorted(SCENES))
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS),
                        help="preset for samples and bounces; --samples/--max-depth override it")
    parser.add_argument("--width", type=int)
    parser.add_argument("--aspect-ratio", type=float)
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum ray bounces")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--output", "-o", help="output image path; '-' writes PPM to stdout")
    parser.add_argument("--texture", help="image used by texture-mapped scenes")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--log-file", default=None)
    return parser


def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    overrides = {
        name: getattr(args, dest)
        for dest, name in _SETTING_FIELDS.items()
        if getattr(args, dest) is not None
    }
    if args.quality is not None:
        return RenderSettings.from_quality(args.quality, **overrides)
    return RenderSettings(**overrides)


def render(settings: RenderSettings):
    """Build the configured scene and render it to an 8-bit image."""
    scene = build_scene(settings.scene, random.Random(settings.seed), settings)
    camera = scene.make_camera(settings.aspect_ratio)
    renderer = Renderer(settings.image_width, settings.image_height,
                        settings.samples_per_pixel, settings.max_depth, settings.seed)
    return to_rgb8(renderer.render(scene.world, camera, scene.background))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        settings = settings_from_args(args)
        pixels = render(settings)
        if settings.output == "-":
            write_ppm(sys.stdout, pixels)
            sys.stdout.flush()
        else:
            save_image(settings.output, pixels)
    except (PathTracerError, OSError) as e:
        logger.error("%s", e)
        return 1

    if args.preview:
        # Imported lazily so headless renders never touch the display stack
        from pathtracer.renderer.preview import show_image
        show_image(pixels, scale=2.0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
