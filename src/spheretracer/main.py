# main.py
import argparse
import sys

from loguru import logger

from spheretracer.config import QUALITY_LEVELS, SHADING_MODES, RenderSettings
from spheretracer.errors import ConfigError
from spheretracer.renderer.image_io import emit
from spheretracer.renderer.raytracer import Renderer
from spheretracer.scene import SCENES, build_scene


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spheretracer",
        description="Render a scene of spheres with a Monte-Carlo path tracer.")
    parser.add_argument("--preset", choices=sorted(QUALITY_LEVELS), default="default",
                        help="quality level providing samples, bounces and resolution")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--aspect-ratio", type=float, help="width / height")
    parser.add_argument("--samples", type=int, dest="samples_per_pixel",
                        help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum number of bounces")
    parser.add_argument("--seed", type=int, help="seed for every random draw")
    parser.add_argument("--workers", type=int, help="number of worker processes")
    parser.add_argument("--scene", choices=sorted(SCENES), default="demo")
    parser.add_argument("--shading", choices=SHADING_MODES, help="material or normals")
    parser.add_argument("-o", "--output", default="-",
                        help="output file (.ppm is written as text, other formats via Pillow); "
                             "'-' writes a P3 stream to stdout")
    parser.add_argument("--preview", action="store_true",
                        help="show the finished image in a window")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every scanline")
    return parser


def configure_logging(verbose: bool):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = RenderSettings.from_preset(
            args.preset,
            width=args.width,
            aspect_ratio=args.aspect_ratio,
            samples_per_pixel=args.samples_per_pixel,
            max_depth=args.max_depth,
            seed=args.seed,
            workers=args.workers,
            shading=args.shading,
        )
        world, camera_settings = build_scene(args.scene)
    except ConfigError as e:
        logger.error("Invalid configuration: {}", e)
        return 2

    camera = camera_settings.build(settings.aspect_ratio)
    pixels = Renderer(settings).render(camera, world)

    try:
        emit(pixels, args.output)
    except (OSError, ValueError) as e:
        logger.error("Could not write image to {}: {}", args.output, e)
        return 1

    if args.preview:
        from spheretracer.renderer.preview import show_image
        show_image(pixels)
    return 0


if __name__ == "__main__":
    sys.exit(main())
