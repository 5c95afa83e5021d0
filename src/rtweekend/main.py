# main.py
import argparse
import logging
import random
import sys
from typing import List, Optional

from rtweekend.config import (DEFAULT_ASPECT_RATIO, DEFAULT_SEED, DEFAULT_WIDTH,
                              QUALITY_LEVELS, RenderSettings)
from rtweekend.renderer.ppm import write_ppm
from rtweekend.renderer.raytracer import Renderer
from rtweekend.scenes import SCENES

logger = logging.getLogger("rtweekend")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtweekend",
        description="Render a sphere scene with a Monte-Carlo path tracer to plain PPM.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="random")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--aspect-ratio", type=float, default=DEFAULT_ASPECT_RATIO)
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="final",
                        help="samples/depth preset, overridden by --samples/--max-depth")
    parser.add_argument("--samples", type=int, default=None, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, default=None, help="maximum bounces per path")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--per-pixel-seed", action="store_true",
                        help="seed each pixel independently for order-independent output")
    parser.add_argument("-o", "--output", default="-", help="PPM file, '-' for stdout")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser

def settings_from_args(args: argparse.Namespace) -> RenderSettings:
    return RenderSettings.from_quality(
        args.quality,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        width=args.width,
        aspect_ratio=args.aspect_ratio,
        seed=args.seed,
        per_pixel_seed=args.per_pixel_seed,
    )

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    build_world, build_camera = SCENES[args.scene]
    world = build_world(random.Random(settings.seed))
    camera = build_camera(settings.aspect_ratio)
    logger.info("Scene '%s' with %d objects, %r", args.scene, len(world), settings)

    renderer = Renderer(settings.width, settings.height,
                        samples_per_pixel=settings.samples_per_pixel,
                        max_depth=settings.max_depth,
                        seed=settings.seed,
                        per_pixel_seed=settings.per_pixel_seed)
    image = renderer.render(world, camera)

    if args.output == "-":
        write_ppm(sys.stdout, image)
        sys.stdout.flush()
    else:
        with open(args.output, "w") as f:
            write_ppm(f, image)
        logger.info("Wrote %s", args.output)

    if args.preview:
        from rtweekend.renderer.preview import show_image
        show_image(image, caption=f"rtweekend - {args.scene}")

    return 0

if __name__ == "__main__":
    sys.exit(main())
