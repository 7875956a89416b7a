"""
BlurHash Batch
Compact blurred-placeholder hashes for many images at once
"""

import argparse
import logging
import sys
from typing import List, Optional

logger = logging.getLogger("blurhash_batch")

EXIT_OK = 0
EXIT_IMAGE_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def configure_logging(verbose: int = 0, quiet: bool = False) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_encode_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blurhash-batch",
        description="Compute BlurHash strings for image files and directories.",
        epilog="Use 'blurhash-batch decode --help' to render a hash to an image.",
    )
    parser.add_argument("inputs", nargs="*", default=["."],
                        help="Image files or directories (default: current directory)")
    parser.add_argument("-x", "--components-x", type=int, default=4,
                        help="Horizontal components, 1-9 (default: 4)")
    parser.add_argument("-y", "--components-y", type=int, default=3,
                        help="Vertical components, 1-9 (default: 3)")
    parser.add_argument("-j", "--jobs", type=int, default=None,
                        help="Maximum worker threads (default: CPU count)")
    parser.add_argument("--force", action="store_true",
                        help="Re-hash images that already have a .bh sidecar")
    parser.add_argument("--no-write", action="store_true",
                        help="Print hashes without writing .bh sidecars")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("-q", "--quiet", action="store_true")
    return parser


def build_decode_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blurhash-batch decode",
        description="Render a BlurHash string to a placeholder image.",
    )
    parser.add_argument("blurhash")
    parser.add_argument("width", type=int)
    parser.add_argument("height", type=int)
    parser.add_argument("output", help="Output image path, e.g. placeholder.png")
    parser.add_argument("--punch", type=float, default=1.0,
                        help="AC contrast multiplier (default: 1.0)")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("-q", "--quiet", action="store_true")
    return parser


def run_encode(argv: List[str]) -> int:
    from engines.batch import run_batch
    from models.encode_params import EncodeParams
    from models.errors import ConfigurationError
    from utils.file_discovery import collect_images, has_sidecar, write_sidecar
    
    args = build_encode_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)
    
    try:
        params = EncodeParams(
            components_x=args.components_x,
            components_y=args.components_y,
            max_workers=args.jobs,
        )
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    
    paths = collect_images(args.inputs)
    if not args.force and not args.no_write:
        pending = []
        for path in paths:
            if has_sidecar(path):
                logger.info("Skipping %s: BlurHash file already exists", path)
            else:
                pending.append(path)
        paths = pending
    
    if not paths:
        logger.warning("No images to process")
        return EXIT_OK
    
    try:
        outcomes = run_batch(paths, params)
    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED
    
    failures = 0
    for outcome in outcomes:
        if not outcome.ok:
            failures += 1
            print(outcome.describe(), file=sys.stderr)
            continue
        print(outcome.describe())
        if not args.no_write:
            try:
                target = write_sidecar(outcome.path, outcome.blurhash)
            except OSError as e:
                failures += 1
                print(f"{outcome.path}: error: could not write sidecar: {e}", file=sys.stderr)
                continue
            logger.info("BlurHash saved to: %s", target)
    
    if failures:
        logger.warning("%d of %d image(s) failed", failures, len(outcomes))
        return EXIT_IMAGE_FAILED
    return EXIT_OK


def run_decode(argv: List[str]) -> int:
    from engines.pipeline import decode
    from models.errors import HashDecodeError
    from utils.image_io import save_image
    
    args = build_decode_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)
    
    try:
        image = decode(args.blurhash, args.width, args.height, args.punch)
    except (HashDecodeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    
    try:
        save_image(image, args.output)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_IMAGE_FAILED
    print(f"Saved: {args.output}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if argv and argv[0] == "decode":
        return run_decode(argv[1:])
    return run_encode(argv)


if __name__ == "__main__":
    sys.exit(main())
