"""
Command-line entry point.

Examples:
    slm-grating 1024 1024 out.png -d doe.bmp -i signal.png
    slm-grating 1024 1024 out.png --blaze "25,255" --blaze "10,128,0.5"
    slm-grating --config job.yaml
"""

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from . import __version__
from .api.errors import ErrorCode, GratingError
from .api.request import BlazeSpec, CompositionRequest, load_job_file
from .core.config import config
from .pipeline.compositor import run_composition
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slm-grating",
        description="Compose images, patterns and blazes into a single SLM grating",
    )
    parser.add_argument("width", type=int, nargs="?", help="Grating width in pixels")
    parser.add_argument("height", type=int, nargs="?", help="Grating height in pixels")
    parser.add_argument("output", type=str, nargs="?", help="Output image path (PNG recommended)")
    parser.add_argument(
        "-i", "--image",
        action="extend", nargs="+", default=[], metavar="PATH",
        help="Add an image to the grating",
    )
    parser.add_argument(
        "-d", "--doe",
        action="extend", nargs="+", default=[], metavar="PATH",
        help="Add a DOE reference image to the grating",
    )
    parser.add_argument(
        "-p", "--pattern",
        action="extend", nargs="+", default=[], metavar="EXPR",
        help="Add a pattern expression to the grating (not supported yet)",
    )
    parser.add_argument(
        "-b", "--blaze",
        action="extend", nargs="+", default=[], metavar="COUNT,MAX[,TILT]",
        help="Add a blaze to the grating",
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        help="YAML job file; positional arguments and options override/extend it",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help=f"Threads used to decode images (default: {config.max_workers})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.default_log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    parser.add_argument("--no-color", action="store_true", help="Disable colored logs")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_request(args: argparse.Namespace, parser: argparse.ArgumentParser) -> CompositionRequest:
    """Merge the job file (if any) with command-line arguments."""
    data: Dict[str, Any] = load_job_file(args.config) if args.config else {}

    for key in ("width", "height", "output"):
        value = getattr(args, key)
        if value is not None:
            data[key] = value

    missing = [key for key in ("width", "height", "output") if data.get(key) is None]
    if missing:
        parser.error(f"missing {', '.join(missing)} (give them as arguments or in --config)")

    layers = dict(data.get("layers") or {})
    extra: Dict[str, List[Any]] = {
        "images": args.image,
        "does": args.doe,
        "patterns": args.pattern,
        "blazes": [BlazeSpec.from_string(text) for text in args.blaze],
    }
    for key, values in extra.items():
        if values:
            layers[key] = list(layers.get(key) or []) + list(values)
    data["layers"] = layers

    return CompositionRequest.model_validate(data)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file, color=not args.no_color)

    try:
        request = build_request(args, parser)
        logger.debug("Request: %s", request.to_dict())
        run_composition(request, max_workers=args.workers)
    except GratingError as exc:
        logger.error("Composition failed: %s", exc)
        logger.debug("Traceback", exc_info=True)
        print(f"error [{exc.code.value}] {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        logger.error("Invalid request: %d error(s)", exc.error_count())
        print(f"error [{ErrorCode.INVALID_PARAMETER.value}] {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.error("File error: %s", exc)
        print(f"error [{ErrorCode.FILE_ERROR.value}] {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
