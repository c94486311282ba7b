"""
Videobrain Main Entry Point

Plan a video from the command line, inspect effect selection, or serve the API.
"""

import asyncio
import argparse
import json
import sys
from pathlib import Path

from videobrain.core.logging_config import setup_logging, get_logger, LogLevel
from videobrain.core.config import load_config, set_config
from videobrain.core.constants import ImageType, ProductType, Tone
from videobrain.core.exceptions import ConfigurationError, PipelineError, RequestValidationError
from videobrain.core.startup import validate_environment


def parse_image(value: str):
    """Parse an `id:type[:description]` image argument."""
    from videobrain.brains.media import ProvidedImage

    parts = value.split(":", 2)
    if len(parts) < 2:
        raise argparse.ArgumentTypeError(f"expected id:type[:description], got {value!r}")
    try:
        image_type = ImageType(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"unknown image type: {parts[1]!r}")
    try:
        return ProvidedImage(
            id=parts[0],
            type=image_type,
            description=parts[2] if len(parts) > 2 else None,
        )
    except RequestValidationError as e:
        raise argparse.ArgumentTypeError(e.message)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="videobrain",
        description="Videobrain - AI-planned marketing videos"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Run the three-stage pipeline for a brief")
    generate.add_argument("prompt", help="Product or service brief")
    generate.add_argument(
        "--product-type",
        choices=[p.value for p in ProductType],
        default=ProductType.B2B.value
    )
    generate.add_argument("--language", default="english")
    generate.add_argument("--tone", choices=[t.value for t in Tone])
    generate.add_argument("--audience", help="Target audience")
    generate.add_argument("--description", help="Longer product description")
    generate.add_argument(
        "--image",
        action="append",
        type=parse_image,
        default=[],
        help="Provided image as id:type[:description] (repeatable)"
    )
    generate.add_argument(
        "--skip-validation",
        action="store_true",
        help="Skip API key validation"
    )

    effects = subparsers.add_parser("effects", help="Show effect selection for a context")
    effects.add_argument(
        "--tone",
        choices=["exciting", "professional", "playful", "serious", "luxurious", "tech"],
        default="professional"
    )
    effects.add_argument("--intensity", choices=["subtle", "medium", "dramatic"], default="medium")
    effects.add_argument("--brand-style", choices=["modern", "classic", "bold", "minimal"])
    effects.add_argument("--images", action="store_true", help="Images are available")
    effects.add_argument("--screenshots", action="store_true", help="Screenshots are available")

    serve = subparsers.add_parser("serve", help="Run the FastAPI server")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)
    serve.add_argument("--reload", action="store_true")

    return parser


def run_generate(args) -> int:
    from videobrain.pipelines import PipelineRequest, run_creative_pipeline

    logger = get_logger("main")

    if not args.skip_validation:
        validation_result = validate_environment()
        if not validation_result.valid:
            print("\nEnvironment validation failed. Missing required configuration:", file=sys.stderr)
            for error in validation_result.errors:
                print(f"  ✗ {error}", file=sys.stderr)
            return 1
        for warning in validation_result.warnings:
            logger.warning(warning)

    try:
        request = PipelineRequest.from_dict({
            "user_prompt": args.prompt,
            "product_type": args.product_type,
            "language": args.language,
            "tone": args.tone,
            "target_audience": args.audience,
            "product_description": args.description,
            "provided_images": args.image,
        })
    except RequestValidationError as e:
        print(f"Invalid request: {e.message}", file=sys.stderr)
        return 2

    try:
        output = asyncio.run(run_creative_pipeline(request))
    except PipelineError as e:
        print(json.dumps({"success": False, "error": e.to_dict()}, indent=2, ensure_ascii=False))
        return 1

    print(json.dumps(output.to_dict(), indent=2, ensure_ascii=False))
    return 0


def run_effects(args) -> int:
    from videobrain.effects import EffectContext, select_all_effects

    context = EffectContext(
        tone=args.tone,
        has_images=args.images,
        has_screenshots=args.screenshots,
        intensity=args.intensity,
        brand_style=args.brand_style,
    )
    print(json.dumps(select_all_effects(context).to_dict(), indent=2))
    return 0


def run_serve(args) -> int:
    from videobrain.api.main import start_server

    print(f"Starting API server on http://localhost:{args.port}")
    start_server(host=args.host, port=args.port, reload=args.reload)
    return 0


def main(argv=None) -> int:
    """Main entry point for the Videobrain CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=LogLevel.DEBUG if args.debug else LogLevel.INFO, verbose=args.debug)
    logger = get_logger("main")

    if args.config:
        try:
            set_config(load_config(Path(args.config)))
            logger.info(f"Loaded configuration from {args.config}")
        except ConfigurationError as e:
            print(f"Could not load config: {e}", file=sys.stderr)
            return 2

    handlers = {
        "generate": run_generate,
        "effects": run_effects,
        "serve": run_serve,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
