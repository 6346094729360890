"""CLI interface for converting place records into index documents."""

import argparse
import json
import sys
from collections.abc import Iterable, Sequence
from contextlib import ExitStack
from typing import TextIO

from pydantic import ValidationError

from geodoc.core.config import Settings
from geodoc.core.exceptions import InvalidRecordError
from geodoc.core.logging import configure_logging, get_logger
from geodoc.models.config import ProjectionConfig
from geodoc.models.place import PlaceRecord
from geodoc.projection.projector import project_place

logger = get_logger(module="cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="geodoc",
        description="Convert JSON-lines place records into search index documents",
    )
    parser.add_argument(
        "input", help="JSON-lines file of place records ('-' reads stdin)"
    )
    parser.add_argument(
        "--output", "-o", default="-", help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--languages",
        "-l",
        help="Comma-separated language codes (default: LANGUAGES setting)",
    )
    parser.add_argument(
        "--extra-tags",
        "-e",
        help="Comma-separated extra tag keys (default: EXTRA_TAGS setting)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def resolve_config(args: argparse.Namespace, settings: Settings) -> ProjectionConfig:
    """Command-line options take precedence over settings."""
    config = settings.projection_config()
    overrides = {}
    if args.languages is not None:
        overrides["languages"] = args.languages
    if args.extra_tags is not None:
        overrides["extra_tags"] = args.extra_tags
    if overrides:
        config = ProjectionConfig(**{**config.model_dump(), **overrides})
    return config


def convert_lines(
    lines: Iterable[str], config: ProjectionConfig, output: TextIO
) -> tuple[int, int]:
    """Convert each non-blank line, returning (converted, rejected) counts."""
    converted = rejected = 0
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            record = PlaceRecord.model_validate_json(line)
            document = project_place(record, config)
        except InvalidRecordError as e:
            rejected += 1
            logger.error(
                "record_rejected",
                line=line_number,
                osm_id=e.osm_id,
                missing_fields=list(e.missing_fields),
            )
            continue
        except ValidationError as e:
            rejected += 1
            logger.error(
                "record_rejected",
                line=line_number,
                errors=e.error_count(),
                reason=str(e.errors()[0]["msg"]),
            )
            continue

        output.write(json.dumps(document, ensure_ascii=False))
        output.write("\n")
        converted += 1
    return converted, rejected


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the conversion CLI."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(
        level="DEBUG" if args.verbose else settings.LOG_LEVEL,
        json_logs=settings.JSON_LOGS,
    )

    config = resolve_config(args, settings)
    logger.info(
        "conversion_started",
        input=args.input,
        languages=list(config.languages),
        extra_tags=list(config.extra_tags),
    )

    with ExitStack() as stack:
        source = (
            sys.stdin
            if args.input == "-"
            else stack.enter_context(open(args.input, encoding="utf-8"))
        )
        target = (
            sys.stdout
            if args.output == "-"
            else stack.enter_context(open(args.output, "w", encoding="utf-8"))
        )
        converted, rejected = convert_lines(source, config, target)

    logger.info("conversion_finished", converted=converted, rejected=rejected)
    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
