"""Build-time entry point for static site tooling.

Usage::

    python -m app.cli static-params [--type destinations] [--strict]
    python -m app.cli sitemap [--output public/sitemap.xml]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import pathlib
import sys
from collections.abc import Iterable, Mapping
from typing import Any

from app.content.models import ContentType
from app.core.config import settings
from app.core.exceptions import InvalidInputError
from app.core.logging import configure_logging
from app.db.session import dispose_engine
from app.services.providers import build_services
from app.services.sitemap import SitemapUrlBuilder, render_sitemap_xml
from app.services.static_params import EnumerationResult, StaticParamEnumerator

logger = logging.getLogger(__name__)


def _result_payload(result: EnumerationResult) -> dict[str, Any]:
    return {
        "params": [param.as_dict() for param in result.params],
        "failures": [
            {"vertical": failure.vertical, "error": failure.error} for failure in result.failures
        ],
    }


async def _static_params(
    enumerator: StaticParamEnumerator, content_type: str | None
) -> dict[ContentType, EnumerationResult]:
    try:
        if content_type:
            parsed_type = ContentType.parse(content_type)
            return {parsed_type: await enumerator.enumerate(parsed_type)}
        return await enumerator.enumerate_pages()
    finally:
        await dispose_engine()


async def _sitemap(builder: SitemapUrlBuilder) -> bytes:
    try:
        result = await builder.build()
    finally:
        await dispose_engine()
    if result.failures:
        logger.warning("Sitemap is missing content from %d vertical sections", len(result.failures))
    return render_sitemap_xml(result.urls)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Static build helpers for the content engine")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Override LOG_LEVEL for this run",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    params_parser = commands.add_parser(
        "static-params", help="Print every (vertical, slug) pair as JSON"
    )
    params_parser.add_argument(
        "--type",
        dest="content_type",
        help="Content type to enumerate (default: every type with detail pages)",
    )
    params_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when any vertical failed to enumerate",
    )

    sitemap_parser = commands.add_parser("sitemap", help="Render sitemap.xml")
    sitemap_parser.add_argument(
        "--output",
        type=pathlib.Path,
        help="File to write (default: standard output)",
    )
    return parser


def run_static_params(
    services: Mapping[str, Any], content_type: str | None, strict: bool
) -> int:
    try:
        results = asyncio.run(_static_params(services["static_param_enumerator"], content_type))
    except InvalidInputError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    payload = {
        parsed_type.value: _result_payload(result) for parsed_type, result in results.items()
    }
    print(json.dumps(payload, indent=2))
    if strict and any(not result.ok for result in results.values()):
        return 1
    return 0


def run_sitemap(services: Mapping[str, Any], output: pathlib.Path | None) -> int:
    document = asyncio.run(_sitemap(services["sitemap_builder"]))
    if output is None:
        sys.stdout.buffer.write(document)
        sys.stdout.flush()
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(document)
        logger.info("Wrote sitemap to %s", output)
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(args.log_level)
    services = build_services(settings)

    if args.command == "static-params":
        return run_static_params(services, args.content_type, args.strict)
    return run_sitemap(services, args.output)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
