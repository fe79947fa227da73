# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

from __future__ import annotations

import argparse
import asyncio
import logging
from pathlib import Path

import aiohttp

from .cache import refresh_blocking
from .models import ComponentUrlPath, RefreshConfig
from .utils import camel_case_to_pascal_case, normalize_identifier


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="propgen",
        description="Normalize binding names and refresh the cached API pages.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize_parser = subparsers.add_parser(
        "normalize",
        help="Print the identifier generated for each raw name.",
    )
    normalize_parser.add_argument("names", nargs="+", metavar="NAME")
    normalize_parser.add_argument(
        "--pascal",
        dest="pascal",
        action="store_true",
        help="Upper-case the first letter of each identifier.",
    )

    refresh_parser = subparsers.add_parser(
        "refresh",
        help="Download API pages into the HTML cache folder.",
    )
    refresh_parser.add_argument(
        "--base-url",
        dest="base_url",
        required=True,
        help="Prefix prepended to every page path.",
    )
    refresh_parser.add_argument(
        "--cache",
        dest="cache_folder",
        type=Path,
        required=True,
        help="Directory receiving one <NAME>.html file per page.",
    )
    refresh_parser.add_argument(
        "--page",
        dest="pages",
        action="append",
        default=None,
        metavar="NAME=PATH",
        help="Page to download, relative to the base URL. May be supplied multiple times.",
    )
    refresh_parser.add_argument(
        "--timeout",
        dest="timeout",
        type=float,
        default=30.0,
        help="Total timeout in seconds for each download.",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    if args.command == "normalize":
        for name in args.names:
            identifier = normalize_identifier(name)
            if args.pascal:
                identifier = camel_case_to_pascal_case(identifier)
            print(identifier)
        return 0

    pages = _parse_pages(args.pages or [])
    if not pages:
        parser.error("refresh requires at least one --page NAME=PATH")

    config = RefreshConfig(timeout=args.timeout)
    try:
        written = refresh_blocking(
            args.base_url, args.cache_folder, pages, config=config
        )
    except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
        print(f"error: Refresh of {args.cache_folder} aborted: {exc}")
        return 1

    print(f"info: Cached {len(written)} page(s) in {args.cache_folder}")
    return 0


def _parse_pages(values: list[str]) -> list[ComponentUrlPath]:
    pages: list[ComponentUrlPath] = []
    for raw in values:
        if "=" not in raw:
            raise SystemExit(f"Page '{raw}' must be provided in the form NAME=PATH")
        name, url = raw.split("=", maxsplit=1)
        name = name.strip()
        if not name:
            raise SystemExit("Page mapping requires a non-empty name before '='")
        pages.append(ComponentUrlPath(name=name, url=url.strip()))
    return pages


__all__ = ["main", "build_parser"]
