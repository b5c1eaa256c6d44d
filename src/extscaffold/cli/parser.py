"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("extscaffold")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extscaffold",
        description="Scaffold a web-capable editor extension or notebook renderer",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument(
        "--destination",
        "-d",
        default=".",
        help="Directory to generate into (default: current directory)",
    )
    parser.add_argument("--answers", default=None, help="JSON file with pre-filled answers; disables prompting")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Use the bundled version table and a fixed engine version instead of the release feed",
    )
    parser.add_argument(
        "--channel",
        choices=("stable", "insider"),
        default="insider",
        help="Release channel used to pick the engine version (default: insider)",
    )
    parser.add_argument("--skip-install", action="store_true", help="Do not install dependencies")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser
