"""Command-line entry point: product actions and the HTTP server."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from pathlib import Path
from typing import Any, Sequence

import yaml

from hexstore.cli_adapter import run
from hexstore.db import ProductDb, create_schema
from hexstore.service import ProductService
from hexstore.web import serve

DB_PATH = "db.sqlite"
_CONFIG_NAME = ".hexstore"
_CONFIG_EXTENSIONS = (".yaml", ".yml", ".json")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the "cli" and "http" commands."""
    parser = argparse.ArgumentParser(prog="hexstore", description="Product store.")
    parser.add_argument(
        "--config", default="", help="config file (default is $HOME/.hexstore.yaml)"
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="toggle")
    commands = parser.add_subparsers(dest="command")

    cli_cmd = commands.add_parser("cli", help="run a product action")
    cli_cmd.add_argument("-a", "--action", default="enabled", help="Enable / Disable product")
    cli_cmd.add_argument("-i", "--id", dest="product_id", default="", help="product id")
    cli_cmd.add_argument("-n", "--name", dest="product_name", default="", help="product name")
    cli_cmd.add_argument(
        "-p", "--price", dest="product_price", type=float, default=0.0, help="product price"
    )

    commands.add_parser("http", help="start the web server")
    return parser


def load_config(path: str | None = None) -> dict[str, Any]:
    """Read the config file, if one is found; unreadable files give an empty mapping."""
    if path:
        candidates = [Path(path)]
    else:
        home = Path.home()
        candidates = [home / f"{_CONFIG_NAME}{ext}" for ext in _CONFIG_EXTENSIONS]

    for candidate in candidates:
        if not candidate.is_file():
            continue
        try:
            data = yaml.safe_load(candidate.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError):
            return {}
        print("Using config file:", candidate, file=sys.stderr)
        return data if isinstance(data, dict) else {}
    return {}


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the chosen command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    load_config(args.config)

    if args.command is None:
        parser.print_help()
        return 0

    with closing(sqlite3.connect(DB_PATH)) as connection:
        create_schema(connection)
        service = ProductService(ProductDb(connection))
        if args.command == "cli":
            result = ""
            try:
                result = run(
                    service,
                    args.action,
                    args.product_id,
                    args.product_name,
                    args.product_price,
                )
            except (ValueError, LookupError, sqlite3.Error) as exc:
                print(str(exc))
            print(result)
        else:
            print("Webserver has been started")
            serve(service)
    return 0


if __name__ == "__main__":
    sys.exit(main())