#!/usr/bin/env python3
"""Convert subscription and playlist files from the command line.

Imports print the canonical JSON on stdout; exports read canonical JSON and
write the interchange file.
"""

from __future__ import annotations

import argparse
import json
import logging
import mimetypes
import sys
from dataclasses import asdict
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from formats import ConversionError, Playlist, SubscriptionEntry, UnsupportedFormatError  # noqa: E402
from playlist import export_playlists, import_playlists  # noqa: E402
from subscriptions import export_subscriptions, import_subscriptions  # noqa: E402

logger = logging.getLogger("convert")


def _guess_content_type(path: Path) -> str | None:
    content_type, _ = mimetypes.guess_type(path.name)
    return content_type


def _load_items(path: Path, key: str) -> list[dict]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"{path}: expected a JSON object")
    items = payload.get(key) or []
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise ValueError(f"{path}: \"{key}\" must be a list of objects")
    return items


def _import_subscriptions(args: argparse.Namespace) -> dict:
    path = Path(args.path)
    content_type = args.content_type or _guess_content_type(path)
    channel_ids = import_subscriptions(path.read_bytes(), content_type)
    logger.info("Read %d channel(s) from %s", len(channel_ids), path)
    return {"channel_ids": channel_ids}


def _import_playlists(args: argparse.Namespace) -> dict:
    path = Path(args.path)
    content_type = args.content_type or _guess_content_type(path)
    playlists = import_playlists(path.read_bytes(), content_type)
    logger.info("Read %d playlist(s) from %s", len(playlists), path)
    return {"playlists": [asdict(playlist) for playlist in playlists]}


def _export_subscriptions(args: argparse.Namespace) -> None:
    items = _load_items(Path(args.input), "subscriptions")

    def source() -> list[SubscriptionEntry]:
        return [
            SubscriptionEntry(name=item.get("name"), url=item.get("url"))
            for item in items
        ]

    Path(args.output).write_bytes(export_subscriptions(source))
    logger.info("Wrote subscriptions to %s", args.output)


def _export_playlists(args: argparse.Namespace) -> None:
    items = _load_items(Path(args.input), "playlists")

    def source() -> list[Playlist]:
        return [
            Playlist(
                name=item.get("name"),
                videos=item.get("videos") or [],
                type=item.get("type"),
                visibility=item.get("visibility"),
            )
            for item in items
        ]

    Path(args.output).write_bytes(export_playlists(source))
    logger.info("Wrote playlists to %s", args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Import or export subscription and playlist files.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    commands = parser.add_subparsers(dest="command", required=True)

    for name, handler in (
        ("import-subscriptions", _import_subscriptions),
        ("import-playlists", _import_playlists),
    ):
        command = commands.add_parser(name, help=f"{name.replace('-', ' ')} from a file")
        command.add_argument("path", help="File to read.")
        command.add_argument(
            "--content-type",
            default=None,
            help="Declared content type; guessed from the file name when omitted.",
        )
        command.set_defaults(handler=handler, prints=True)

    for name, handler in (
        ("export-subscriptions", _export_subscriptions),
        ("export-playlists", _export_playlists),
    ):
        command = commands.add_parser(name, help=f"{name.replace('-', ' ')} to a file")
        command.add_argument("input", help="Canonical JSON to read.")
        command.add_argument("output", help="Interchange file to write.")
        command.set_defaults(handler=handler, prints=False)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        result = args.handler(args)
    except UnsupportedFormatError as exc:
        print(f"Unsupported file type ({exc.content_type})", file=sys.stderr)
        return 1
    except ConversionError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.prints:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
