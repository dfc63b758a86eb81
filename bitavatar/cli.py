"""Command line entry point: python -m bitavatar."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import AvatarConfig
from .core import Avatar, AvatarError, generate_key_avatar
from .output import delete_avatar, get_avatar_html, get_avatar_path, load_avatar, save_avatar


def render_text(avatar: Avatar, on: str = "#", off: str = ".") -> str:
    """Plain-text rendering, one line per row."""
    lines = []
    for y in range(avatar.height):
        line = "".join(on if avatar.get_pixel(x, y) else off for x in range(avatar.width))
        lines.append(line)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bitavatar", description="Generate random bitmap avatars.")
    parser.add_argument("--config", type=Path, help="JSON config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate and save an avatar")
    gen.add_argument("key")
    gen.add_argument("--width", type=int)
    gen.add_argument("--height", type=int)
    gen.add_argument("--method", help="'symmetric' or 'none'")
    gen.add_argument("--folder")

    path = sub.add_parser("path", help="Print the file path for a key")
    path.add_argument("key")
    path.add_argument("--folder")

    html = sub.add_parser("html", help="Print an <img> tag for a key")
    html.add_argument("key")
    html.add_argument("--base-url")
    html.add_argument("--width", type=int)
    html.add_argument("--height", type=int)

    delete = sub.add_parser("delete", help="Delete a saved avatar")
    delete.add_argument("key")
    delete.add_argument("--folder")

    show = sub.add_parser("show", help="Print a saved avatar as text")
    show.add_argument("key")
    show.add_argument("--folder")

    return parser


def _pick(value, default):
    return default if value is None else value


def run(args: argparse.Namespace, config: AvatarConfig) -> int:
    folder = _pick(getattr(args, "folder", None), config.folder)

    if args.command == "generate":
        key_avatar = generate_key_avatar(
            args.key,
            _pick(args.width, config.width),
            _pick(args.height, config.height),
            _pick(args.method, config.method),
        )
        print(save_avatar(folder, key_avatar))
    elif args.command == "path":
        print(get_avatar_path(folder, args.key))
    elif args.command == "html":
        print(get_avatar_html(
            _pick(args.base_url, config.base_url),
            args.key,
            _pick(args.width, config.width),
            _pick(args.height, config.height),
        ))
    elif args.command == "delete":
        delete_avatar(folder, args.key)
    elif args.command == "show":
        print(render_text(load_avatar(folder, args.key).avatar))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the bitavatar command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(name)s %(levelname)s: %(message)s",
    )
    config = AvatarConfig.load(args.config)

    try:
        return run(args, config)
    except (AvatarError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
