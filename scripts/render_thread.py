from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path

from dotenv import load_dotenv

from threadwalk.ingest import load_thread
from threadwalk.render import render_thread
from threadwalk.settings import get_settings


def parse_args() -> argparse.Namespace:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    parser = argparse.ArgumentParser(description="Render a threaded comment file with a depth cap.")
    parser.add_argument("thread", type=Path, help="Thread file (.json, .yaml, .yml or .toml)")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Depth cap: -1 flat, 0 unlimited, N levels (default: file value, then THREAD_MAX_DEPTH)",
    )
    parser.add_argument(
        "--format",
        choices=["outline", "json"],
        default="outline",
        help="Output format (default: outline)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    document = load_thread(args.thread)
    if args.max_depth is not None:
        max_depth = args.max_depth
    elif document.max_depth is not None:
        max_depth = document.max_depth
    else:
        max_depth = settings.max_depth

    rendering = render_thread(document.to_comments(), max_depth, indent=settings.outline_indent)

    if args.format == "json":
        payload = [
            {
                "comment": asdict(entry.comment),
                "depth": entry.depth,
                "has_children": entry.has_children,
            }
            for entry in rendering.entries
        ]
        print(json.dumps(payload, indent=2))
    else:
        if document.title:
            print(document.title)
        print(rendering.outline)


if __name__ == "__main__":
    main()
