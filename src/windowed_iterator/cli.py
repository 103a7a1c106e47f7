"""Command line interface for windowed-iterator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from . import __version__
from .config import WindowConfig, load_window_config
from .logging_utils import configure_logging, log_event

logger = logging.getLogger(__name__)


def _print_result(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
    else:
        print(result)


def _resolve_config(args: argparse.Namespace) -> WindowConfig:
    data: dict[str, Any] = {}
    if args.config:
        data = load_window_config(args.config).model_dump(by_alias=True)
    if args.size is not None:
        data["window_size"] = args.size
    if args.lines:
        data["split"] = "lines"
    if "window_size" not in data:
        raise ValueError("A window size is required (--size or window_size in --config)")
    return WindowConfig.model_validate(data)


def cmd_slide(args: argparse.Namespace) -> None:
    cfg = _resolve_config(args)
    if args.input is None or str(args.input) == "-":
        text = sys.stdin.read()
        source = "<stdin>"
    else:
        if not args.input.exists():
            raise FileNotFoundError(f"Input file not found: {args.input}")
        text = args.input.read_text(encoding="utf-8")
        source = str(args.input)

    tokens = cfg.tokenize(text)
    collected: list[list[str]] = []
    for window in cfg.apply(tokens):
        collected.append(window)
        if args.json:
            print(json.dumps(window))
        else:
            print(" ".join(window))

    log_event(
        logger,
        "slide.complete",
        source=source,
        tokens=len(tokens),
        window_size=cfg.window_size,
        windows=len(collected),
    )

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        payload = {"window_size": cfg.window_size, "count": len(collected), "windows": collected}
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def cmd_validate(args: argparse.Namespace) -> None:
    cfg = load_window_config(args.config)
    if args.json:
        _print_result(cfg.model_dump(by_alias=True), as_json=True)
    else:
        print(f"Valid config: window_size={cfg.window_size} copy={cfg.copy_mode} split={cfg.split}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="windowed",
        description="Slide a fixed-size window over the tokens of a text stream.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs")

    sub = parser.add_subparsers(dest="command", required=True)

    slide = sub.add_parser("slide", help="Print every window of the input tokens")
    slide.add_argument("input", nargs="?", type=Path, help="Text file to read (default: stdin)")
    slide.add_argument("--size", type=int, help="Number of tokens per window")
    slide.add_argument("--config", type=Path, help="Window config (YAML or JSON)")
    slide.add_argument("--lines", action="store_true", help="Treat each non-blank line as one token")
    slide.add_argument("--output", type=Path, help="Write all windows to this JSON file")
    slide.add_argument("--json", action="store_true", help="Print windows as JSON arrays")
    slide.set_defaults(func=cmd_slide)

    validate = sub.add_parser("validate", help="Validate a window config file")
    validate.add_argument("config", type=Path, help="Path to configuration file")
    validate.add_argument("--json", action="store_true", help="Emit the normalized config as JSON")
    validate.set_defaults(func=cmd_validate)

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs)
    try:
        args.func(args)
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
