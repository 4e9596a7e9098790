"""Convert files to and from base64 text."""

from __future__ import annotations

import argparse
from pathlib import Path

from loguru import logger

from billbridge.application.codec import decode_base64, encode_base64
from billbridge.cli import configure_logging


def encode_file(source: Path, target: Path) -> int:
    """Write `source` as base64 text to `target`; returns the text length."""
    text = encode_base64(source.read_bytes())
    target.write_text(text, encoding="utf-8")
    return len(text)


def decode_file(source: Path, target: Path) -> int:
    """Write the bytes decoded from base64 text in `source`; returns the byte count."""
    data = decode_base64(source.read_text(encoding="utf-8"))
    target.write_bytes(data)
    return len(data)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Base64 file helper")
    parser.add_argument("command", choices=["encode", "decode"])
    parser.add_argument("input", type=Path)
    parser.add_argument("output", type=Path)
    args = parser.parse_args(argv)

    configure_logging()

    if not args.input.is_file():
        logger.error(f"Input file not found: {args.input}")
        return 1

    if args.command == "encode":
        length = encode_file(args.input, args.output)
        logger.info(f"Base64 generated: {length} chars -> {args.output}")
    else:
        size = decode_file(args.input, args.output)
        logger.info(f"Decoded {size} bytes -> {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
