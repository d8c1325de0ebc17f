"""Command that reports the language of a line typed on standard input."""

from __future__ import annotations

import argparse
import sys

from langsniff.detect import detect


def main(argv: list[str] | None = None) -> int:
    """Read one line from standard input and print its detected language."""
    parser = argparse.ArgumentParser(
        prog="langsniff",
        description="Detect the language of a line read from standard input.",
    )
    parser.parse_args(argv)

    print("Please enter a text:")
    text = sys.stdin.readline()

    info = detect(text)
    if info is None:
        print("Cannot recognize a language :(")
    else:
        print(f"Language: {info.lang}")
        print(f"Info: {info!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())