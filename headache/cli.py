from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path
from typing import Optional

from .executor import Executor
from .repl import interpreter
from .streams import ByteSource, TextStreamSource, binary_sink, binary_source

logger = logging.getLogger(__name__)


def _load_script(path: str) -> str:
    script = Path(path)
    if not script.is_file():
        raise FileNotFoundError(f"No such script: {path}")
    # only instruction characters matter, undecodable comment bytes are replaced
    return script.read_bytes().decode("utf-8", errors="replace")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="headache", description="Headache Brainfuck interpreter")
    parser.add_argument("file", nargs="?", help="Brainfuck script file")
    parser.add_argument(
        "-e",
        "--execute",
        metavar="SOURCE",
        help="Execute literal script",
    )
    parser.add_argument(
        "-i",
        "--interpreter",
        action="store_true",
        help="Run Headache in real-time interpreter mode",
    )
    parser.add_argument(
        "--input",
        help="Input supplied to ',' instead of reading standard input",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    modes = [args.file is not None, args.execute is not None, args.interpreter]
    if sum(modes) != 1:
        parser.print_usage(sys.stderr)
        print(
            "Error: provide exactly one of a script file, -e SOURCE or -i",
            file=sys.stderr,
        )
        return 2

    source_stream: ByteSource
    if args.input is not None:
        source_stream = io.BytesIO(args.input.encode("utf-8"))
    elif args.interpreter:
        # lines and ',' bytes must come from the same buffered text stream
        source_stream = TextStreamSource(sys.stdin)
    else:
        source_stream = binary_source(sys.stdin)
    executor = Executor(input=source_stream, output=binary_sink(sys.stdout))

    if args.interpreter:
        logger.debug("Starting interactive interpreter")
        return interpreter(executor)

    if args.file is not None:
        try:
            code = _load_script(args.file)
        except OSError as exc:
            print(f"Cannot read the script: {exc}", file=sys.stderr)
            return 1
    else:
        code = args.execute

    logger.debug("Executing %d characters of source", len(code))
    result = executor.execute(code)
    if result.error is not None:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
