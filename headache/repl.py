from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .errors import BrainfuckError, UnclosedLoopError
from .executor import Executor

logger = logging.getLogger(__name__)

BANNER = "Write exit to finish the interpreter"
PROMPT = ">"
CONTINUATION_PROMPT = "==>"
EXIT_COMMAND = "exit"


def interpreter(
    executor: Executor,
    lines: Optional[TextIO] = None,
    prompt_stream: Optional[TextIO] = None,
    error_stream: Optional[TextIO] = None,
) -> int:
    """Read programs line by line and run each complete entry.

    An entry whose loops are still open keeps accumulating lines under the
    continuation prompt. Returns the process exit code.
    """
    lines = lines or sys.stdin
    prompt_stream = prompt_stream or sys.stdout
    error_stream = error_stream or sys.stderr

    buffer = ""
    print(BANNER, file=prompt_stream)
    while True:
        prompt_stream.write(CONTINUATION_PROMPT if buffer else PROMPT)
        prompt_stream.flush()
        line = lines.readline()
        if not line:
            logger.debug("Input stream closed, leaving the interpreter")
            return 0
        buffer += line
        if EXIT_COMMAND in buffer:
            return 0

        result = executor.execute(buffer)
        if isinstance(result.error, UnclosedLoopError):
            logger.debug("Loop opened at %d is still open, reading more", result.error.position)
            continue
        if result.error is not None:
            logger.debug("Entry failed: %r", result.error)
            print(f"Error: {result.error}", file=error_stream)
        buffer = ""


__all__ = ["interpreter", "BANNER", "PROMPT", "CONTINUATION_PROMPT", "EXIT_COMMAND"]
