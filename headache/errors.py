from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    UNBALANCED_BRACKETS = "unbalanced_brackets"
    POINTER_UNDERFLOW = "pointer_underflow"
    OUTPUT_FAILURE = "output_failure"
    INPUT_FAILURE = "input_failure"
    STEP_LIMIT_EXCEEDED = "step_limit_exceeded"


class BrainfuckError(Exception):
    """Base class for every error the virtual machine reports.

    ``kind`` identifies the failure and ``position`` is the index into the
    program source where it was detected.
    """

    kind: ErrorKind

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.message = message
        self.position = position

    def __str__(self) -> str:
        return f"{self.message} (at position {self.position})"


class UnbalancedBracketsError(BrainfuckError):
    kind = ErrorKind.UNBALANCED_BRACKETS


class UnclosedLoopError(UnbalancedBracketsError):
    def __init__(self, position: int) -> None:
        super().__init__("All the '[' instructions must be closed with a ']' instruction", position)


class UnexpectedLoopCloseError(UnbalancedBracketsError):
    def __init__(self, position: int) -> None:
        super().__init__("Cannot close ']' without first opening '['", position)


class PointerUnderflowError(BrainfuckError):
    kind = ErrorKind.POINTER_UNDERFLOW

    def __init__(self, position: int) -> None:
        super().__init__("Pointer moved before start of tape", position)


class StreamError(BrainfuckError):
    """An I/O collaborator failed; the original exception is kept as ``cause``."""

    def __init__(self, message: str, position: int, cause: Optional[BaseException] = None) -> None:
        super().__init__(message, position)
        self.cause = cause


class OutputError(StreamError):
    kind = ErrorKind.OUTPUT_FAILURE

    def __init__(self, position: int, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Cannot write to the output stream: {cause}", position, cause)


class InputError(StreamError):
    kind = ErrorKind.INPUT_FAILURE

    def __init__(self, position: int, cause: Optional[BaseException] = None) -> None:
        super().__init__(f"Cannot read from the input stream: {cause}", position, cause)


class StepLimitExceeded(BrainfuckError):
    """Raised by bounded runners when a program dispatches more instructions than allowed."""

    kind = ErrorKind.STEP_LIMIT_EXCEEDED

    def __init__(self, position: int, max_steps: int) -> None:
        super().__init__(f"Program exceeded the allowed {max_steps} steps", position)
        self.max_steps = max_steps


__all__ = [
    "BrainfuckError",
    "ErrorKind",
    "InputError",
    "OutputError",
    "PointerUnderflowError",
    "StepLimitExceeded",
    "StreamError",
    "UnbalancedBracketsError",
    "UnclosedLoopError",
    "UnexpectedLoopCloseError",
]
