from .errors import (
    BrainfuckError,
    ErrorKind,
    InputError,
    OutputError,
    PointerUnderflowError,
    StepLimitExceeded,
    UnbalancedBracketsError,
    UnclosedLoopError,
    UnexpectedLoopCloseError,
)
from .executor import ExecutionResult, Executor, run
from .loops import JumpTable, resolve_loops

__all__ = [
    "BrainfuckError",
    "ErrorKind",
    "ExecutionResult",
    "Executor",
    "InputError",
    "JumpTable",
    "OutputError",
    "PointerUnderflowError",
    "StepLimitExceeded",
    "UnbalancedBracketsError",
    "UnclosedLoopError",
    "UnexpectedLoopCloseError",
    "resolve_loops",
    "run",
]
