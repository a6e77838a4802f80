from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .errors import (
    BrainfuckError,
    InputError,
    OutputError,
    PointerUnderflowError,
)
from .loops import JumpTable, resolve_loops
from .streams import ByteSink, ByteSource, IterableSource, binary_sink, binary_source


@dataclass
class ExecutionResult:
    error: Optional[BrainfuckError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass
class Executor:
    """Runs Brainfuck programs against a byte source and a byte sink.

    Every call to :meth:`execute` starts from a fresh tape with the data
    pointer at 0. The source and sink are kept between calls, so input
    consumed by one run is not seen again by the next.

    Reading past the end of the input leaves the current cell unchanged.
    """

    input: ByteSource = field(default_factory=lambda: binary_source(sys.stdin))
    output: ByteSink = field(default_factory=lambda: binary_sink(sys.stdout))
    initial_tape_length: int = 1

    tape: bytearray = field(init=False, repr=False)
    pointer: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.initial_tape_length < 1:
            raise ValueError("initial_tape_length must be at least 1")
        self.reset()

    def reset(self) -> None:
        self.tape = bytearray(self.initial_tape_length)
        self.pointer = 0

    def execute(self, code: str) -> ExecutionResult:
        try:
            jump_table = resolve_loops(code)
        except BrainfuckError as exc:
            return ExecutionResult(exc)

        self.reset()
        pc = 0
        code_length = len(code)
        try:
            while pc < code_length:
                pc = self._execute_instruction(code[pc], pc, jump_table)
        except BrainfuckError as exc:
            return ExecutionResult(exc)
        return ExecutionResult()

    def _execute_instruction(self, command: str, pc: int, jump_table: JumpTable) -> int:
        new_pc = pc + 1
        if command == ">":
            self.pointer += 1
            if self.pointer == len(self.tape):
                self.tape.append(0)
        elif command == "<":
            if self.pointer == 0:
                raise PointerUnderflowError(pc)
            self.pointer -= 1
        elif command == "+":
            self.tape[self.pointer] = (self.tape[self.pointer] + 1) % 256
        elif command == "-":
            self.tape[self.pointer] = (self.tape[self.pointer] - 1) % 256
        elif command == ".":
            try:
                self.output.write(bytes((self.tape[self.pointer],)))
                self.output.flush()
            except (OSError, ValueError) as exc:
                raise OutputError(pc, exc) from exc
        elif command == ",":
            try:
                data = self.input.read(1)
            except (OSError, ValueError) as exc:
                raise InputError(pc, exc) from exc
            if data:
                self.tape[self.pointer] = data[0]
        elif command == "[":
            if self.tape[self.pointer] == 0:
                new_pc = jump_table[pc] + 1
        elif command == "]":
            if self.tape[self.pointer] != 0:
                new_pc = jump_table[pc] + 1
        return new_pc


def run(code: str, input_data: Union[bytes, Iterable[int]] = b"") -> bytes:
    """Run ``code`` on in-memory streams and return everything it wrote.

    Raises the :class:`BrainfuckError` describing the failure, if any.
    """
    source: ByteSource
    if isinstance(input_data, (bytes, bytearray)):
        source = io.BytesIO(input_data)
    else:
        source = IterableSource(input_data)
    output = io.BytesIO()
    Executor(input=source, output=output).execute(code).raise_for_error()
    return output.getvalue()


__all__ = ["ExecutionResult", "Executor", "run"]
