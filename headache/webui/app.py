from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel, Field, field_validator

from headache.errors import BrainfuckError, StepLimitExceeded
from headache.executor import Executor
from headache.loops import JumpTable, resolve_loops

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 1_000_000
MAX_STEPS_CAP = 10_000_000


@dataclass
class BoundedExecutor(Executor):
    """Executor that stops a run after ``max_steps`` dispatched instructions."""

    max_steps: int = DEFAULT_MAX_STEPS
    steps: int = field(init=False, default=0, repr=False)

    def reset(self) -> None:
        super().reset()
        self.steps = 0

    def _execute_instruction(self, command: str, pc: int, jump_table: JumpTable) -> int:
        if self.steps >= self.max_steps:
            raise StepLimitExceeded(pc, self.max_steps)
        self.steps += 1
        return super()._execute_instruction(command, pc, jump_table)


class ErrorPayload(BaseModel):
    kind: str
    position: int
    message: str


def _error_payload(error: Optional[BrainfuckError]) -> Optional[ErrorPayload]:
    if error is None:
        return None
    return ErrorPayload(kind=error.kind.value, position=error.position, message=error.message)


class RunRequest(BaseModel):
    code: str
    input: str = ""
    max_steps: int = Field(default=DEFAULT_MAX_STEPS, ge=1, le=MAX_STEPS_CAP)

    @field_validator("input")
    @classmethod
    def validate_input(cls, value: str) -> str:
        for ch in value:
            if ord(ch) > 255:
                raise ValueError(f"input character {ch!r} is outside the byte range")
        return value


class RunResponse(BaseModel):
    ok: bool
    output: str
    output_bytes: List[int]
    error: Optional[ErrorPayload]


class ResolveRequest(BaseModel):
    code: str


class ResolveResponse(BaseModel):
    balanced: bool
    pairs: List[List[int]]
    error: Optional[ErrorPayload]


def create_app() -> FastAPI:
    app = FastAPI(title="Headache API", version="0.1.0")

    @app.post("/api/run", response_model=RunResponse)
    def run_program(payload: RunRequest) -> RunResponse:
        output = io.BytesIO()
        executor = BoundedExecutor(
            input=io.BytesIO(payload.input.encode("latin-1")),
            output=output,
            max_steps=payload.max_steps,
        )
        result = executor.execute(payload.code)
        if isinstance(result.error, StepLimitExceeded):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(result.error))
        if result.error is not None:
            logger.info("Program failed: %s", result.error)
        produced = output.getvalue()
        return RunResponse(
            ok=result.ok,
            output=produced.decode("latin-1"),
            output_bytes=list(produced),
            error=_error_payload(result.error),
        )

    @app.post("/api/resolve", response_model=ResolveResponse)
    def resolve_program(payload: ResolveRequest) -> ResolveResponse:
        try:
            table = resolve_loops(payload.code)
        except BrainfuckError as exc:
            return ResolveResponse(balanced=False, pairs=[], error=_error_payload(exc))
        return ResolveResponse(
            balanced=True,
            pairs=[[start, end] for start, end in table.pairs()],
            error=None,
        )

    return app


__all__ = ["create_app"]
