from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Sequence, Tuple

from .errors import UnclosedLoopError, UnexpectedLoopCloseError


@dataclass(frozen=True)
class JumpTable:
    """Bidirectional mapping between matching ``[`` and ``]`` positions."""

    targets: Dict[int, int] = field(default_factory=dict)

    def __getitem__(self, position: int) -> int:
        return self.targets[position]

    def __contains__(self, position: object) -> bool:
        return position in self.targets

    def __len__(self) -> int:
        return len(self.targets)

    def __iter__(self) -> Iterator[int]:
        return iter(self.targets)

    def pairs(self) -> List[Tuple[int, int]]:
        """Return ``(open, close)`` pairs ordered by the opening position."""
        return sorted((start, end) for start, end in self.targets.items() if start < end)


def resolve_loops(source: Sequence[str]) -> JumpTable:
    targets: Dict[int, int] = {}
    stack: List[int] = []
    for index, char in enumerate(source):
        if char == "[":
            stack.append(index)
        elif char == "]":
            if not stack:
                raise UnexpectedLoopCloseError(index)
            start = stack.pop()
            targets[start] = index
            targets[index] = start
    if stack:
        # outermost unclosed loop
        raise UnclosedLoopError(stack[0])
    return JumpTable(targets)


__all__ = ["JumpTable", "resolve_loops"]
