"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Optional, TextIO


class Stacks:
    """Stacks ``a`` and ``b``, tops at the left, with a log of the operations applied.

    Each operation is recorded in ``operations`` and, when ``output`` is given,
    also written to it as one line.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        output: Optional[TextIO] = None,
    ) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.output = output
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str) -> None:
        self.operations.append(name)
        if self.output is not None:
            self.output.write(name + "\n")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b``; always recorded as 'pb'."""
        if self.a:
            self.b.appendleft(self.a.popleft())
        self._record("pb")

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a``; always recorded as 'pa'."""
        if self.b:
            self.a.appendleft(self.b.popleft())
        self._record("pa")

    def rotate_a(self) -> None:
        """Send the top of ``a`` to its bottom; always recorded as 'ra'."""
        if len(self.a) > 1:
            self.a.rotate(-1)
        self._record("ra")

    def swap_a(self) -> None:
        """Swap the two top values of ``a``; nothing happens with fewer than two."""
        if len(self.a) < 2:
            return
        self.a[0], self.a[1] = self.a[1], self.a[0]
        self._record("sa")

    def swap_b(self) -> None:
        """Swap the two top values of ``b``; nothing happens with fewer than two."""
        if len(self.b) < 2:
            return
        self.b[0], self.b[1] = self.b[1], self.b[0]
        self._record("sb")