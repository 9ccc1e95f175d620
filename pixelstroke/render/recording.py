"""A pixel sink that records stamp calls instead of painting them."""

from __future__ import annotations

from typing import NamedTuple


class StampOp(NamedTuple):
    """One recorded stamp call.

    Attributes:
        kind: 'point', 'line' or 'hline'.
        args: The call arguments: (x, y), (x1, y1, x2, y2) or (x1, y, x2).
    """
    kind: str
    args: tuple


class RecordingSink:
    """Record every stamp call, in order.

    Useful for previews that only need geometry and for tests.

    Example:
        >>> sink = RecordingSink()
        >>> sink.stamp_point(1, 2)
        >>> sink.stamp_hline(0, 3, 4)
        >>> sink.ops
        [StampOp(kind='point', args=(1, 2)), StampOp(kind='hline', args=(0, 3, 4))]
    """

    def __init__(self):
        self.ops: list[StampOp] = []

    def stamp_point(self, x: int, y: int) -> None:
        self.ops.append(StampOp('point', (x, y)))

    def stamp_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        self.ops.append(StampOp('line', (x1, y1, x2, y2)))

    def stamp_hline(self, x1: int, y: int, x2: int) -> None:
        self.ops.append(StampOp('hline', (x1, y, x2)))

    def points(self) -> list[tuple]:
        """Arguments of the point stamps, in call order."""
        return [op.args for op in self.ops if op.kind == 'point']

    def lines(self) -> list[tuple]:
        """Arguments of the line stamps, in call order."""
        return [op.args for op in self.ops if op.kind == 'line']

    def hlines(self) -> list[tuple]:
        """Arguments of the horizontal run stamps, in call order."""
        return [op.args for op in self.ops if op.kind == 'hline']

    def count(self, kind: str | None = None) -> int:
        if kind is None:
            return len(self.ops)
        return sum(1 for op in self.ops if op.kind == kind)

    def clear(self) -> None:
        self.ops.clear()

    def __len__(self) -> int:
        return len(self.ops)
