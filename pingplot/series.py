from typing import List, NamedTuple, Tuple

import numpy as np


class Sample(NamedTuple):
    x: float
    y: float


class SeriesSnapshot(NamedTuple):
    points: Tuple[Sample, ...]
    window: Tuple[float, float]
    next_x: float

    def xs(self) -> np.ndarray:
        return np.fromiter((p.x for p in self.points), dtype=float, count=len(self.points))

    def ys(self) -> np.ndarray:
        return np.fromiter((p.y for p in self.points), dtype=float, count=len(self.points))


class SlidingWindowSeries:
    """Bounded FIFO of latency samples with an x-axis window that scrolls with it.

    Points keep the index they were assigned on append, so once the buffer is
    full the window bounds move forward by one per sample instead of the data
    being re-indexed from zero.

    Not thread-safe: callers sharing an instance across threads hold a lock
    around `append` and `snapshot`.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.points: List[Sample] = []
        self.window = (0.0, float(capacity))
        self.next_x = 0.0

    def append(self, time: float):
        self.points.append(Sample(self.next_x, float(time)))
        self.next_x += 1.0
        if len(self.points) > self.capacity:
            self.points.pop(0)
            low, high = self.window
            self.window = (low + 1.0, high + 1.0)

    def snapshot(self) -> SeriesSnapshot:
        return SeriesSnapshot(tuple(self.points), self.window, self.next_x)

    def __len__(self):
        return len(self.points)
