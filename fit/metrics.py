from __future__ import annotations
import math
from collections import deque
from typing import Deque, Dict, Optional
import numpy as np

class EMA:
    """
    Exponential moving average of a loss curve. Non-finite values (a diverged
    step) are counted but leave the average where it was.
    """
    def __init__(self, alpha: float):
        if not 0.0 < alpha <= 1.0:
            raise ValueError("alpha must lie in (0, 1]")
        self.alpha = alpha
        self.value: Optional[float] = None
        self.seen = 0
        self.skipped = 0

    def update(self, x: float) -> Optional[float]:
        x = float(x)
        self.seen += 1
        if not math.isfinite(x):
            self.skipped += 1
            return self.value
        self.value = x if self.value is None else self.value + self.alpha * (x - self.value)
        return self.value

    def reset(self) -> None:
        self.value = None
        self.seen = self.skipped = 0

class WindowedStat:
    """Statistics over the last `window` values (e.g. the last N epoch losses)."""
    def __init__(self, window: int):
        if window <= 0:
            raise ValueError("window must be positive")
        self.window = window
        self.buf: Deque[float] = deque(maxlen=window)

    def add(self, x: float) -> None:
        self.buf.append(float(x))

    def full(self) -> bool:
        return len(self.buf) == self.window

    def summary(self) -> Dict[str, float]:
        if not self.buf:
            return {"mean": 0.0, "min": 0.0, "max": 0.0, "std": 0.0, "last": 0.0}
        b = np.fromiter(self.buf, dtype=float, count=len(self.buf))
        return {
            "mean": float(b.mean()),
            "min": float(b.min()),
            "max": float(b.max()),
            "std": float(b.std()),
            "last": float(b[-1]),
        }

def squared_error(output: np.ndarray, target: np.ndarray) -> float:
    """Half the summed squared error, the loss a gradient step descends."""
    d = np.asarray(output, dtype=float) - np.asarray(target, dtype=float)
    return 0.5 * float(np.dot(d, d))
