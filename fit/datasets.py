from __future__ import annotations
from typing import List, Sequence
import numpy as np

from interfaces import Sample

GATES = {
    "and": lambda a, b: a and b,
    "or": lambda a, b: a or b,
    "nand": lambda a, b: not (a and b),
}

def logic_gate(name: str, bias_input: bool = True) -> List[Sample]:
    """
    Truth table of a two-input gate. With `bias_input` a constant 1 is appended
    to every input, since the training rules never move the layer's biases.
    """
    try:
        gate = GATES[name]
    except KeyError:
        raise ValueError(f"unknown gate {name!r}; expected one of {sorted(GATES)}") from None
    samples = []
    for a in (0, 1):
        for b in (0, 1):
            x = [a, b, 1] if bias_input else [a, b]
            samples.append(Sample.of(x, [1.0 if gate(a, b) else 0.0]))
    return samples

def linear_regression(weights: Sequence[Sequence[float]], bias: Sequence[float], n: int,
                      seed: int | None = None, noise: float = 0.0) -> List[Sample]:
    """n samples of y = W @ x + b (+ gaussian noise) with x ~ U[-1, 1]."""
    w = np.asarray(weights, dtype=float)
    if w.ndim != 2:
        raise ValueError("weights must have shape (outputs, inputs)")
    b = np.asarray(bias, dtype=float).reshape(-1)
    if b.shape[0] != w.shape[0]:
        raise ValueError("bias length must match the number of weight rows")
    rng = np.random.default_rng(seed)
    xs = rng.uniform(-1.0, 1.0, size=(n, w.shape[1]))
    ys = xs @ w.T + b
    if noise > 0:
        ys = ys + rng.normal(0.0, noise, size=ys.shape)
    return [Sample.of(x, y) for x, y in zip(xs, ys)]
