from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict
import numpy as np

ArrayFn = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True)
class Activation:
    """
    Value/derivative pair applied element-wise to a whole array.
    Both callables must accept and return numpy arrays.
    """
    name: str
    value: ArrayFn
    derivative: ArrayFn

    @classmethod
    def from_scalar(cls, name: str, value: Callable[[float], float],
                    derivative: Callable[[float], float]) -> "Activation":
        """Wrap plain float -> float functions (e.g. math.tanh)."""
        return cls(
            name=name,
            value=np.vectorize(value, otypes=[float]),
            derivative=np.vectorize(derivative, otypes=[float]),
        )


def _sigmoid(x: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-x))


def identity() -> Activation:
    return Activation("identity", lambda x: x, np.ones_like)


def sigmoid() -> Activation:
    def derivative(x: np.ndarray) -> np.ndarray:
        s = _sigmoid(x)
        return s * (1.0 - s)
    return Activation("sigmoid", _sigmoid, derivative)


def tanh() -> Activation:
    return Activation("tanh", np.tanh, lambda x: 1.0 - np.tanh(x) ** 2)


def relu() -> Activation:
    return Activation(
        "relu",
        lambda x: np.maximum(x, 0),
        lambda x: (x > 0).astype(np.result_type(x, np.float32)),
    )


def step() -> Activation:
    """Heaviside step; derivative is 1 so it can still drive gradient updates."""
    return Activation(
        "step",
        lambda x: (x >= 0).astype(np.result_type(x, np.float32)),
        np.ones_like,
    )


CATALOG: Dict[str, Callable[[], Activation]] = {
    "identity": identity,
    "sigmoid": sigmoid,
    "tanh": tanh,
    "relu": relu,
    "step": step,
}


def by_name(name: str) -> Activation:
    try:
        return CATALOG[name]()
    except KeyError:
        raise KeyError(f"unknown activation {name!r}; expected one of {sorted(CATALOG)}") from None
