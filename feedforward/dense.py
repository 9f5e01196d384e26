from __future__ import annotations
from typing import Callable, Sequence
import numpy as np

from .activations import Activation
from .training import GradientDescent, PerceptronRule


class DenseLayer:
    """
    Feedforward layer: every input is connected to every output.

        Y = f(W @ X + B)

    W is kept as a flat row-major buffer of shape (outputs, inputs), so the
    weight from input i to output j lives at index j * input_size + i.
    The bias vector is the only source of the output size.

    Inputs and targets of any length are accepted: sums run over
    min(input_size, len(input)) terms and missing targets count as 0.
    """

    def __init__(self, input_size: int, output_size: int, activation: Activation,
                 dtype=np.float64):
        """All weights set to 1, all biases set to 0."""
        _check_sizes(input_size, output_size)
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.floating):
            raise TypeError(f"dtype must be a floating-point type, got {dtype}")
        self._input_size = int(input_size)
        self.activation = activation
        self._weights = np.ones(input_size * output_size, dtype=dtype)
        self._biases = np.zeros(output_size, dtype=dtype)

    @classmethod
    def new_from(cls, input_size: int, output_size: int, activation: Activation,
                 generator: Callable[[], float], dtype=np.float64) -> "DenseLayer":
        """
        Weights then biases drawn from `generator`, one call per element in
        flat order. A seeded generator therefore always rebuilds the same layer.
        """
        if not callable(generator):
            raise TypeError("generator must be a zero-argument callable")
        layer = cls(input_size, output_size, activation, dtype=dtype)
        n_weights = layer.weights.size
        layer.weights = np.fromiter((generator() for _ in range(n_weights)), dtype=dtype, count=n_weights)
        layer.biases = np.fromiter((generator() for _ in range(output_size)), dtype=dtype, count=output_size)
        return layer

    # ---------- Buffers ----------
    @property
    def weights(self) -> np.ndarray:
        """Flat row-major weights; may be edited in place, replaced only by a same-length buffer."""
        return self._weights

    @weights.setter
    def weights(self, values: Sequence[float]) -> None:
        self._weights = self._replacement(values, self._weights.size, "weights")

    @property
    def biases(self) -> np.ndarray:
        return self._biases

    @biases.setter
    def biases(self, values: Sequence[float]) -> None:
        self._biases = self._replacement(values, self._biases.size, "biases")

    def _replacement(self, values: Sequence[float], size: int, name: str) -> np.ndarray:
        arr = np.array(values, dtype=self.dtype).reshape(-1)
        if arr.size != size:
            raise ValueError(f"{name} must have {size} elements, got {arr.size}")
        return arr

    # ---------- Sizes ----------
    @property
    def input_size(self) -> int:
        return self._input_size

    @property
    def output_size(self) -> int:
        return len(self._biases)

    @property
    def dtype(self) -> np.dtype:
        return self._weights.dtype

    @property
    def weight_matrix(self) -> np.ndarray:
        """(output_size, input_size) view; writes go to the flat buffer."""
        return self.weights.reshape(self.output_size, self._input_size)

    # ---------- Forward ----------
    def _as_vector(self, values: Sequence[float]) -> np.ndarray:
        return np.asarray(values, dtype=self.dtype).reshape(-1)

    def _net(self, x: np.ndarray) -> np.ndarray:
        n = min(self._input_size, len(x))
        return self.biases + self.weight_matrix[:, :n] @ x[:n]

    def _target(self, target: Sequence[float]) -> np.ndarray:
        t = self._as_vector(target)
        out = np.zeros(self.output_size, dtype=self.dtype)
        m = min(self.output_size, len(t))
        out[:m] = t[:m]
        return out

    def compute(self, input: Sequence[float]) -> np.ndarray:
        x = self._as_vector(input)
        return np.asarray(self.activation.value(self._net(x)), dtype=self.dtype)

    # ---------- Training ----------
    def supervised_train(self, rule: PerceptronRule | GradientDescent,
                         input: Sequence[float], target: Sequence[float]) -> None:
        if isinstance(rule, GradientDescent):
            self.backprop_train(rule, input, target)
            return
        if not isinstance(rule, PerceptronRule):
            raise TypeError(f"supervised_train does not support {type(rule).__name__}")

        x = self._as_vector(input)
        n = min(self._input_size, len(x))
        diff = self._target(target) - self.compute(x)
        self.weight_matrix[:, :n] += rule.rate * np.outer(diff, x[:n])

    def backprop_train(self, rule: GradientDescent,
                       input: Sequence[float], target: Sequence[float]) -> np.ndarray:
        """
        Gradient step on the weights; biases stay fixed.

        Returns `input - W.T @ delta` (delta = f'(net)), over the first
        min(input_size, len(input)) positions, computed with the weights as
        they were before this step. Positions past input_size keep the raw
        input value. The result has the length of `input`.
        """
        if not isinstance(rule, GradientDescent):
            raise TypeError(f"backprop_train does not support {type(rule).__name__}")

        x = self._as_vector(input)
        n = min(self._input_size, len(x))
        net = self._net(x)
        deltas = np.asarray(self.activation.derivative(net), dtype=self.dtype)
        out = np.asarray(self.activation.value(net), dtype=self.dtype)

        w = self.weight_matrix[:, :n]
        returned = x.copy()
        returned[:n] -= w.T @ deltas

        error = deltas * (out - self._target(target))
        w -= rule.rate * np.outer(error, x[:n])
        return returned

    def __repr__(self) -> str:
        return (f"DenseLayer({self._input_size} -> {self.output_size}, "
                f"activation={self.activation.name}, dtype={self.dtype})")


def _check_sizes(input_size: int, output_size: int) -> None:
    if input_size < 0:
        raise ValueError("input_size must be non-negative")
    if output_size < 0:
        raise ValueError("output_size must be non-negative")
