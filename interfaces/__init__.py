# interfaces/__init__.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple, TypeVar, runtime_checkable
import numpy as np

R = TypeVar("R", contravariant=True)


@dataclass(frozen=True)
class Sample:
    input: Tuple[float, ...]
    target: Tuple[float, ...]

    @classmethod
    def of(cls, input: Sequence[float], target: Sequence[float]) -> "Sample":
        return cls(tuple(float(v) for v in input), tuple(float(v) for v in target))


@runtime_checkable
class Compute(Protocol):
    @property
    def input_size(self) -> int: ...
    @property
    def output_size(self) -> int: ...
    def compute(self, input: Sequence[float]) -> np.ndarray: ...


@runtime_checkable
class SupervisedTrain(Protocol[R]):
    """Learns from (input, target) pairs under a training rule."""
    def supervised_train(self, rule: R, input: Sequence[float], target: Sequence[float]) -> None: ...


@runtime_checkable
class BackpropTrain(Protocol[R]):
    """Like SupervisedTrain, but hands back the error signal for an upstream layer."""
    def backprop_train(self, rule: R, input: Sequence[float], target: Sequence[float]) -> np.ndarray: ...
