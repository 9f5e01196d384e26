from __future__ import annotations
from dataclasses import dataclass
import math


def _check_rate(rate: float) -> None:
    if not math.isfinite(rate):
        raise ValueError("rate must be a finite number")


@dataclass(frozen=True, slots=True)
class PerceptronRule:
    """Delta rule on the activated output: w += rate * (target - output) * input."""
    rate: float

    def __post_init__(self) -> None:
        _check_rate(self.rate)


@dataclass(frozen=True, slots=True)
class GradientDescent:
    """One backprop step through the activation derivative."""
    rate: float

    def __post_init__(self) -> None:
        _check_rate(self.rate)


def by_name(name: str, rate: float) -> PerceptronRule | GradientDescent:
    if name == "perceptron":
        return PerceptronRule(rate)
    if name == "gradient_descent":
        return GradientDescent(rate)
    raise ValueError(f"unknown training rule {name!r}; expected 'perceptron' or 'gradient_descent'")
