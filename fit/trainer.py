from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence
import random
import numpy as np

from feedforward.dense import DenseLayer
from feedforward.training import GradientDescent, PerceptronRule
from interfaces import Sample
from .metrics import squared_error

LogFn = Callable[[Dict[str, Any]], None]

@dataclass
class TrainHooks:
    on_step_log: Optional[LogFn] = None
    on_epoch_end: Optional[Callable[[int, Dict[str, Any]], None]] = None
    on_layer_update: Optional[Callable[[DenseLayer, Sample], None]] = None

class LayerTrainer:
    """
    Thin, testable loop coordinator. Keeps the sample loop separate from the layer's update rules.
    """
    def __init__(
        self,
        layer: DenseLayer,
        rule: PerceptronRule | GradientDescent,
        hooks: Optional[TrainHooks] = None,
    ):
        if not isinstance(rule, (PerceptronRule, GradientDescent)):
            raise TypeError(f"unsupported training rule {type(rule).__name__}")
        self.layer = layer
        self.rule = rule
        self.hooks = hooks or TrainHooks()
        self.global_step = 0

    def _padded_target(self, target: Sequence[float]) -> np.ndarray:
        t = np.zeros(self.layer.output_size)
        m = min(len(target), self.layer.output_size)
        t[:m] = np.asarray(target, dtype=float)[:m]
        return t

    def train_step(self, sample: Sample) -> Dict[str, Any]:
        """One update on one sample; loss is measured before the update."""
        loss = squared_error(self.layer.compute(sample.input), self._padded_target(sample.target))
        stats: Dict[str, Any] = {"loss": loss, "rate": self.rule.rate}

        if isinstance(self.rule, GradientDescent):
            upstream = self.layer.backprop_train(self.rule, sample.input, sample.target)
            stats["upstream_norm"] = float(np.linalg.norm(upstream))
        else:
            self.layer.supervised_train(self.rule, sample.input, sample.target)

        self.global_step += 1
        stats["step"] = self.global_step
        stats["weight_norm"] = float(np.linalg.norm(self.layer.weights))

        if self.hooks.on_step_log:
            self.hooks.on_step_log(stats)
        if self.hooks.on_layer_update:
            self.hooks.on_layer_update(self.layer, sample)
        return stats

    def train(self, samples: Sequence[Sample], epochs: int, shuffle_seed: Optional[int] = None) -> List[Dict[str, Any]]:
        if epochs < 0:
            raise ValueError("epochs must be non-negative")
        order = list(samples)
        rng = random.Random(shuffle_seed) if shuffle_seed is not None else None
        history: List[Dict[str, Any]] = []

        for epoch in range(epochs):
            if rng is not None:
                rng.shuffle(order)
            losses = [self.train_step(s)["loss"] for s in order]

            summary: Dict[str, Any] = {
                "epoch": epoch,
                "loss_mean": float(np.mean(losses)) if losses else 0.0,
                **self.evaluate(order),
            }
            history.append(summary)
            if self.hooks.on_epoch_end:
                self.hooks.on_epoch_end(epoch, summary)
        return history

    def evaluate(self, samples: Sequence[Sample]) -> Dict[str, float]:
        """Mean squared error and worst absolute error of `compute`; the layer is not touched."""
        if not samples:
            return {"mse": 0.0, "max_abs_error": 0.0}
        errors = np.concatenate([
            self.layer.compute(s.input) - self._padded_target(s.target) for s in samples
        ])
        if errors.size == 0:
            return {"mse": 0.0, "max_abs_error": 0.0}
        return {"mse": float(np.mean(errors ** 2)), "max_abs_error": float(np.max(np.abs(errors)))}
