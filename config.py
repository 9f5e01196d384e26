# config.py
import math
from dataclasses import dataclass, replace
from typing import Optional, Literal

from feedforward.activations import CATALOG

DTYPES = ("float32", "float64")

@dataclass(frozen=True, slots=True)
class AppConfig:
    # layer
    input_size: int = 3
    output_size: int = 1
    activation: str = "sigmoid"
    dtype: str = "float64"
    init: Literal["ones", "uniform"] = "uniform"
    init_low: float = -0.5
    init_high: float = 0.5
    seed: Optional[int] = None

    # training
    rule: Literal["perceptron", "gradient_descent"] = "gradient_descent"
    learning_rate: float = 0.5
    epochs: int = 500
    shuffle: bool = True
    task: Literal["and", "or", "nand", "linear"] = "and"
    linear_samples: int = 64
    linear_noise: float = 0.0

    # logging
    log_path: Optional[str] = "runs/layer/logs.csv"
    log_every_steps: int = 10
    ema_alpha: float = 0.1
    loss_window: int = 20
    print_every_epochs: int = 50

    # view
    show_view: bool = False
    fps: int = 30
    view_every_steps: int = 1
    view_canvas: tuple[int, int] = (640, 400)
    view_title: str = "Dense layer"
    view_record_dir: Optional[str] = None

    def __post_init__(self) -> None:
        if self.input_size < 0 or self.output_size < 0:
            raise ValueError("layer sizes must be non-negative")
        if self.activation not in CATALOG:
            raise ValueError(f"activation must be one of {sorted(CATALOG)}")
        if self.task not in ("and", "or", "nand", "linear"):
            raise ValueError("task must be one of and, or, nand, linear")
        if self.dtype not in DTYPES:
            raise ValueError(f"dtype must be one of {DTYPES}")
        if self.init not in ("ones", "uniform"):
            raise ValueError("init must be 'ones' or 'uniform'")
        if self.init_low > self.init_high:
            raise ValueError("init_low must not exceed init_high")
        if self.rule not in ("perceptron", "gradient_descent"):
            raise ValueError("rule must be 'perceptron' or 'gradient_descent'")
        if not math.isfinite(self.learning_rate):
            raise ValueError("learning_rate must be finite")
        if self.epochs < 0:
            raise ValueError("epochs must be non-negative")
        if not 0.0 < self.ema_alpha <= 1.0:
            raise ValueError("ema_alpha must lie in (0, 1]")
        if self.loss_window <= 0 or self.log_every_steps <= 0 or self.view_every_steps <= 0:
            raise ValueError("loss_window, log_every_steps and view_every_steps must be positive")
        if self.fps <= 0:
            raise ValueError("fps must be positive")

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
