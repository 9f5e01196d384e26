from __future__ import annotations
import random
from typing import List, Optional

import numpy as np

from config import AppConfig
from feedforward import activations
from feedforward.dense import DenseLayer
from feedforward.training import by_name as rule_by_name
from fit.datasets import linear_regression, logic_gate
from fit.logging import ALL_KEYS, CSVLogger, NullLogger, make_epoch_logger, make_step_logger
from fit.metrics import EMA, WindowedStat
from fit.trainer import LayerTrainer, TrainHooks
from interfaces import Sample


def build_layer(cfg: AppConfig) -> DenseLayer:
    act = activations.by_name(cfg.activation)
    dtype = np.dtype(cfg.dtype)
    if cfg.init == "ones":
        return DenseLayer(cfg.input_size, cfg.output_size, act, dtype=dtype)
    rng = random.Random(cfg.seed)
    return DenseLayer.new_from(
        cfg.input_size, cfg.output_size, act,
        lambda: rng.uniform(cfg.init_low, cfg.init_high),
        dtype=dtype,
    )


def build_samples(cfg: AppConfig) -> List[Sample]:
    if cfg.task == "linear":
        rng = np.random.default_rng(cfg.seed)
        true_w = rng.uniform(-1.0, 1.0, size=(cfg.output_size, cfg.input_size))
        # biases are never trained, so the target has none
        return linear_regression(true_w, np.zeros(cfg.output_size), cfg.linear_samples,
                                 seed=cfg.seed, noise=cfg.linear_noise)
    return logic_gate(cfg.task, bias_input=cfg.input_size >= 3)


def main(cfg: Optional[AppConfig] = None) -> dict:
    cfg = cfg or AppConfig()

    layer = build_layer(cfg)
    rule = rule_by_name(cfg.rule, cfg.learning_rate)
    samples = build_samples(cfg)

    print("=== Dense layer ===")
    print(f"layer: {layer}")
    print(f"rule: {type(rule).__name__}(rate={rule.rate})  task: {cfg.task}  samples: {len(samples)}  epochs: {cfg.epochs}")
    print(f"logs: {cfg.log_path or '-'}")

    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else NullLogger()

    window = view = None
    if cfg.show_view:
        # pygame is only needed when a window is requested
        from viz.layer_view import LayerView
        from viz.window import LayerWindow
        window = LayerWindow()
        window.open(cfg)
        view = LayerView(layer, cfg.view_canvas)

    trainer: LayerTrainer

    def on_layer_update(_layer: DenseLayer, sample: Sample) -> None:
        if trainer.global_step % cfg.view_every_steps != 0 or window.closed_by_user:
            return
        view.show_sample(sample.input)
        window.set_overlay(f"step {trainer.global_step}")
        window.draw(view)
        window.tick(cfg.fps)

    hooks = TrainHooks(
        on_step_log=make_step_logger(logger, every=cfg.log_every_steps),
        on_epoch_end=make_epoch_logger(
            logger=logger,
            ema_loss=EMA(cfg.ema_alpha),
            win_loss=WindowedStat(cfg.loss_window),
            step_getter=lambda: trainer.global_step,
            echo_every=cfg.print_every_epochs,
        ),
        on_layer_update=on_layer_update if window is not None else None,
    )
    trainer = LayerTrainer(layer, rule, hooks=hooks)

    try:
        history = trainer.train(samples, cfg.epochs, shuffle_seed=(cfg.seed or 0) if cfg.shuffle else None)
    finally:
        logger.close()
        if window is not None:
            window.close()

    final = trainer.evaluate(samples)
    print(f"[train] done  steps={trainer.global_step}  mse={final['mse']:.5f}  max_abs_error={final['max_abs_error']:.5f}")
    for s in samples[:8]:
        out = layer.compute(s.input)
        print(f"[train] {list(s.input)} -> {np.round(out, 3).tolist()}  target={list(s.target)}")
    return {"history": history, "final": final, "layer": layer}


if __name__ == "__main__":
    main()
