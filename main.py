# main.py
import argparse

from config import AppConfig
from feedforward.activations import CATALOG
from runners.run_train import main as train


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Train a single dense layer on a toy task.")
    p.add_argument("mode", choices=["train", "view"])
    p.add_argument("--task", choices=["and", "or", "nand", "linear"], default="and")
    p.add_argument("--rule", choices=["perceptron", "gradient_descent"], default="gradient_descent")
    p.add_argument("--activation", choices=sorted(CATALOG), default="sigmoid")
    p.add_argument("--inputs", type=int, default=3)
    p.add_argument("--outputs", type=int, default=1)
    p.add_argument("--rate", type=float, default=0.5)
    p.add_argument("--epochs", type=int, default=500)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--dtype", choices=["float32", "float64"], default="float64")
    p.add_argument("--init", choices=["ones", "uniform"], default="uniform")
    p.add_argument("--log-path", default="runs/layer/logs.csv")
    p.add_argument("--fps", type=int, default=30)
    return p.parse_args(argv)


def config_from_args(args) -> AppConfig:
    return AppConfig(
        input_size=args.inputs,
        output_size=args.outputs,
        activation=args.activation,
        dtype=args.dtype,
        init=args.init,
        seed=args.seed,
        rule=args.rule,
        learning_rate=args.rate,
        epochs=args.epochs,
        task=args.task,
        log_path=args.log_path or None,
        show_view=args.mode == "view",
        fps=args.fps,
    )


def main(argv=None):
    args = parse_args(argv)
    train(config_from_args(args))


if __name__ == "__main__":
    main()
