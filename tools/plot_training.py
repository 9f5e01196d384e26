# tools/plot_training.py
import argparse
import csv
import math
from collections import deque
from pathlib import Path

# Use a non-interactive backend that writes to files
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

REPO_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_LOG = REPO_ROOT / "runs" / "layer" / "logs.csv"

def to_float(v):
    try:
        return float(v)
    except (TypeError, ValueError):
        return math.nan

def rolling_mean(xs, window):
    out, q, s = [], deque(), 0.0
    for x in xs:
        x = float(x)
        q.append(x); s += x
        if len(q) > window:
            s -= q.popleft()
        out.append(s / len(q))
    return out

def read_log(log_path):
    """Split the CSV into per-step rows and per-epoch rows (rows with an 'epoch' value)."""
    steps = {"step": [], "loss": [], "upstream_norm": [], "weight_norm": []}
    epochs = {"step": [], "epoch": [], "loss_mean": [], "loss_ema": [], "mse": []}
    with Path(log_path).open(newline="") as f:
        for row in csv.DictReader(f):
            if row.get("epoch") not in (None, ""):
                epochs["step"].append(int(row["step"]))
                epochs["epoch"].append(int(float(row["epoch"])))
                epochs["loss_mean"].append(to_float(row.get("epoch/loss_mean")))
                epochs["loss_ema"].append(to_float(row.get("epoch/loss_ema")))
                epochs["mse"].append(to_float(row.get("eval/mse")))
            else:
                steps["step"].append(int(row["step"]))
                steps["loss"].append(to_float(row.get("train/loss")))
                steps["upstream_norm"].append(to_float(row.get("train/upstream_norm")))
                steps["weight_norm"].append(to_float(row.get("train/weight_norm")))
    return steps, epochs

def _save(fig, out_dir, name):
    path = out_dir / name
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path

def plot(log_path, out_dir=None, window=20):
    log_path = Path(log_path)
    if not log_path.exists():
        raise FileNotFoundError(f"Could not find {log_path}. Run training with a log path first.")
    out_dir = Path(out_dir) if out_dir else log_path.parent / "plots"
    out_dir.mkdir(parents=True, exist_ok=True)

    steps, epochs = read_log(log_path)
    written = []

    if epochs["epoch"]:
        fig, ax = plt.subplots(figsize=(8, 4))
        ax.plot(epochs["epoch"], epochs["loss_mean"], label="loss (epoch mean)", alpha=0.6)
        ax.plot(epochs["epoch"], epochs["loss_ema"], label="loss (EMA)")
        ax.plot(epochs["epoch"], epochs["mse"], label="eval MSE")
        ax.set_xlabel("epoch"); ax.set_yscale("log"); ax.legend(); ax.grid(True, alpha=0.3)
        written.append(_save(fig, out_dir, "epoch_loss.png"))

    if steps["step"]:
        fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
        ax1.plot(steps["step"], steps["loss"], alpha=0.3, label="loss")
        ax1.plot(steps["step"], rolling_mean(steps["loss"], window), label=f"loss (rolling {window})")
        ax1.legend(); ax1.grid(True, alpha=0.3)
        ax2.plot(steps["step"], steps["weight_norm"], label="|W|")
        if not all(math.isnan(v) for v in steps["upstream_norm"]):
            ax2.plot(steps["step"], steps["upstream_norm"], label="|upstream error|")
        ax2.set_xlabel("step"); ax2.legend(); ax2.grid(True, alpha=0.3)
        written.append(_save(fig, out_dir, "step_metrics.png"))

    return written

def main(argv=None):
    p = argparse.ArgumentParser(description="Plot the CSV written by a training run.")
    p.add_argument("log_path", nargs="?", default=str(DEFAULT_LOG))
    p.add_argument("--out-dir", default=None)
    p.add_argument("--window", type=int, default=20)
    args = p.parse_args(argv)
    for path in plot(args.log_path, args.out_dir, args.window):
        print(f"[plot] wrote {path}")

if __name__ == "__main__":
    main()
