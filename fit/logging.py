from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

ALL_KEYS = [
    "step",
    # train
    "train/loss", "train/upstream_norm", "train/weight_norm", "train/rate",
    # epoch
    "epoch", "epoch/loss_mean", "epoch/loss_ema", "epoch/loss_window_mean",
    "eval/mse", "eval/max_abs_error",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_step_logger(logger: Logger, every: int = 10) -> Callable[[Dict[str, Any]], None]:
    """
    Returns a function(stats) -> None that logs per-sample training scalars
    every `every` steps.
    """
    every = max(1, every)

    def _on_step_log(stats: Dict[str, Any]) -> None:
        step = stats.get("step")
        if step is None or step % every != 0:
            return
        scalars = {
            "train/loss": stats.get("loss"),
            "train/upstream_norm": stats.get("upstream_norm"),
            "train/weight_norm": stats.get("weight_norm"),
            "train/rate": stats.get("rate"),
        }
        logger.log(int(step), scalars)
    return _on_step_log


def make_epoch_logger(
    *,
    logger: Logger,
    ema_loss,
    win_loss,
    step_getter: Callable[[], int],
    echo_every: int = 0,
) -> Callable[[int, Dict[str, Any]], None]:
    """
    Returns a function(epoch, summary) -> None that:
      - updates EMA/window stats of the epoch loss
      - logs the epoch metrics and flushes
      - prints a one-line progress report every `echo_every` epochs (0 = never)
    """
    def _on_epoch_end(epoch: int, s: Dict[str, Any]) -> None:
        loss = float(s["loss_mean"])
        l_ema = ema_loss.update(loss)
        if l_ema is None:
            l_ema = float("nan")
        win_loss.add(loss)
        wl = win_loss.summary()

        scalars = {
            "epoch": epoch,
            "epoch/loss_mean": loss,
            "epoch/loss_ema": l_ema,
            "epoch/loss_window_mean": wl["mean"],
            "eval/mse": s.get("mse"),
            "eval/max_abs_error": s.get("max_abs_error"),
        }
        logger.log(int(step_getter()), scalars)
        logger.flush()

        if echo_every > 0 and epoch % echo_every == 0:
            print(f"[train] epoch {epoch:04d}  loss={loss:.5f}  ema={l_ema:.5f}  mse={s.get('mse', float('nan')):.5f}")

    return _on_epoch_end


class NullLogger:
    """Logger that drops everything; used when no log path is configured."""
    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        pass
    def flush(self) -> None:
        pass
    def close(self) -> None:
        pass
