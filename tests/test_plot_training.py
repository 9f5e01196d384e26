# tests/test_plot_training.py
import pytest

pytest.importorskip("matplotlib")

from config import AppConfig
from runners.run_train import main as train
from tools.plot_training import plot, read_log, rolling_mean


def test_rolling_mean():
    assert rolling_mean([1, 3, 5, 7], 2) == [1.0, 2.0, 4.0, 6.0]

def test_plot_writes_pngs_for_a_real_run(tmp_path):
    log_path = tmp_path / "logs.csv"
    train(AppConfig(epochs=3, seed=1, log_path=str(log_path), log_every_steps=1, print_every_epochs=0))
    steps, epochs = read_log(log_path)
    assert epochs["epoch"] == [0, 1, 2]
    assert len(steps["step"]) == 12

    written = plot(log_path, tmp_path / "plots")
    assert sorted(p.name for p in written) == ["epoch_loss.png", "step_metrics.png"]
    assert all(p.exists() for p in written)

def test_missing_log_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        plot(tmp_path / "nope.csv")
