import os

import numpy as np
from unittest.mock import patch

from azuraforge_ann import Network, Learner
from azuraforge_ann.reporting import generate_training_report, plot_error_history


def test_plot_error_history_writes_image(tmp_path):
    save_path = tmp_path / "error.png"
    plot_error_history({"error": [0.3, 0.2, 0.1]}, save_path=str(save_path), max_error=0.15)
    assert save_path.exists()
    assert save_path.stat().st_size > 0

def test_generate_training_report_from_learner_history(tmp_path):
    """Gerçek bir eğitim geçmişinden Markdown raporu ve grafik üretildiğini test eder."""
    rng = np.random.default_rng(0)
    X = rng.random((40, 2)).astype(np.float32)
    y = rng.random((40, 1)).astype(np.float32)

    learner = Learner(Network([2, 3, 1], seed=0))
    final_error = learner.fit(X, y, {"batch_size": 10, "max_epochs": 5, "alpha": 0.5, "max_error": 0.0})

    config = {
        "experiment_dir": str(tmp_path),
        "experiment_name": "toy_regression",
        "training_params": {"max_error": 0.0},
    }
    generate_training_report({"history": learner.history, "final_error": final_error}, config)

    report = (tmp_path / "report.md").read_text(encoding="utf-8")
    assert "# Eğitim Raporu: toy_regression" in report
    assert "`5`" in report
    assert f"`{final_error:.6f}`" in report
    assert "Hayır" in report
    assert (tmp_path / "images" / "error_history.png").exists()

def test_generate_training_report_requires_experiment_dir(tmp_path):
    with patch("azuraforge_ann.reporting.plot_error_history") as mock_plot:
        generate_training_report({"history": {"error": [0.1]}, "final_error": 0.1}, {})
    mock_plot.assert_not_called()
    assert not os.path.exists(tmp_path / "report.md")
