import numpy as np
import pytest

import SgdAI
import TrainingIris


def test_evaluate_network_returns_accuracy_and_loss():
    net = SgdAI.Network([2, 3], 0.1, rng=0)
    for layer in net.network_layers:
        layer.weights[:] = 0.0
        layer.biases[:] = 0.0
    X = np.array([[1.0, 2.0], [3.0, 4.0]])
    Y = np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]])

    accuracy, loss = TrainingIris.evaluate_network(net, X, Y)

    assert accuracy == pytest.approx(0.5)
    assert loss == pytest.approx(np.log(3))


def test_evaluate_network_empty():
    net = SgdAI.Network([2, 3], 0.1, rng=0)
    assert TrainingIris.evaluate_network(net, [], []) == (0.0, 0.0)


def test_report_predictions(capsys):
    net = SgdAI.Network([2, 2], 0.1, rng=0)
    X = np.array([[0.0, 1.0], [1.0, 0.0]])
    Y = np.array([[0.0, 1.0], [1.0, 0.0]])

    TrainingIris.report_predictions(net, X, Y)

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("expected output:1\tpredicted output:")
    assert lines[1].startswith("expected output:0\tpredicted output:")


def test_run_trains_and_reports(iris_csv, capsys):
    net, accuracy = TrainingIris.run(
        dataset_path=iris_csv, layer_sizes=[4, 6, 3], learning_rate=0.05,
        epochs=20, train_split=0.75, validation_split=0.25, seed=1)

    assert isinstance(net, SgdAI.Network)
    assert 0.0 <= accuracy <= 1.0
    out = capsys.readouterr().out
    assert "Training set size: 9" in out
    assert "Accuracy: " in out
    assert out.count("expected output:") == 3


def test_run_is_reproducible_with_seed(iris_csv):
    kwargs = dict(dataset_path=iris_csv, layer_sizes=[4, 5, 3], learning_rate=0.05,
                  epochs=5, train_split=0.75, validation_split=0.25, seed=4)
    first, _ = TrainingIris.run(**kwargs)
    second, _ = TrainingIris.run(**kwargs)
    for a, b in zip(first.network_layers, second.network_layers):
        np.testing.assert_array_equal(a.weights, b.weights)


def test_run_wraps_load_failures(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to load dataset") as info:
        TrainingIris.run(dataset_path=tmp_path / "missing.csv", epochs=1)
    assert isinstance(info.value.__cause__, FileNotFoundError)
