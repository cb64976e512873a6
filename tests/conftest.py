import numpy as np
import pytest


@pytest.fixture
def xor_data():
    """XOR-style samples: equal bits -> class 0, different bits -> class 1."""
    X = np.array([[0, 0], [1, 1], [0, 1], [1, 0]], dtype=np.float64)
    Y = np.array([[1, 0], [1, 0], [0, 1], [0, 1]], dtype=np.float64)
    return X, Y


@pytest.fixture
def iris_csv(tmp_path):
    rows = [
        "5.1,3.5,1.4,0.2,Iris-setosa",
        "4.9,3.0,1.4,0.2,Iris-setosa",
        "4.7,3.2,1.3,0.2,Iris-setosa",
        "5.0,3.6,1.4,0.2,Iris-setosa",
        "7.0,3.2,4.7,1.4,Iris-versicolor",
        "6.4,3.2,4.5,1.5,Iris-versicolor",
        "6.9,3.1,4.9,1.5,Iris-versicolor",
        "5.5,2.3,4.0,1.3,Iris-versicolor",
        "6.3,3.3,6.0,2.5,Iris-virginica",
        "5.8,2.7,5.1,1.9,Iris-virginica",
        "7.1,3.0,5.9,2.1,Iris-virginica",
        "6.5,3.0,5.8,2.2,Iris-virginica",
    ]
    path = tmp_path / "iris_dataset.csv"
    path.write_text("\n".join(rows) + "\n")
    return path
