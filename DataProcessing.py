import sys
import numpy as np

IRIS_LABELS = {
    "Iris-setosa": 0,
    "Iris-versicolor": 1,
    "Iris-virginica": 2,
}
NUM_FEATURES = 4

# -----------------------------
# Iris CSV Loading
# -----------------------------
def one_hot(index, num_classes):
    vector = np.zeros(num_classes)
    vector[index] = 1
    return vector

def warn(message):
    print(message, file=sys.stderr)

def read_iris_csv(filename, labels=IRIS_LABELS, num_features=NUM_FEATURES):
    """
    Read `num_features` numeric columns followed by a class name per line.

    Malformed lines are reported on stderr and skipped; blank lines are
    ignored. Returns (inputs (N, num_features), one-hot targets (N, classes)).
    """
    inputs, outputs = [], []
    with open(filename, "r") as f:
        for line_number, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue

            fields = [field.strip() for field in line.split(",")]
            if len(fields) != num_features + 1:
                warn(f"Expected {num_features + 1} columns at line {line_number}, found {len(fields)}")
                continue

            row = []
            for column, value in enumerate(fields[:num_features], start=1):
                if not value:
                    warn(f"Empty value found at line {line_number}, column {column}")
                    break
                try:
                    row.append(float(value))
                except ValueError:
                    warn(f"Invalid value found at line {line_number}, column {column}: {value}")
                    break
            if len(row) != num_features:
                continue

            label = fields[-1]
            if label not in labels:
                warn(f"Invalid label found at line {line_number}: {label}")
                continue

            inputs.append(row)
            outputs.append(one_hot(labels[label], len(labels)))

    X = np.array(inputs, dtype=np.float64).reshape(len(inputs), num_features)
    Y = np.array(outputs, dtype=np.float64).reshape(len(outputs), len(labels))
    return X, Y

# -----------------------------
# Normalization
# -----------------------------
def normalize_features(X):
    X = np.asarray(X, dtype=np.float64)
    means = X.mean(axis=0)
    stds = X.std(axis=0)  # population std
    scale = np.where(stds > 0, stds, 1.0)  # constant columns are only centred
    return (X - means) / scale, means, stds

# -----------------------------
# Shuffle / Split
# -----------------------------
def shuffle_and_split(X, Y, train_split, validation_split, rng=None):
    if len(X) != len(Y):
        raise ValueError(f"Got {len(X)} inputs but {len(Y)} targets")
    if not (0 <= train_split <= 1 and 0 <= validation_split <= 1):
        raise ValueError("Split ratios must lie in [0, 1]")
    if train_split + validation_split > 1 + 1e-9:
        raise ValueError(
            f"Split ratios add up to {train_split + validation_split}, more than the whole dataset")

    if rng is None or isinstance(rng, (int, np.integer)):
        rng = np.random.default_rng(rng)

    indices = np.arange(len(X))
    rng.shuffle(indices)

    train_size = int(len(X) * train_split)
    validation_size = int(len(X) * validation_split)
    train_idx = indices[:train_size]
    validation_idx = indices[train_size:train_size + validation_size]

    return X[train_idx], Y[train_idx], X[validation_idx], Y[validation_idx]

def load_iris_dataset(filename, train_split=0.9, validation_split=0.1, rng=None):
    X, Y = read_iris_csv(filename)
    X, _, _ = normalize_features(X)
    train_X, train_Y, validation_X, validation_Y = shuffle_and_split(
        X, Y, train_split, validation_split, rng)

    print(f"Training set size: {len(train_X)}")
    print(f"Validation set size: {len(validation_X)}")
    return train_X, train_Y, validation_X, validation_Y
