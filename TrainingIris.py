import numpy as np
import SgdAI
import DataProcessing

# --- Config ---
DATASET_PATH = "iris_dataset.csv"
LAYER_SIZES = [4, 8, 128, 64, 8, 3]  # 4 features -> 4 hidden layers -> 3 classes
LEARNING_RATE = 0.01
EPOCHS = 1000
TRAIN_SPLIT = 0.90
VALIDATION_SPLIT = 0.10
SEED = None  # set an int for reproducible runs

def evaluate_network(network, X, Y):
    if len(X) == 0:
        return 0.0, 0.0

    total_loss = 0
    for x, target in zip(X, Y):
        prediction = network.network_forward_pass(x)
        total_loss += SgdAI.cross_entropy(prediction, target)

    accuracy = network.evaluate_accuracy(X, Y)
    avg_loss = total_loss / len(X)
    return accuracy, avg_loss

def report_predictions(network, X, Y):
    for x, target in zip(X, Y):
        expected = int(np.argmax(target))
        print(f"expected output:{expected}\tpredicted output:{network.predict(x)}")

def run(dataset_path=DATASET_PATH, layer_sizes=LAYER_SIZES, learning_rate=LEARNING_RATE,
        epochs=EPOCHS, train_split=TRAIN_SPLIT, validation_split=VALIDATION_SPLIT,
        seed=SEED, verbose=False):
    rng = np.random.default_rng(seed)

    try:
        train_X, train_Y, validation_X, validation_Y = DataProcessing.load_iris_dataset(
            dataset_path, train_split, validation_split, rng)
    except (OSError, ValueError) as e:
        raise RuntimeError(f"Failed to load dataset {dataset_path}") from e

    # --- Initialize network ---
    net = SgdAI.Network(layer_sizes, learning_rate, rng)

    # --- Training ---
    net.train(train_X, train_Y, epochs, verbose=verbose, report_every=max(1, epochs // 10))

    # --- Validation ---
    val_acc, val_loss = evaluate_network(net, validation_X, validation_Y)
    print(f"Validation loss: {val_loss:.4f}")
    print(f"Accuracy: {val_acc * 100}%")
    report_predictions(net, validation_X, validation_Y)
    return net, val_acc

def main():
    run(verbose=True)

if __name__ == "__main__":
    main()
