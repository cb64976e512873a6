import numbers

import numpy as np


class NetworkError(Exception):
    pass

class DimensionMismatch(NetworkError, ValueError):
    pass

class InvalidConfiguration(NetworkError, ValueError):
    pass

class EmptyDataset(NetworkError, ValueError):
    pass


def softmax(x):
    e_x = np.exp(x - np.max(x))  # numerical stability
    return e_x / e_x.sum()

def relu(x):
    return np.maximum(0, x)

def relu_derivative(output):
    return (np.asarray(output) > 0).astype(float)  # 1 if output > 0 else 0

def cross_entropy(prediction, target):
    pred_clipped = np.clip(prediction, 1e-10, 1 - 1e-10)
    return float(-np.sum(target * np.log(pred_clipped)))

def uniform_init(neuron_ammount, layer_inputs, rng, low=-1.0, high=1.0):
    weights = rng.uniform(low, high, size=(neuron_ammount, layer_inputs))
    biases = rng.uniform(low, high, size=neuron_ammount)
    return weights, biases

def as_vector(values, expected_length, what):
    vector = np.asarray(values, dtype=np.float64)
    if vector.ndim != 1 or vector.shape[0] != expected_length:
        raise DimensionMismatch(
            f"{what} must be a vector of length {expected_length}, got shape {vector.shape}")
    return vector


class Layer:
    def __init__(self, layer_neuron_ammount, layer_inputs, rng=None, is_output=False):
        if rng is None:
            rng = np.random.default_rng()
        # weights[j][k] connects previous-layer neuron k to neuron j
        self.weights, self.biases = uniform_init(layer_neuron_ammount, layer_inputs, rng)
        self.is_output = is_output
        self.last_layer_input = None
        self.last_layer_output = np.zeros(layer_neuron_ammount)

    @property
    def neuron_count(self):
        return self.weights.shape[0]

    @property
    def input_count(self):
        return self.weights.shape[1]

    def get_outputs(self):
        return self.last_layer_output.copy()

    def layer_activation(self, x):
        if self.is_output:
            return x  # softmax is applied by the network over the whole vector
        else:
            return relu(x)

    def layer_activation_derivative(self, output):
        if self.is_output:
            raise RuntimeError("Output layer derivative is handled in backward with softmax+CE")
        else:
            return relu_derivative(output)

    def layer_forward_pass(self, x):
        self.last_layer_input = x
        z = self.weights @ x + self.biases
        self.last_layer_output = self.layer_activation(z)
        return self.last_layer_output


class Network:
    def __init__(self, layers_array, learning_rate, rng=None):
        if len(layers_array) < 2:
            raise InvalidConfiguration(
                f"Need at least 2 layer sizes (input + one layer), got {len(layers_array)}")
        if any(not isinstance(size, numbers.Integral) or size < 1 for size in layers_array):
            raise InvalidConfiguration(f"Layer sizes must be positive integers, got {list(layers_array)}")
        if not learning_rate > 0:
            raise InvalidConfiguration(f"Learning rate must be positive, got {learning_rate}")

        if rng is None or isinstance(rng, (int, np.integer)):
            rng = np.random.default_rng(rng)

        self.layers_array = [int(size) for size in layers_array]
        self._learning_rate = float(learning_rate)
        self.rng = rng
        self.network_layers = []

        for i in range(1, len(self.layers_array)):
            is_output = i == len(self.layers_array) - 1
            self.network_layers.append(
                Layer(self.layers_array[i], self.layers_array[i-1], rng, is_output))

    @property
    def learning_rate(self):
        return self._learning_rate

    @property
    def input_size(self):
        return self.layers_array[0]

    @property
    def output_size(self):
        return self.layers_array[-1]

    def network_forward_pass(self, x):
        x = as_vector(x, self.input_size, "Input")
        for layer in self.network_layers:
            x = layer.layer_forward_pass(x)

        #apply softmax on x that was provided by the last layer in the for loop above
        x = softmax(x)
        self.network_layers[-1].last_layer_output = x
        return x

    def network_back_prop(self, target):
        target = as_vector(target, self.output_size, "Target")
        if self.network_layers[0].last_layer_input is None:
            raise RuntimeError("network_back_prop called before any forward pass")

        # every delta is computed before the first weight changes
        deltas = [None] * len(self.network_layers)
        deltas[-1] = self.network_layers[-1].last_layer_output - target  # softmax + cross-entropy only
        for i in range(len(self.network_layers) - 2, -1, -1):
            layer = self.network_layers[i]
            next_layer = self.network_layers[i + 1]
            deltas[i] = (next_layer.weights.T @ deltas[i + 1]) * layer.layer_activation_derivative(layer.last_layer_output)

        for layer, delta in zip(self.network_layers, deltas):
            layer.weights -= self.learning_rate * np.outer(delta, layer.last_layer_input)
            layer.biases -= self.learning_rate * delta

    def train(self, inputs, targets, epochs, verbose=False, report_every=1):
        if len(inputs) != len(targets):
            raise DimensionMismatch(
                f"Got {len(inputs)} inputs but {len(targets)} targets")
        if len(inputs) == 0:
            raise EmptyDataset("Cannot train on an empty dataset")
        if not isinstance(epochs, numbers.Integral) or epochs < 1:
            raise InvalidConfiguration(f"Epoch count must be a positive integer, got {epochs}")

        # reject bad samples before the first weight update
        samples = [(as_vector(x, self.input_size, "Input"), as_vector(target, self.output_size, "Target"))
                   for x, target in zip(inputs, targets)]

        for epoch in range(int(epochs)):
            total_loss = 0
            for x, target in samples:
                prediction = self.network_forward_pass(x)
                self.network_back_prop(target)
                if verbose:
                    total_loss += cross_entropy(prediction, target)

            if verbose and ((epoch + 1) % report_every == 0 or epoch == 0):
                avg_loss = total_loss / len(inputs)
                print(f"Epoch {epoch+1}/{epochs}, Avg Loss: {avg_loss:.4f}")

    def predict(self, x):
        output = self.network_forward_pass(x)
        return int(np.argmax(output))  # first maximum wins ties

    def evaluate_accuracy(self, inputs, targets):
        if len(inputs) != len(targets):
            raise DimensionMismatch(
                f"Got {len(inputs)} inputs but {len(targets)} targets")
        if len(inputs) == 0:
            return 0.0

        correct = 0
        for x, target in zip(inputs, targets):
            target = as_vector(target, self.output_size, "Target")
            if self.predict(x) == int(np.argmax(target)):
                correct += 1
        return correct / len(inputs)
