#!/usr/bin/env python3
"""
Example usage of the ffnet package.

This script trains a 2-2-1 sigmoid network on XOR, prints its predictions and
round-trips the trained weights through a JSON file.
"""

import os
import tempfile

from ffnet import Dense, Matrix, MeanSquaredError, Network, sigmoid
from ffnet.utils.backend import default_rng


def main():
    print("ffnet Package Example")
    print("=" * 50)

    print("1. Creating the XOR dataset...")
    inputs = Matrix([[0, 0], [0, 1], [1, 0], [1, 1]])
    targets = Matrix([[0], [1], [1], [0]])

    print("\n2. Building a 2-2-1 network...")
    rng = default_rng(0)
    network = Network([Dense(2, 2, rng=rng), Dense(2, 1, rng=rng)], [sigmoid, sigmoid], MeanSquaredError)
    print(network)
    print(f"Parameters: {network.num_parameters}")

    print("\n3. Training...")
    history = network.train(inputs, targets, learning_rate=0.1, epochs=20000)
    print(f"Final epoch error: {history[-1]:.6f}")

    print("\n4. Predictions:")
    for x, y in zip(inputs, targets):
        print(f"  {x.tolist()} -> {network.predict(x)[0]:.4f} (target {y[0]:.0f})")

    print("\n5. Saving and restoring weights...")
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "xor.json")
        network.save_weights(path)
        restored = Network([Dense(2, 2), Dense(2, 1)], [sigmoid, sigmoid], MeanSquaredError)
        restored.load_weights(path)
    same = all(restored.predict(x) == network.predict(x) for x in inputs)
    print(f"Restored network matches: {same}")


if __name__ == "__main__":
    main()
