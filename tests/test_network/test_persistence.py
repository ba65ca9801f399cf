import json
import os
import tempfile
import unittest

import numpy as np

from ffnet.modules import Dense
from ffnet.nn.activations import sigmoid, tanh
from ffnet.nn.errors import ShapeError
from ffnet.nn.network import Network
from ffnet.nn.tensor import Vector
from ffnet.utils.serialization import read_record, write_record


def build_network(seed):
    rng = np.random.default_rng(seed)
    return Network([Dense(3, 4, rng=rng), Dense(4, 2, rng=rng)], [tanh, sigmoid])


class TestPersistence(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "weights", "net.json")
        self.x = Vector([0.1, -0.4, 0.7])

    def tearDown(self):
        self.tmp.cleanup()

    def test_record_shape(self):
        record = build_network(0).get_weights()
        self.assertEqual(len(record), 2)
        self.assertEqual(np.array(record[0]["weights"]).shape, (4, 3))
        self.assertEqual(len(record[0]["biases"]), 4)
        self.assertEqual(np.array(record[1]["weights"]).shape, (2, 4))
        self.assertEqual(len(record[1]["biases"]), 2)

    def test_save_then_load_round_trip(self):
        source = build_network(0)
        source.train([[0.1, 0.2, 0.3]], [[0.0, 1.0]], 0.1, 5, log_interval=0)
        source.save_weights(self.path)

        restored = build_network(1)
        self.assertNotEqual(restored.predict(self.x), source.predict(self.x))
        restored.load_weights(self.path)
        self.assertEqual(restored.predict(self.x), source.predict(self.x))

    def test_file_is_plain_json(self):
        build_network(0).save_weights(self.path)
        with open(self.path, encoding="utf-8") as f:
            record = json.load(f)
        self.assertEqual(set(record[0]), {"weights", "biases"})

    def test_set_weights_rejects_wrong_layer_count(self):
        record = build_network(0).get_weights()
        with self.assertRaises(ShapeError):
            build_network(1).set_weights(record[:1])

    def test_set_weights_rejects_wrong_shape_atomically(self):
        net = build_network(1)
        before = net.get_weights()
        record = build_network(0).get_weights()
        record[1]["biases"] = [0.0, 0.0, 0.0]
        with self.assertRaises(ShapeError):
            net.set_weights(record)
        self.assertEqual(net.get_weights(), before)

    def test_loaded_weights_are_not_aliased(self):
        source = build_network(0)
        restored = build_network(1)
        restored.set_weights(source.get_weights())
        restored.layers[0].forward(self.x)
        restored.layers[0].backward(Vector([1.0, 1.0, 1.0, 1.0]), 0.1)
        self.assertNotEqual(restored.layers[0].weights, source.layers[0].weights)

    def test_set_weights_rejects_malformed_entries(self):
        net = build_network(1)
        record = build_network(0).get_weights()
        del record[0]["biases"]
        with self.assertRaises(ValueError):
            net.set_weights(record)
        with self.assertRaises(ValueError):
            net.set_weights({"weights": [], "biases": []})

    def test_read_record_validates_entries(self):
        write_record([{"weights": [[1.0]]}], self.path)
        with self.assertRaises(ValueError):
            read_record(self.path)


if __name__ == "__main__":
    unittest.main()
