import unittest

from ffnet.nn.tensor import (
    Vector,
    Matrix,
    add,
    subtract,
    scalar_multiply,
    elementwise_multiply,
    dot,
    map_elements,
    transpose,
)
from ffnet.nn.errors import ShapeError
from ffnet.utils.backend import xp


class TestVectorOps(unittest.TestCase):
    def assert_close(self, a, b, atol=1e-9):
        self.assertTrue(xp.allclose(a, b, atol=atol))

    def setUp(self):
        self.rng = xp.random.default_rng(0)

    def test_construction(self):
        v = Vector([1, 2, 3])
        self.assertEqual(len(v), 3)
        self.assertEqual(v.shape, (3,))
        self.assertEqual(v.dtype, xp.float64)
        self.assertEqual(v.tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(v[1], 2.0)
        self.assertEqual(list(v), [1.0, 2.0, 3.0])

    def test_construction_copies_input(self):
        data = xp.array([1.0, 2.0])
        v = Vector(data)
        data[0] = 100.0
        self.assertEqual(v[0], 1.0)

    def test_add_is_commutative(self):
        for n in (1, 3, 17):
            u = Vector(self.rng.standard_normal(n))
            v = Vector(self.rng.standard_normal(n))
            self.assertEqual(add(u, v), add(v, u))

    def test_subtract_undoes_add(self):
        for n in (1, 4, 32):
            u = Vector(self.rng.standard_normal(n))
            v = Vector(self.rng.standard_normal(n))
            self.assert_close(subtract(add(u, v), v).data, u.data)

    def test_operators(self):
        u = Vector([1.0, 2.0])
        v = Vector([3.0, 5.0])
        self.assertEqual(u + v, Vector([4.0, 7.0]))
        self.assertEqual(v - u, Vector([2.0, 3.0]))
        self.assertEqual(u * v, Vector([3.0, 10.0]))
        self.assertEqual(u * 2, Vector([2.0, 4.0]))
        self.assertEqual(2 * u, Vector([2.0, 4.0]))
        self.assertEqual(u @ v, 13.0)

    def test_operations_return_new_vectors(self):
        u = Vector([1.0, 2.0])
        v = Vector([3.0, 4.0])
        w = add(u, v)
        self.assertIsNot(w, u)
        self.assertEqual(u, Vector([1.0, 2.0]))

    def test_scalar_multiply(self):
        self.assertEqual(scalar_multiply(Vector([1.0, -2.0]), 3), Vector([3.0, -6.0]))
        self.assertEqual(scalar_multiply(Vector([]), 3), Vector([]))

    def test_elementwise_multiply(self):
        self.assertEqual(elementwise_multiply(Vector([1, 2, 3]), Vector([4, 5, 6])), Vector([4, 10, 18]))

    def test_dot(self):
        self.assertEqual(dot(Vector([1, 2, 3]), Vector([4, 5, 6])), 32)
        self.assertEqual(dot(Vector([]), Vector([])), 0.0)

    def test_dot_accumulates_left_to_right(self):
        values = self.rng.standard_normal(101)
        other = self.rng.standard_normal(101)
        expected = 0.0
        for a, b in zip(values.tolist(), other.tolist()):
            expected += a * b
        self.assertEqual(dot(Vector(values), Vector(other)), expected)

    def test_map(self):
        self.assertEqual(map_elements(Vector([1, -2, 3]), abs), Vector([1, 2, 3]))
        self.assertEqual(Vector([1, 2]).map(lambda x: x * x), Vector([1, 4]))

    def test_vector_transpose_is_column(self):
        column = transpose(Vector([1, 2, 3]))
        self.assertIsInstance(column, Matrix)
        self.assertEqual(column, Matrix([[1], [2], [3]]))

    def test_length_mismatch(self):
        u = Vector([1.0, 2.0])
        v = Vector([1.0, 2.0, 3.0])
        for op in (add, subtract, elementwise_multiply, dot):
            with self.assertRaises(ShapeError):
                op(u, v)

    def test_in_place_operators_are_rejected(self):
        u = Vector([1.0, 2.0])
        with self.assertRaises(NotImplementedError):
            u += Vector([1.0, 1.0])


if __name__ == "__main__":
    unittest.main()
