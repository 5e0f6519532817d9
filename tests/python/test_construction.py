import copy
import unittest
from fractions import Fraction

import numpy as np

import matrix2d
from matrix2d import Matrix, ShapeMismatchError


class TestFromFn(unittest.TestCase):
    def test_round_trip_indexing(self):
        m = matrix2d.from_fn(3, 5, lambda i, j: (i, j))
        self.assertEqual(m.size(), (3, 5))
        for i in range(m.row()):
            for j in range(m.column()):
                self.assertEqual(m[i, j], (i, j))

    def test_generator_called_in_row_major_order(self):
        calls = []

        def gen(i, j):
            calls.append((i, j))
            return i * 10 + j

        Matrix.from_fn(2, 3, gen)
        self.assertEqual(calls, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)])

    def test_zero_sized_shapes(self):
        for rows, cols in [(0, 0), (0, 4), (4, 0)]:
            m = Matrix.from_fn(rows, cols, lambda i, j: 1 / 0)
            self.assertEqual(m.size(), (rows, cols))
            self.assertEqual(m.data, ())

    def test_rejects_negative_extent(self):
        with self.assertRaises(ValueError):
            Matrix.from_fn(-1, 2, lambda i, j: 0)

    def test_rejects_non_integer_extent(self):
        with self.assertRaises(TypeError):
            Matrix.from_fn(2.0, 2, lambda i, j: 0)
        with self.assertRaises(TypeError):
            Matrix.from_fn(True, 2, lambda i, j: 0)


class TestFromVec(unittest.TestCase):
    def test_faithful_to_flat_layout(self):
        data = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        m = matrix2d.from_vec(2, 3, data)
        for i in range(m.row()):
            for j in range(m.column()):
                self.assertEqual(m[i, j], data[i * 3 + j])
                self.assertEqual(m[i, j], (i, j))

    def test_length_mismatch_raises(self):
        with self.assertRaises(ShapeMismatchError):
            Matrix.from_vec(2, 3, [1, 2, 3, 4, 5])
        with self.assertRaises(ValueError):
            Matrix.from_vec(1, 1, [])

    def test_storage_is_not_shared_with_caller(self):
        data = [1, 2, 3, 4]
        m = Matrix.from_vec(2, 2, data)
        data[0] = 99
        self.assertEqual(m[0, 0], 1)

    def test_accepts_any_iterable(self):
        m = Matrix.from_vec(2, 2, (x for x in range(4)))
        self.assertEqual(m.tolist(), [[0, 1], [2, 3]])

    def test_empty(self):
        m = Matrix.from_vec(0, 7, [])
        self.assertEqual(m.size(), (0, 7))


class TestZeroOne(unittest.TestCase):
    def test_zero(self):
        m = matrix2d.zero(2, 3)
        self.assertEqual(m.size(), (2, 3))
        self.assertTrue(all(x == 0.0 and isinstance(x, float) for x in m.data))

    def test_zero_with_dtype(self):
        m = Matrix.zero(2, 2, dtype=Fraction)
        self.assertTrue(all(x == Fraction(0) and isinstance(x, Fraction) for x in m.data))

    def test_one_square(self):
        m = matrix2d.one(3, 3, dtype=int)
        self.assertEqual(m.tolist(), [[1, 0, 0], [0, 1, 0], [0, 0, 1]])

    def test_one_rectangular_fills_outside_square_block_with_zero(self):
        wide = Matrix.one(2, 4, dtype=int)
        self.assertEqual(wide.tolist(), [[1, 0, 0, 0], [0, 1, 0, 0]])
        tall = Matrix.one(3, 2, dtype=int)
        self.assertEqual(tall.tolist(), [[1, 0], [0, 1], [0, 0]])

    def test_identity_shorthand(self):
        self.assertEqual(matrix2d.identity(2), Matrix.one(2, 2))


class TestAccessors(unittest.TestCase):
    def test_size_row_column(self):
        m = Matrix.from_fn(4, 7, lambda i, j: 0)
        self.assertEqual(m.size(), (4, 7))
        self.assertEqual(m.row(), 4)
        self.assertEqual(m.column(), 7)
        self.assertEqual(m.shape, (4, 7))

    def test_equality(self):
        a = Matrix.from_vec(2, 2, [1, 2, 3, 4])
        self.assertEqual(a, Matrix.from_vec(2, 2, [1, 2, 3, 4]))
        self.assertNotEqual(a, Matrix.from_vec(2, 2, [1, 2, 3, 5]))
        self.assertNotEqual(a, Matrix.from_vec(1, 4, [1, 2, 3, 4]))
        self.assertNotEqual(a, [[1, 2], [3, 4]])

    def test_unhashable(self):
        with self.assertRaises(TypeError):
            hash(Matrix.zero(1, 1))

    def test_copy_and_deepcopy(self):
        a = Matrix.from_vec(1, 2, [[1], [2]])
        shallow = copy.copy(a)
        deep = copy.deepcopy(a)
        self.assertEqual(shallow, a)
        self.assertEqual(deep, a)
        self.assertIs(shallow[0, 0], a[0, 0])
        self.assertIsNot(deep[0, 0], a[0, 0])
        self.assertEqual(a.copy(), a)

    def test_matrix_from_nested_rows(self):
        m = matrix2d.matrix([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(m.size(), (2, 3))
        self.assertEqual(m[1, 2], 6)

    def test_matrix_from_matrix_copies(self):
        a = Matrix.from_vec(2, 1, [1, 2])
        b = matrix2d.matrix(a)
        self.assertEqual(a, b)
        self.assertIsNot(a, b)

    def test_matrix_rejects_ragged_rows(self):
        with self.assertRaises(ShapeMismatchError):
            matrix2d.matrix([[1, 2], [3]])

    def test_matrix_rejects_non_sequence(self):
        with self.assertRaises(TypeError):
            matrix2d.matrix(5)
        with self.assertRaises(TypeError):
            matrix2d.matrix("ab")
        with self.assertRaises(TypeError):
            matrix2d.matrix([1, 2])

    def test_numpy_integer_extents_are_accepted(self):
        m = Matrix.from_fn(np.int64(2), np.int32(3), lambda i, j: i + j)
        self.assertEqual(m.size(), (2, 3))
        self.assertIs(type(m.row()), int)
        self.assertEqual(Matrix.zero(np.int64(1), 1).size(), (1, 1))

    def test_matrix_from_ndarray_rows(self):
        m = matrix2d.matrix([np.array([1, 2]), np.array([3, 4])])
        self.assertEqual(m.tolist(), [[1, 2], [3, 4]])
        self.assertIs(type(m[0, 0]), int)
        with self.assertRaises(ShapeMismatchError):
            matrix2d.matrix([np.array([1, 2]), np.array([3])])
        with self.assertRaises(TypeError):
            matrix2d.matrix([np.zeros((2, 2))])

    def test_matrix_empty_input(self):
        self.assertEqual(matrix2d.matrix([]).size(), (0, 0))
        self.assertEqual(matrix2d.matrix([[], []]).size(), (2, 0))


if __name__ == "__main__":
    unittest.main()
