from numbers import Real

from ..utils.backend import xp, DTYPE
from .errors import ShapeError


def _is_scalar(value):
    return isinstance(value, Real) and not isinstance(value, bool)


def _require_tensor(value, kind=None):
    kind = kind or Tensor
    if not isinstance(value, kind):
        raise TypeError(f"Argument must be an instance of {kind.__name__}, got {type(value).__name__}")


def _accumulate(products, axis):
    # cumsum adds strictly left to right, unlike sum/dot which may reorder
    if products.shape[axis] == 0:
        shape = products.shape[:axis] + products.shape[axis + 1:]
        return xp.zeros(shape, dtype=DTYPE)
    return xp.cumsum(products, axis=axis).take(-1, axis=axis)


class Tensor:
    """Immutable numeric container backed by a float64 array.

    Concrete tensors are :class:`Vector` (1-D) and :class:`Matrix` (2-D).
    Every operation returns a new tensor; shapes are never broadcast.
    """

    ndim = None

    # numpy operands defer to the reflected operators below instead of broadcasting
    __array_ufunc__ = None

    @classmethod
    def _from_array(cls, data):
        out = cls.__new__(cls)
        out.data = data
        return out

    @property
    def shape(self):
        return self.data.shape

    @property
    def dtype(self):
        return self.data.dtype

    @property
    def size(self):
        return self.data.size

    @property
    def T(self):
        return transpose(self)

    def __len__(self):
        return len(self.data)

    def __eq__(self, other):
        if not isinstance(other, Tensor):
            return NotImplemented
        return type(self) is type(other) and self.shape == other.shape and bool(xp.array_equal(self.data, other.data))

    __hash__ = None

    def tolist(self):
        return self.data.tolist()

    def copy(self):
        return self._from_array(self.data.copy())

    def transpose(self):
        return transpose(self)

    def map(self, func):
        return map_elements(self, func)

    def __add__(self, other):
        return add(self, other)

    def __sub__(self, other):
        return subtract(self, other)

    def __radd__(self, other):
        return add(other, self)

    def __rsub__(self, other):
        return subtract(other, self)

    def __mul__(self, other):
        if isinstance(other, Tensor):
            return elementwise_multiply(self, other)
        return scalar_multiply(self, other)

    def __rmul__(self, other):
        return scalar_multiply(self, other)

    def __iadd__(self, other):
        raise NotImplementedError("In-place operations are not supported on tensors")

    def __isub__(self, other):
        raise NotImplementedError("In-place operations are not supported on tensors")

    def __imul__(self, other):
        raise NotImplementedError("In-place operations are not supported on tensors")

    def __str__(self):
        return f"{type(self).__name__}(shape={self.shape}, dtype={self.dtype})"


class Vector(Tensor):
    ndim = 1

    def __init__(self, data):
        if isinstance(data, Matrix):
            raise TypeError("Cannot build a Vector from a Matrix")
        if isinstance(data, Vector):
            data = data.data.copy()
        elif isinstance(data, xp.ndarray):
            data = data.astype(DTYPE, copy=True)
        elif _is_scalar(data):
            raise TypeError("Vector requires a sequence of numbers, got a scalar")
        else:
            values = list(data)
            for value in values:
                if not _is_scalar(value):
                    raise TypeError(f"Vector elements must be real numbers, got {type(value).__name__}")
            data = xp.array(values, dtype=DTYPE)

        if data.ndim != 1:
            raise ShapeError(f"Vector data must be 1-dimensional, got shape {data.shape}")
        self.data = data

    def __getitem__(self, key):
        if isinstance(key, slice):
            return Vector._from_array(self.data[key].copy())
        return float(self.data[key])

    def __iter__(self):
        return iter(self.data.tolist())

    def __matmul__(self, other):
        return dot(self, other)

    def dot(self, other):
        return dot(self, other)

    def __repr__(self):
        return f"Vector({self.data.tolist()})"


class Matrix(Tensor):
    """Rectangular sequence of row Vectors.

    Rows may be given as Vectors or as plain numeric sequences; every row is
    validated and all rows must share one length.
    """

    ndim = 2

    def __init__(self, rows):
        if isinstance(rows, Matrix):
            data = rows.data.copy()
        elif isinstance(rows, Vector) or _is_scalar(rows):
            raise TypeError("Matrix requires a sequence of rows")
        elif isinstance(rows, xp.ndarray):
            if rows.ndim != 2:
                raise ShapeError(f"Matrix data must be 2-dimensional, got shape {rows.shape}")
            data = rows.astype(DTYPE, copy=True)
        else:
            rows = [row if isinstance(row, Vector) else Vector(row) for row in rows]
            lengths = {len(row) for row in rows}
            if len(lengths) > 1:
                raise ShapeError(f"All rows of a Matrix must have the same length, got lengths {sorted(lengths)}")
            if rows:
                data = xp.stack([row.data for row in rows]).astype(DTYPE, copy=False)
            else:
                data = xp.zeros((0, 0), dtype=DTYPE)
        self.data = data

    @property
    def rows(self):
        return [self.row(i) for i in range(self.shape[0])]

    def row(self, index):
        return Vector._from_array(self.data[index].copy())

    def column(self, index):
        return Vector._from_array(self.data[:, index].copy())

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return float(self.data[key])
        if isinstance(key, slice):
            return Matrix._from_array(self.data[key].copy())
        return self.row(key)

    def __iter__(self):
        for i in range(self.shape[0]):
            yield self.row(i)

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return matrix_matrix_multiply(self, other)
        return matrix_vector_multiply(self, other)

    def __repr__(self):
        return f"Matrix({self.data.tolist()})"


def _elementwise(a, b, op, name):
    _require_tensor(a)
    _require_tensor(b)
    if a.shape != b.shape:
        raise ShapeError(f"Both tensors must have the same shape to {name}, got {a.shape} and {b.shape}")
    return a._from_array(op(a.data, b.data))


def add(a, b):
    return _elementwise(a, b, xp.add, "add")


def subtract(a, b):
    return _elementwise(a, b, xp.subtract, "subtract")


def elementwise_multiply(a, b):
    return _elementwise(a, b, xp.multiply, "multiply")


def scalar_multiply(a, k):
    _require_tensor(a)
    if not _is_scalar(k):
        raise TypeError(f"Scalar must be a real number, got {type(k).__name__}")
    return a._from_array(a.data * k)


def dot(u, v):
    """Sum of pairwise products, accumulated left to right from 0."""
    _require_tensor(u, Vector)
    _require_tensor(v, Vector)
    if len(u) != len(v):
        raise ShapeError(f"Both vectors must have the same length to compute the dot product, got {len(u)} and {len(v)}")
    return float(_accumulate(u.data * v.data, axis=0))


def matrix_vector_multiply(m, v):
    _require_tensor(m, Matrix)
    _require_tensor(v, Vector)
    if m.shape[1] != len(v):
        raise ShapeError(f"The number of columns in the matrix ({m.shape[1]}) must equal the length of the vector ({len(v)})")
    return Vector._from_array(_accumulate(m.data * v.data, axis=1))


def matrix_matrix_multiply(a, b):
    _require_tensor(a, Matrix)
    _require_tensor(b, Matrix)
    if a.shape[1] != b.shape[0]:
        raise ShapeError(f"The number of columns in the first matrix ({a.shape[1]}) must equal "
                         f"the number of rows in the second matrix ({b.shape[0]})")
    # (m, k, n): row i of a against column j of b along k
    products = a.data[:, :, None] * b.data[None, :, :]
    return Matrix._from_array(_accumulate(products, axis=1))


def outer(u, v):
    _require_tensor(u, Vector)
    _require_tensor(v, Vector)
    return Matrix._from_array(u.data[:, None] * v.data[None, :])


def transpose(t):
    """Swap rows and columns. A Vector transposes into an (n, 1) column Matrix."""
    _require_tensor(t)
    if isinstance(t, Vector):
        return Matrix._from_array(t.data.reshape(-1, 1).copy())
    return Matrix._from_array(t.data.T.copy())


def map_elements(t, func):
    _require_tensor(t)
    if not callable(func):
        raise TypeError("func must be callable")
    mapped = xp.vectorize(func, otypes=[DTYPE])(t.data)
    return t._from_array(mapped.reshape(t.shape))


map = map_elements
