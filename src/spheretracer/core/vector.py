# core/vector.py
import math
import sys


class Vector3:
    """
    An immutable 3D vector supporting arithmetic, dot and cross products,
    normalization and a few componentwise helpers.

    The same type is used for positions, directions, normals and colors.
    """
    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    @classmethod
    def zero(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def __add__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self._x + other._x, self._y + other._y, self._z + other._z)
        return Vector3(self._x + other, self._y + other, self._z + other)

    def __radd__(self, other: float) -> "Vector3":
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Vector3):
            return Vector3(self._x - other._x, self._y - other._y, self._z - other._z)
        return Vector3(self._x - other, self._y - other, self._z - other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self._x, -self._y, -self._z)

    def __mul__(self, other):
        # Element-wise multiplication for vectors, scaling otherwise.
        if isinstance(other, Vector3):
            return Vector3(self._x * other._x, self._y * other._y, self._z * other._z)
        return Vector3(self._x * other, self._y * other, self._z * other)

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        return Vector3(self._x / t, self._y / t, self._z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._x == other._x and self._y == other._y and self._z == other._z

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._z))

    def __iter__(self):
        yield self._x
        yield self._y
        yield self._z

    def dot(self, other: "Vector3") -> float:
        return self._x * other._x + self._y * other._y + self._z * other._z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x
        )

    def length_squared(self) -> float:
        return self._x * self._x + self._y * self._y + self._z * self._z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        l = self.length()
        if l == 0:
            return Vector3(0, 0, 0)
        return self / l

    def near_zero(self, eps: float = sys.float_info.epsilon) -> bool:
        """
        True when the vector is shorter than eps.
        """
        return self.length() < eps

    def clamp(self, lo: float, hi: float) -> "Vector3":
        return Vector3(
            min(max(self._x, lo), hi),
            min(max(self._y, lo), hi),
            min(max(self._z, lo), hi)
        )

    def sqrt(self) -> "Vector3":
        return Vector3(math.sqrt(self._x), math.sqrt(self._y), math.sqrt(self._z))

    def to_tuple(self) -> tuple:
        return (self._x, self._y, self._z)

    def __repr__(self) -> str:
        return f"Vector3({self._x}, {self._y}, {self._z})"
