from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class Alignment(Enum):
    LEFT = "<"
    RIGHT = ">"
    CENTERED = "="


class SparseColumnVector(Generic[T]):
    """
    Per-column values with a default for every column past the stored range.

    The default moves with each push, so trailing columns inherit whatever the
    last configured column had (alignment or width).
    """

    def __init__(self, default: T):
        self.values: list[T] = []
        self.default = default

    def __len__(self) -> int:
        return len(self.values)

    def __repr__(self) -> str:
        return f"SparseColumnVector({self.values!r}, default={self.default!r})"

    def get(self, index: int) -> T:
        if index < len(self.values):
            return self.values[index]
        return self.default

    def set(self, index: int, value: T) -> None:
        missing = index + 1 - len(self.values)
        if missing > 0:
            self.values.extend([self.default] * missing)
        self.values[index] = value

    def push(self, value: T) -> None:
        self.default = value
        self.values.append(value)

    def copy(self) -> "SparseColumnVector[T]":
        clone = SparseColumnVector(self.default)
        clone.values = list(self.values)
        return clone
