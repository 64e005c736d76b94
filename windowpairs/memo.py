from typing import Any, Generic, Iterator, TypeVar

import numpy as np

from .window_types import Pair

T = TypeVar("T")

class WindowMemo(Generic[T]):
    """Sparse two-dimensional table of window results, keyed by (left_index, right_index).
    Rows are created on demand. Reading a cell that was never written raises KeyError:

        memo[i][j]      # row lookup, then column lookup
        memo[i, j]      # single lookup
        memo[i, j] = v  # creates row i if needed"""

    def __init__(self):
        self._rows: dict[int, dict[int, T]] = dict()

    def __getitem__(self, key):
        if isinstance(key, tuple):
            i, j = key
            return self._rows[i][j]
        else:
            return self._rows[key]

    def __setitem__(self, key: Pair, value: T):
        i, j = key
        self._rows.setdefault(i, dict())[j] = value

    def __contains__(self, key: Pair) -> bool:
        i, j = key
        return i in self._rows and j in self._rows[i]

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows.values())

    def __iter__(self) -> Iterator[Pair]:
        return (key for (key, _) in self.items())

    def __repr__(self):
        return f"WindowMemo({len(self)} cells, {len(self._rows)} rows)"

    def get(self, key: Pair, default = None):
        if key in self:
            return self[key]
        else:
            return default

    def rows(self) -> list[int]:
        return list(self._rows.keys())

    def items(self) -> Iterator[tuple[Pair, T]]:
        "(pair, value) row by row, rows and cells each in the order they were first written."
        for (i, row) in self._rows.items():
            for (j, value) in row.items():
                yield (i, j), value

    def to_array(self, fill_value: Any = None) -> np.ndarray:
        """Dense (n, n) object array, where n is one more than the largest stored index.
        Cells that were never written hold `fill_value`."""
        if len(self) == 0:
            return np.empty((0, 0), dtype = object)
        n = 1 + max(max(i, j) for (i, j) in self)
        arr = np.full((n, n), fill_value, dtype = object)
        for ((i, j), value) in self.items():
            arr[i, j] = value
        return arr
