import numpy as np
from typing import Iterator, List


class Bits:
    """
    A fixed capacity set of node ids backed by a numpy boolean vector.

    Used for visited tracking during traversals and for result bitmaps such as
    colorings and spanning forest leaves. Indexing past the capacity is the
    caller's responsibility and raises from numpy.
    """

    def __init__(self, num: int):
        """
        Create a bitset with room for ``num`` node ids, all clear.

        Parameters
        ----------
        num : int
            Number of bits (typically the order of a graph).
        """

        self.num = num
        self._bits = np.zeros(num, dtype=bool)

    @classmethod
    def ones(cls, num: int) -> "Bits":
        """
        Create a bitset with every bit set.

        Parameters
        ----------
        num : int
            Number of bits.

        Returns
        -------
        Bits
            A bitset with bits ``0 .. num-1`` set.
        """

        b = cls(num)
        b.fill()
        return b

    def bit(self, n: int) -> bool:
        return bool(self._bits[n])

    def set_bit(self, n: int) -> None:
        self._bits[n] = True

    def clear_bit(self, n: int) -> None:
        self._bits[n] = False

    def fill(self) -> None:
        self._bits[:] = True

    def clear(self) -> None:
        self._bits[:] = False

    def reset(self, num: int) -> None:
        """Resize to room for ``num`` node ids, all clear."""
        self.num = num
        self._bits = np.zeros(num, dtype=bool)

    def count(self) -> int:
        """Number of set bits."""
        return int(np.count_nonzero(self._bits))

    def slice(self) -> List[int]:
        """
        List the set bits in ascending order.

        Returns
        -------
        List[int]
            Node ids with their bit set.
        """

        return np.flatnonzero(self._bits).tolist()

    def __contains__(self, n: int) -> bool:
        return bool(self._bits[n])

    def __iter__(self) -> Iterator[int]:
        return iter(self.slice())

    def __len__(self) -> int:
        return self.num

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bits):
            return NotImplemented
        return self.num == other.num and bool(np.array_equal(self._bits, other._bits))

    def __repr__(self) -> str:
        return f"Bits({self.num}, {self.slice()})"
