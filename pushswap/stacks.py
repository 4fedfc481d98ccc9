"""The two stacks and the eleven moves that act on them."""

from __future__ import annotations

from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of the moves made.

    Every move takes ``record``. When it is true and the move counts as
    performed, the move's name is appended to :attr:`moves`.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: list[int] = list(values)
        self.b: list[int] = []
        self.moves: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.a!r}, b={self.b!r})"

    def _note(self, name: str, record: bool) -> None:
        if record:
            self.moves.append(name)

    @staticmethod
    def _swap(stack: list[int]) -> bool:
        if len(stack) <= 1:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: list[int]) -> bool:
        if len(stack) <= 1:
            return False
        stack.append(stack.pop(0))
        return True

    @staticmethod
    def _reverse_rotate(stack: list[int]) -> bool:
        if len(stack) <= 1:
            return False
        stack.insert(0, stack.pop())
        return True

    def sa(self, record: bool = True) -> None:
        """Swap the top two elements of ``a``."""
        if self._swap(self.a):
            self._note("sa", record)

    def sb(self, record: bool = True) -> None:
        """Swap the top two elements of ``b``."""
        if self._swap(self.b):
            self._note("sb", record)

    def ss(self, record: bool = True) -> None:
        """Swap the tops of both stacks."""
        self.sa(False)
        self.sb(False)
        self._note("ss", record)

    def pa(self, record: bool = True) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.insert(0, self.b.pop(0))
        self._note("pa", record)

    def pb(self, record: bool = True) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.insert(0, self.a.pop(0))
        self._note("pb", record)

    def ra(self, record: bool = True) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        if self._rotate(self.a):
            self._note("ra", record)

    def rb(self, record: bool = True) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        if self._rotate(self.b):
            self._note("rb", record)

    def rr(self, record: bool = True) -> None:
        """Rotate both stacks."""
        self.ra(False)
        self.rb(False)
        self._note("rr", record)

    def rra(self, record: bool = True) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        if self._reverse_rotate(self.a):
            self._note("rra", record)

    def rrb(self, record: bool = True) -> None:
        """Rotate ``b`` so its bottom comes to the top."""
        if self._reverse_rotate(self.b):
            self._note("rrb", record)

    def rrr(self, record: bool = True) -> None:
        """Reverse-rotate both stacks."""
        self.rra(False)
        self.rrb(False)
        self._note("rrr", record)

    def size(self, name: str) -> int:
        """Size of stack ``a`` when ``name`` is ``"a"``, else of ``b``."""
        return len(self.a) if name == "a" else len(self.b)

    def min_a(self) -> int:
        """Smallest value in ``a``, or 0 when ``a`` is empty."""
        return min(self.a, default=0)

    def max_a(self) -> int:
        """Largest value in ``a``, or 0 when ``a`` is empty."""
        return max(self.a, default=0)

    def min_pos_a(self) -> int:
        """Position of the first smallest value in ``a`` (0 when empty)."""
        if not self.a:
            return 0
        return self.a.index(min(self.a))

    def max_pos_b(self) -> int:
        """Position of the first largest value in ``b`` (0 when empty)."""
        if not self.b:
            return 0
        return self.b.index(max(self.b))

    def is_sorted_a(self) -> bool:
        """True when ``a`` is in ascending order from the top."""
        return all(x <= y for x, y in zip(self.a, self.a[1:]))