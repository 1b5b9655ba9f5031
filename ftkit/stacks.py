"""Two-stack machine for push_swap: stacks, their operations and input parsing."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass
class Item:
    """A value on a stack, together with its rank among all values."""

    value: int
    index: int = 0


class Stack:
    """A stack of items, with the top at the front."""

    def __init__(self, items: Optional[Iterable[Item]] = None) -> None:
        self._items: deque[Item] = deque(items or ())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def top(self) -> Item:
        """Return the top item; raise IndexError when the stack is empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[0]

    def values(self) -> list[int]:
        """Values from top to bottom."""
        return [item.value for item in self._items]

    def indices(self) -> list[int]:
        """Ranks from top to bottom."""
        return [item.index for item in self._items]

    def push_top(self, item: Item) -> None:
        """Put ``item`` on top."""
        self._items.appendleft(item)

    def push_bottom(self, item: Item) -> None:
        """Put ``item`` at the bottom."""
        self._items.append(item)

    def pop_top(self) -> Item:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.popleft()

    def swap(self) -> bool:
        """Swap the two top items. Return False if there were fewer than two."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top item to the bottom. Return False if fewer than two items."""
        if len(self._items) < 2:
            return False
        self._items.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom item to the top. Return False if fewer than two items."""
        if len(self._items) < 2:
            return False
        self._items.rotate(1)
        return True


class Machine:
    """Stacks ``a`` and ``b`` with the push_swap instructions.

    Every instruction that changes a stack is appended to ``operations``;
    one that has nothing to act on is not recorded.
    """

    def __init__(self, values: Sequence[int]) -> None:
        values = list(values)
        self.a = Stack(Item(value, index) for value, index in zip(values, rank(values)))
        self.b = Stack()
        self.operations: list[str] = []

    def _record(self, done: bool, name: str) -> None:
        if done:
            self.operations.append(name)

    def sa(self) -> None:
        self._record(self.a.swap(), "sa")

    def sb(self) -> None:
        self._record(self.b.swap(), "sb")

    def ss(self) -> None:
        self.sa()
        self.sb()

    def pa(self) -> None:
        if len(self.b) == 0:
            return
        self.a.push_top(self.b.pop_top())
        self.operations.append("pa")

    def pb(self) -> None:
        if len(self.a) == 0:
            return
        self.b.push_top(self.a.pop_top())
        self.operations.append("pb")

    def ra(self) -> None:
        self._record(self.a.rotate(), "ra")

    def rb(self) -> None:
        self._record(self.b.rotate(), "rb")

    def rr(self) -> None:
        self.ra()
        self.rb()

    def rra(self) -> None:
        self._record(self.a.reverse_rotate(), "rra")

    def rrb(self) -> None:
        self._record(self.b.reverse_rotate(), "rrb")

    def rrr(self) -> None:
        self.rra()
        self.rrb()


def _sign_and_digits(text: str) -> tuple[int, str]:
    sign = 1
    if text[:1] in ("-", "+"):
        if text[0] == "-":
            sign = -1
        text = text[1:]
    return sign, text


def atoll(text: str) -> int:
    """Read an optional sign and the digits that follow, stopping at a non-digit."""
    sign, rest = _sign_and_digits(text)
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - 48)
    return sign * number


def is_valid_integer(text: str) -> bool:
    """True if ``text`` is an optional sign followed only by digits, within int range.

    A lone sign counts as zero.
    """
    if not text:
        return False
    sign, rest = _sign_and_digits(text)
    if any(not "0" <= ch <= "9" for ch in rest):
        return False
    number = sign * atoll(rest)
    return INT_MIN <= number <= INT_MAX


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into integers.

    Raises ValueError for a malformed number, one out of int range, or a
    duplicate.
    """
    numbers: list[int] = []
    seen: set[int] = set()
    for arg in args:
        number = atoll(arg)
        if not is_valid_integer(arg) or not INT_MIN <= number <= INT_MAX or number in seen:
            raise ValueError(f"invalid argument: {arg!r}")
        seen.add(number)
        numbers.append(number)
    return numbers


def is_sorted(values: Sequence[int]) -> bool:
    """True if ``values`` never decreases from one element to the next."""
    return all(a <= b for a, b in zip(values, values[1:]))


def rank(values: Sequence[int]) -> list[int]:
    """For each value, the number of other values smaller than it."""
    ordered = sorted(values)
    position: dict[int, int] = {}
    for i, value in enumerate(ordered):
        position.setdefault(value, i)
    return [position[value] for value in values]