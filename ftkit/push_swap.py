"""Greedy push_swap solver and its command-line entry point."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Optional, Sequence

from .stacks import Machine, is_sorted, parse_arguments


def find_top_three(indices: Iterable[int]) -> tuple[int, int, int]:
    """Return the three largest ranks in ``indices``, largest first.

    Missing places (fewer than three ranks) are reported as -1.
    """
    max1 = max2 = max3 = -1
    for index in indices:
        if index > max1:
            max3, max2, max1 = max2, max1, index
        elif index > max2:
            max3, max2 = max2, index
        elif index > max3:
            max3 = index
    return max1, max2, max3


def get_insert_position(values: Sequence[int], value: int) -> int:
    """Return how far stack ``a`` (``values``, top first) must rotate to take ``value``.

    The stack is treated as circular: the bottom value precedes the top one.
    Raises ValueError for an empty stack.
    """
    if not values:
        raise ValueError("cannot find an insert position in an empty stack")
    last = values[-1]
    for pos, current in enumerate(values):
        if last < value and current > value:
            return pos
        if last > current and value < current:
            return pos
        last = current
    return len(values)


def move_count_to_top(size: int, index: int) -> int:
    """Number of rotations needed to bring position ``index`` to the top."""
    if index <= size // 2:
        return index
    return size - index


def find_min_moves(machine: Machine) -> tuple[int, int]:
    """Return ``(position in b, moves)`` for the cheapest item of ``b`` to push to ``a``.

    Ties go to the item nearest the top of ``b``. Raises ValueError when
    ``b`` is empty.
    """
    b_size = len(machine.b)
    if b_size == 0:
        raise ValueError("stack b is empty")
    a_values = machine.a.values()
    best_index = 0
    best_moves: Optional[int] = None
    for position, item in enumerate(machine.b):
        pos_in_a = get_insert_position(a_values, item.value)
        moves = move_count_to_top(b_size, position) + move_count_to_top(
            len(a_values), pos_in_a
        )
        if best_moves is None or moves < best_moves:
            best_index, best_moves = position, moves
    assert best_moves is not None
    return best_index, best_moves


def _bring_to_top(
    size: int, position: int, rotate: Callable[[], None], reverse: Callable[[], None]
) -> None:
    if position <= size // 2:
        for _ in range(position):
            rotate()
    else:
        for _ in range(size - position):
            reverse()


def sort_three(machine: Machine) -> None:
    """Sort a stack ``a`` of exactly three items."""
    if len(machine.a) != 3:
        raise ValueError(f"sort_three needs three items, got {len(machine.a)}")
    first, second, third = machine.a.indices()
    if first < second and second > third and third > first:
        machine.rra()
        machine.sa()
    elif first > second and second < third and third > first:
        machine.sa()
    elif first < second and second > third and third < first:
        machine.rra()
    elif first > second and second < third and third < first:
        machine.ra()
    elif first > second and second > third and third < first:
        machine.sa()
        machine.rra()


def _move_except_top_three_to_b(machine: Machine) -> None:
    keep = find_top_three(machine.a.indices())
    for _ in range(len(machine.a)):
        if machine.a.top().index in keep:
            machine.ra()
        else:
            machine.pb()


def _push_all_to_a(machine: Machine) -> None:
    while len(machine.b):
        b_index, _ = find_min_moves(machine)
        _bring_to_top(len(machine.b), b_index, machine.rb, machine.rrb)
        pos_in_a = get_insert_position(machine.a.values(), machine.b.top().value)
        _bring_to_top(len(machine.a), pos_in_a, machine.ra, machine.rra)
        machine.pa()


def _move_index_0_to_top(machine: Machine) -> None:
    indices = machine.a.indices()
    position = indices.index(0) if 0 in indices else len(indices)
    _bring_to_top(len(indices), position, machine.ra, machine.rra)


def sort_machine(machine: Machine) -> None:
    """Sort stack ``a`` of ``machine``, recording the instructions used."""
    size = len(machine.a)
    if size < 2:
        return
    if size == 2:
        machine.sa()
    elif size == 3:
        sort_three(machine)
    else:
        _move_except_top_three_to_b(machine)
        sort_three(machine)
        _push_all_to_a(machine)
        _move_index_0_to_top(machine)


def solve(values: Sequence[int]) -> list[str]:
    """Return the instructions that sort ``values`` (top first) in ascending order.

    Already sorted input needs no instructions. Raises ValueError on
    duplicate values.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    if is_sorted(values):
        return []
    machine = Machine(values)
    sort_machine(machine)
    return machine.operations


def main(argv: Optional[list[str]] = None) -> int:
    """Print the instructions that sort the integers given as arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        numbers = parse_arguments(args)
    except ValueError:
        sys.stderr.write("Error\n")
        return 0
    operations = solve(numbers)
    if operations:
        sys.stdout.write("".join(f"{op}\n" for op in operations))
        sys.stdout.flush()
    return 0