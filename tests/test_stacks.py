import pytest

from ftkit.stacks import (
    Item,
    Machine,
    Stack,
    atoll,
    is_sorted,
    is_valid_integer,
    parse_arguments,
    rank,
)


def make_stack(values):
    return Stack(Item(v) for v in values)


def test_stack_order_and_len():
    s = make_stack([1, 2, 3])
    assert len(s) == 3
    assert s.values() == [1, 2, 3]
    assert s.top().value == 1


def test_push_and_pop():
    s = make_stack([5])
    s.push_top(Item(4))
    s.push_bottom(Item(6))
    assert s.values() == [4, 5, 6]
    assert s.pop_top().value == 4
    assert s.values() == [5, 6]


def test_empty_stack_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop_top()
    with pytest.raises(IndexError):
        s.top()


def test_swap():
    s = make_stack([1, 2, 3])
    assert s.swap() is True
    assert s.values() == [2, 1, 3]
    single = make_stack([7])
    assert single.swap() is False
    assert single.values() == [7]


def test_rotate_and_reverse_rotate_round_trip():
    s = make_stack([1, 2, 3, 4])
    assert s.rotate() is True
    assert s.values() == [2, 3, 4, 1]
    assert s.reverse_rotate() is True
    assert s.values() == [1, 2, 3, 4]
    assert Stack().rotate() is False
    assert make_stack([9]).reverse_rotate() is False


def test_machine_indices_follow_rank():
    m = Machine([30, 10, 20])
    assert m.a.values() == [30, 10, 20]
    assert m.a.indices() == rank([30, 10, 20])
    assert sorted(m.a.indices()) == [0, 1, 2]


def test_machine_push_moves_between_stacks():
    m = Machine([1, 2, 3])
    m.pb()
    m.pb()
    assert m.a.values() == [3]
    assert m.b.values() == [2, 1]
    m.pa()
    assert m.a.values() == [2, 3]
    assert m.operations == ["pb", "pb", "pa"]


def test_machine_noop_not_recorded():
    m = Machine([1])
    m.sa()
    m.ra()
    m.rra()
    m.pa()
    m.sb()
    assert m.operations == []
    assert m.a.values() == [1]


def test_machine_combined_ops_record_each_part():
    m = Machine([1, 2, 3, 4])
    m.pb()
    m.pb()
    m.ss()
    assert m.operations[-2:] == ["sa", "sb"]
    m.rr()
    assert m.operations[-2:] == ["ra", "rb"]
    m.rrr()
    assert m.operations[-2:] == ["rra", "rrb"]
    assert m.a.values() == [4, 3]
    assert m.b.values() == [1, 2]


def test_machine_ss_with_short_b_records_only_sa():
    m = Machine([1, 2, 3])
    m.ss()
    assert m.operations == ["sa"]


def test_atoll():
    assert atoll("42") == 42
    assert atoll("-42") == -42
    assert atoll("+7abc") == 7
    assert atoll("") == 0
    assert atoll(" 5") == 0


@pytest.mark.parametrize("text", ["0", "-1", "+15", "2147483647", "-2147483648", "-"])
def test_valid_integers(text):
    assert is_valid_integer(text) is True


@pytest.mark.parametrize("text", ["", "2147483648", "-2147483649", "1a", " 1", "--1"])
def test_invalid_integers(text):
    assert is_valid_integer(text) is False


def test_parse_arguments():
    assert parse_arguments(["3", "-1", "+2"]) == [3, -1, 2]


@pytest.mark.parametrize(
    "args", [["1", "1"], ["1", "x"], ["2147483648"], [""], ["5", "+5"]]
)
def test_parse_arguments_errors(args):
    with pytest.raises(ValueError):
        parse_arguments(args)


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([1]) is True
    assert is_sorted([1, 2, 3]) is True
    assert is_sorted([2, 1]) is False


def test_rank_is_permutation_in_value_order():
    values = [50, -3, 12, 7]
    ranks = rank(values)
    assert sorted(ranks) == list(range(len(values)))
    ordered_by_rank = [v for _, v in sorted(zip(ranks, values))]
    assert ordered_by_rank == sorted(values)