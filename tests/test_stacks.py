import pytest

from pushswap.stacks import Stacks

VALUES = [7, -3, 12, 0, 5]


def test_sa_swaps_top_two():
    s = Stacks(VALUES)
    s.sa()
    assert s.a == [VALUES[1], VALUES[0]] + VALUES[2:]
    assert s.moves == ["sa"]


def test_sa_twice_restores():
    s = Stacks(VALUES)
    s.sa()
    s.sa()
    assert s.a == VALUES
    assert s.moves == ["sa", "sa"]


def test_sa_on_single_element_is_not_recorded():
    s = Stacks([4])
    s.sa()
    assert s.a == [4]
    assert s.moves == []


def test_record_false_leaves_no_trace():
    s = Stacks(VALUES)
    s.sa(False)
    s.ra(record=False)
    assert s.moves == []
    assert s.a != VALUES


def test_ss_is_recorded_even_without_effect():
    s = Stacks([4])
    s.ss()
    assert s.a == [4]
    assert s.moves == ["ss"]


def test_pb_moves_top_of_a():
    s = Stacks(VALUES)
    s.pb()
    assert s.b == VALUES[:1]
    assert s.a == VALUES[1:]
    assert s.moves == ["pb"]


def test_pa_on_empty_b_does_nothing():
    s = Stacks(VALUES)
    s.pa()
    assert s.a == VALUES
    assert s.moves == []


def test_pb_on_empty_a_does_nothing():
    s = Stacks([])
    s.pb()
    assert s.b == []
    assert s.moves == []


def test_pb_then_pa_restores():
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    s.pa()
    s.pa()
    assert s.a == VALUES
    assert s.b == []
    assert s.moves == ["pb", "pb", "pa", "pa"]


def test_b_stacks_in_push_order():
    s = Stacks(VALUES)
    s.pb()
    s.pb()
    assert s.b == [VALUES[1], VALUES[0]]


def test_ra_moves_top_to_bottom():
    s = Stacks(VALUES)
    s.ra()
    assert s.a == VALUES[1:] + VALUES[:1]
    assert s.moves == ["ra"]


def test_rra_moves_bottom_to_top():
    s = Stacks(VALUES)
    s.rra()
    assert s.a == VALUES[-1:] + VALUES[:-1]
    assert s.moves == ["rra"]


def test_ra_then_rra_restores():
    s = Stacks(VALUES)
    s.ra()
    s.rra()
    assert s.a == VALUES


def test_full_rotation_restores():
    s = Stacks(VALUES)
    for _ in VALUES:
        s.ra(False)
    assert s.a == VALUES


def test_rb_and_rrb_on_b():
    s = Stacks(VALUES)
    for _ in range(3):
        s.pb(False)
    pushed = list(s.b)
    s.rb()
    assert s.b == pushed[1:] + pushed[:1]
    s.rrb()
    assert s.b == pushed
    assert s.moves == ["rb", "rrb"]


def test_rr_and_rrr_rotate_both():
    s = Stacks(VALUES)
    s.pb(False)
    s.pb(False)
    a_before, b_before = list(s.a), list(s.b)
    s.rr()
    assert s.a == a_before[1:] + a_before[:1]
    assert s.b == b_before[1:] + b_before[:1]
    s.rrr()
    assert (s.a, s.b) == (a_before, b_before)
    assert s.moves == ["rr", "rrr"]


def test_sb_and_ss_swap_b():
    s = Stacks(VALUES)
    s.pb(False)
    s.pb(False)
    b_before = list(s.b)
    s.sb()
    assert s.b == b_before[::-1]
    s.ss()
    assert s.b == b_before
    assert s.moves == ["sb", "ss"]


def test_rotation_on_short_stack_not_recorded():
    s = Stacks([9])
    s.ra()
    s.rra()
    s.rb()
    s.rrb()
    assert s.moves == []


def test_size():
    s = Stacks(VALUES)
    s.pb(False)
    assert s.size("a") == len(VALUES) - 1
    assert s.size("b") == 1


def test_min_and_max_a():
    s = Stacks(VALUES)
    assert s.min_a() == -3
    assert s.max_a() == 12


def test_min_max_of_empty_a_is_zero():
    s = Stacks([])
    assert s.min_a() == 0
    assert s.max_a() == 0
    assert s.min_pos_a() == 0
    assert s.max_pos_b() == 0


def test_min_pos_a_points_at_minimum():
    s = Stacks(VALUES)
    assert s.a[s.min_pos_a()] == -3


def test_max_pos_b_points_at_maximum():
    s = Stacks(VALUES)
    for _ in VALUES:
        s.pb(False)
    assert s.b[s.max_pos_b()] == 12


@pytest.mark.parametrize(
    "values, expected",
    [([], True), ([1], True), ([1, 2, 3], True), ([2, 1, 3], False), ([1, 3, 2], False)],
)
def test_is_sorted_a(values, expected):
    assert Stacks(values).is_sorted_a() is expected