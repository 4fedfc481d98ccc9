"""Sorting stack ``a`` with the recorded moves, small and large inputs."""

from __future__ import annotations

from .stacks import Stacks


def get_range(size: int) -> int:
    """Width of the window of sorted values pushed to ``b`` at first."""
    if 6 <= size <= 18:
        return 3
    if size <= 100:
        return 15
    if size <= 500:
        return 45
    return 50


def move_min_to_top_a(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until its smallest value is on top."""
    min_pos = stacks.min_pos_a()
    size = len(stacks.a)
    if min_pos <= size // 2:
        for _ in range(min_pos):
            stacks.ra()
    else:
        for _ in range(size - min_pos):
            stacks.rra()


def push_biggest_to_top_b(stacks: Stacks) -> None:
    """Rotate ``b`` the shorter way until its largest value is on top."""
    size = len(stacks.b)
    if size <= 1:
        return
    max_pos = stacks.max_pos_b()
    if max_pos <= size // 2:
        for _ in range(max_pos):
            stacks.rb()
    else:
        for _ in range(size - max_pos):
            stacks.rrb()


def push_to_a(stacks: Stacks) -> None:
    """Move everything from ``b`` back to ``a``, largest first."""
    while stacks.b:
        push_biggest_to_top_b(stacks)
        stacks.pa()


def sort_2(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two elements."""
    if len(stacks.a) < 2:
        return
    if stacks.a[0] > stacks.a[1]:
        stacks.sa()


def sort_3(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three elements."""
    a = stacks.a
    if len(a) < 3:
        return
    if a[1] > a[0] and a[1] > a[2]:
        stacks.rra()
    if a[1] > a[0] and a[1] > a[2]:
        stacks.sa()
    if a[0] > a[1] and a[0] > a[2]:
        stacks.ra()
    if a[0] > a[1]:
        stacks.sa()


def sort_4(stacks: Stacks) -> None:
    """Sort a stack ``a`` of four elements."""
    if len(stacks.a) < 4:
        return
    move_min_to_top_a(stacks)
    stacks.pb()
    sort_3(stacks)
    stacks.pa()


def sort_5(stacks: Stacks) -> None:
    """Sort a stack ``a`` of five elements."""
    if len(stacks.a) < 5:
        return
    move_min_to_top_a(stacks)
    stacks.pb()
    sort_4(stacks)
    stacks.pa()


def _advance(index: int, window: int, size: int) -> tuple[int, int]:
    if index < window:
        index += 1
    if window < size - 1:
        window += 1
    return index, window


def sort_large(stacks: Stacks) -> None:
    """Sort ``a`` by pushing sliding chunks to ``b`` and pulling back maxima."""
    size = len(stacks.a)
    if size == 0:
        return
    ordered = sorted(stacks.a)
    window = min(get_range(size), size - 1)
    index = 0
    while stacks.a:
        top = stacks.a[0]
        if top <= ordered[index]:
            stacks.pb()
            if len(stacks.b) > 1:
                stacks.rb()
            index, window = _advance(index, window, size)
        elif top <= ordered[window]:
            stacks.pb()
            if len(stacks.b) > 1 and stacks.b[0] < stacks.b[1]:
                stacks.sb()
            index, window = _advance(index, window, size)
        else:
            stacks.ra()
    push_to_a(stacks)


def sort_stack(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy suited to its size."""
    if stacks.is_sorted_a():
        return
    strategies = {2: sort_2, 3: sort_3, 4: sort_4, 5: sort_5}
    strategies.get(len(stacks.a), sort_large)(stacks)