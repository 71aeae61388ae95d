"""Unit tests – page-window algorithm."""
from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from esfeed.feed.url import Direction
from esfeed.feed.window import page_window

LOG2 = ["e0", "e1"]


# ---------------------------------------------------------------------------
# Small logs
# ---------------------------------------------------------------------------

class TestEmptyLog:
    @pytest.mark.parametrize("direction", [Direction.FORWARD, Direction.BACKWARD])
    @pytest.mark.parametrize("version", [None, 0, 5])
    def test_everything_is_boundary(self, direction: Direction, version: int | None) -> None:
        window = page_window([], version, 20, direction)
        assert window.events == ()
        assert window.is_head_of_stream
        assert window.is_first_page
        assert window.is_last_page


class TestSingleEvent:
    def test_forward_from_zero(self) -> None:
        window = page_window(["e0"], 0, 20, Direction.FORWARD)
        assert window.events == ("e0",)
        assert window.is_head_of_stream
        assert window.is_first_page
        assert window.is_last_page

    def test_head_backward(self) -> None:
        window = page_window(["e0"], None, 20, Direction.BACKWARD)
        assert window.events == ("e0",)
        assert window.is_last_page

    def test_forward_past_head(self) -> None:
        window = page_window(["e0"], 1, 20, Direction.FORWARD)
        assert window.events == ()
        assert window.is_head_of_stream
        assert not window.is_last_page


class TestTwoEvents:
    def test_forward_page_of_one(self) -> None:
        window = page_window(LOG2, 0, 1, Direction.FORWARD)
        assert window.events == ("e0",)
        assert window.is_last_page
        assert not window.is_head_of_stream
        # end == 1 == length - 1
        assert window.is_first_page

    def test_forward_second_page(self) -> None:
        window = page_window(LOG2, 1, 1, Direction.FORWARD)
        assert window.events == ("e1",)
        assert window.is_head_of_stream
        assert not window.is_last_page

    def test_backward_from_head(self) -> None:
        window = page_window(LOG2, None, 1, Direction.BACKWARD)
        assert window.events == ("e1",)
        assert window.start == 1
        assert window.is_head_of_stream

    def test_backward_from_zero(self) -> None:
        window = page_window(LOG2, 0, 1, Direction.BACKWARD)
        assert window.events == ("e0",)
        assert window.is_last_page
        assert not window.is_head_of_stream

    def test_backward_version_past_head_is_clamped(self) -> None:
        window = page_window(LOG2, 10, 20, Direction.BACKWARD)
        assert window.events == ("e0", "e1")
        assert window.is_head_of_stream


class TestPaging:
    def test_forward_middle_page(self) -> None:
        log = list(range(45))
        window = page_window(log, 20, 20, Direction.FORWARD)
        assert window.events == tuple(range(20, 40))
        assert (window.start, window.end) == (20, 40)
        assert not window.is_last_page
        assert not window.is_head_of_stream

    def test_forward_tail_page(self) -> None:
        window = page_window(list(range(25)), 20, 20, Direction.FORWARD)
        assert window.events == (20, 21, 22, 23, 24)
        assert window.is_head_of_stream

    def test_invalid_page_size(self) -> None:
        with pytest.raises(ValueError):
            page_window([1], 0, 0, Direction.FORWARD)


class TestNegativeForwardVersion:
    @pytest.mark.parametrize("length", [1, 2, 5, 40])
    @pytest.mark.parametrize("size", [1, 3, 20])
    def test_empty_oldest_page(self, length: int, size: int) -> None:
        window = page_window(list(range(length)), -1, size, Direction.FORWARD)
        assert window.events == ()
        assert window.is_last_page
        assert not window.is_first_page
        assert not window.is_head_of_stream


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

logs = st.integers(min_value=0, max_value=80).map(lambda n: list(range(n)))
versions = st.none() | st.integers(min_value=0, max_value=100)
sizes = st.integers(min_value=1, max_value=30)
directions = st.sampled_from(list(Direction))
forward_versions = st.integers(min_value=-5, max_value=100)


class TestWindowProperties:
    @given(logs, versions, sizes, directions)
    def test_boundary_flags_follow_bounds(self, log: list[int], version: int | None, size: int, direction: Direction) -> None:
        window = page_window(log, version, size, direction)
        assert window.is_first_page == (window.end >= len(log) - 1)
        assert window.is_last_page == (window.start <= 0)

    @given(logs, forward_versions, sizes)
    def test_forward_flags_follow_bounds(self, log: list[int], version: int, size: int) -> None:
        window = page_window(log, version, size, Direction.FORWARD)
        assert window.is_first_page == (window.end >= len(log) - 1)
        assert window.is_last_page == (window.start <= 0)
        if version < 0:
            assert window.events == ()

    @given(logs, versions, sizes, directions)
    def test_window_is_contiguous_slice(self, log: list[int], version: int | None, size: int, direction: Direction) -> None:
        window = page_window(log, version, size, direction)
        assert len(window) <= size
        assert list(window.events) == log[window.start:window.end]
        for left, right in zip(window.events, window.events[1:]):
            assert right == left + 1

    @given(logs, versions, sizes, directions)
    def test_head_flag_matches_end(self, log: list[int], version: int | None, size: int, direction: Direction) -> None:
        window = page_window(log, version, size, direction)
        if window.events:
            assert window.is_head_of_stream == (window.events[-1] == len(log) - 1)

    @given(logs, versions, sizes, directions)
    def test_last_page_flag_matches_event_zero(self, log: list[int], version: int | None, size: int, direction: Direction) -> None:
        window = page_window(log, version, size, direction)
        if window.events:
            assert window.is_last_page == (window.events[0] == 0)

    @given(logs, st.integers(min_value=0, max_value=100), sizes)
    def test_forward_starts_at_version(self, log: list[int], version: int, size: int) -> None:
        window = page_window(log, version, size, Direction.FORWARD)
        if version < len(log):
            assert window.events[0] == version
        else:
            assert window.events == ()
            assert window.is_head_of_stream

    @given(logs, sizes)
    def test_forward_walk_visits_every_event_once(self, log: list[int], size: int) -> None:
        seen: list[int] = []
        version = 0
        while True:
            window = page_window(log, version, size, Direction.FORWARD)
            if not window.events:
                break
            seen.extend(window.events)
            version = window.events[-1] + 1
        assert seen == log
