"""Tests for lightbox navigation state."""

import pytest

from labsite.ui.lightbox import (
    FlagScrollLock,
    LightboxAction,
    LightboxNavigator,
    LightboxState,
    clamp_index,
    transition,
)


class RecordingLock:
    def __init__(self):
        self.events: list[str] = []

    def acquire(self) -> None:
        self.events.append("acquire")

    def release(self) -> None:
        self.events.append("release")


class TestTransition:
    def test_open_sets_index(self):
        state = transition(LightboxState(image_count=5), LightboxAction.OPEN, 2)
        assert state == LightboxState(is_open=True, current_index=2, image_count=5)

    def test_open_empty_collection_is_noop(self):
        state = LightboxState(image_count=0)
        assert transition(state, LightboxAction.OPEN, 0) == state

    @pytest.mark.parametrize("index,expected", [(-3, 0), (7, 4), (4, 4)])
    def test_open_clamps_out_of_range(self, index, expected):
        state = transition(LightboxState(image_count=5), LightboxAction.OPEN, index)
        assert state.current_index == expected

    def test_close_keeps_index(self):
        state = LightboxState(is_open=True, current_index=3, image_count=5)
        assert transition(state, LightboxAction.CLOSE) == LightboxState(
            is_open=False, current_index=3, image_count=5
        )

    def test_next_wraps(self):
        state = LightboxState(is_open=True, current_index=4, image_count=5)
        assert transition(state, LightboxAction.NEXT).current_index == 0

    def test_previous_wraps(self):
        state = LightboxState(is_open=True, current_index=0, image_count=5)
        assert transition(state, LightboxAction.PREVIOUS).current_index == 4

    def test_navigation_while_closed_is_noop(self):
        state = LightboxState(image_count=5)
        assert transition(state, LightboxAction.NEXT) == state

    def test_single_image_navigation_is_noop(self):
        state = LightboxState(is_open=True, current_index=0, image_count=1)
        assert transition(state, LightboxAction.NEXT) == state
        assert transition(state, LightboxAction.PREVIOUS) == state

    def test_input_state_is_unchanged(self):
        state = LightboxState(is_open=True, current_index=1, image_count=5)
        transition(state, LightboxAction.NEXT)
        assert state.current_index == 1


def test_clamp_index():
    assert clamp_index(3, 0) == 0
    assert clamp_index(-1, 3) == 0
    assert clamp_index(10, 3) == 2


class TestLightboxNavigator:
    def test_walk_forward_through_five_items(self):
        nav = LightboxNavigator(5)
        nav.open(3)
        visited = []
        for _ in range(3):
            nav.next()
            visited.append(nav.current_index)
        assert visited == [4, 0, 1]

    def test_previous_from_first_goes_to_last(self):
        nav = LightboxNavigator(5)
        nav.open(0)
        nav.previous()
        assert nav.current_index == 4

    def test_n_nexts_return_to_start(self):
        nav = LightboxNavigator(8)
        nav.open(2)
        for _ in range(8):
            nav.next()
        assert nav.current_index == 2

    def test_position_label(self):
        nav = LightboxNavigator(8)
        nav.open(2)
        assert nav.position_label == "3 / 8"
        assert LightboxNavigator(0).position_label == ""

    def test_scroll_lock_follows_open_close_edges(self):
        lock = RecordingLock()
        nav = LightboxNavigator(5, scroll_lock=lock)
        nav.open(1)
        nav.open(2)
        nav.next()
        nav.close()
        nav.close()
        assert lock.events == ["acquire", "release"]

    def test_open_on_empty_collection_does_not_lock(self):
        lock = FlagScrollLock()
        nav = LightboxNavigator(0, scroll_lock=lock)
        nav.open(0)
        assert not nav.is_open
        assert not lock.locked

    def test_dispose_releases_lock(self):
        lock = FlagScrollLock()
        nav = LightboxNavigator(3, scroll_lock=lock)
        nav.open(0)
        assert lock.locked
        nav.dispose()
        assert not lock.locked
        assert not nav.is_open

    def test_handle_key(self):
        nav = LightboxNavigator(3)
        assert nav.handle_key("right") is False

        nav.open(0)
        assert nav.handle_key("right") is True
        assert nav.current_index == 1
        assert nav.handle_key("left") is True
        assert nav.current_index == 0
        assert nav.handle_key("x") is False
        assert nav.handle_key("escape") is True
        assert not nav.is_open

    def test_arrow_keys_ignored_for_single_image(self):
        nav = LightboxNavigator(1)
        nav.open(0)
        assert nav.handle_key("right") is False
        assert nav.current_index == 0
        assert nav.handle_key("escape") is True

    def test_shrinking_collection_clamps_index(self):
        nav = LightboxNavigator(8)
        nav.open(6)
        nav.set_image_count(3)
        assert nav.is_open
        assert nav.current_index == 2
        assert nav.image_count == 3

    def test_emptying_collection_closes_and_releases(self):
        lock = FlagScrollLock()
        nav = LightboxNavigator(4, scroll_lock=lock)
        nav.open(2)
        nav.set_image_count(0)
        assert nav.state == LightboxState()
        assert not lock.locked
