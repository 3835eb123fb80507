import pytest

from pane_browser.content import PaneResizer, PointerEvents


@pytest.fixture
def pointer():
    return PointerEvents()


@pytest.fixture
def deltas():
    return []


@pytest.fixture
def resizer(pointer, deltas):
    return PaneResizer(pointer, lambda index, delta: deltas.append((index, delta)))


def test_deltas_are_incremental(resizer, pointer, deltas):
    resizer.start_drag(1, 100)
    pointer.dispatch_move(110, 0)
    pointer.dispatch_move(125, 0)
    pointer.dispatch_move(120, 0)
    assert deltas == [(1, 10), (1, 15), (1, -5)]


def test_zero_movement_emits_nothing(resizer, pointer, deltas):
    resizer.start_drag(0, 50)
    pointer.dispatch_move(50, 30)
    assert deltas == []


def test_release_ends_drag_and_unsubscribes(resizer, pointer, deltas):
    resizer.start_drag(0, 0)
    pointer.dispatch_move(10, 0)
    pointer.dispatch_up(10, 0)
    pointer.dispatch_move(40, 0)
    assert deltas == [(0, 10)]
    assert not resizer.dragging
    assert pointer.subscriber_count == 0


def test_second_drag_ignored_while_active(resizer, pointer, deltas):
    first = resizer.start_drag(0, 0)
    assert first is not None
    assert resizer.start_drag(2, 0) is None
    pointer.dispatch_move(5, 0)
    assert deltas == [(0, 5)]
    assert pointer.subscriber_count == 1


def test_new_drag_allowed_after_release(resizer, pointer, deltas):
    resizer.start_drag(0, 0)
    pointer.dispatch_up(0, 0)
    resizer.start_drag(1, 200)
    pointer.dispatch_move(190, 0)
    assert deltas == [(1, -10)]


def test_close_releases_active_subscription(resizer, pointer, deltas):
    gesture = resizer.start_drag(0, 0)
    resizer.close()
    assert not gesture.active
    assert pointer.subscriber_count == 0
    pointer.dispatch_move(30, 0)
    assert deltas == []


def test_failing_callback_still_releases_subscription(pointer):
    def broken(index, delta):
        raise IndexError("stale pane")

    resizer = PaneResizer(pointer, broken)
    resizer.start_drag(3, 0)
    with pytest.raises(IndexError):
        pointer.dispatch_move(10, 0)
    assert not resizer.dragging
    assert pointer.subscriber_count == 0


def test_subscription_release_is_idempotent(pointer):
    subscription = pointer.subscribe(lambda x, y: None, lambda x, y: None)
    with subscription:
        assert pointer.subscriber_count == 1
    subscription.release()
    assert pointer.subscriber_count == 0
