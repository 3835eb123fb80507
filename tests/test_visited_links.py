from pane_browser.content import LinkVisitTracker

HREF = "https://en.wikipedia.org/wiki/Dog"


def test_unvisited_by_default():
    tracker = LinkVisitTracker()
    assert not tracker.is_visited(HREF)
    assert len(tracker) == 0


def test_record_is_idempotent():
    tracker = LinkVisitTracker()
    tracker.record(HREF)
    after_first = tracker.snapshot()
    tracker.record(HREF)
    assert tracker.snapshot() == after_first
    assert tracker.is_visited(HREF)
    assert HREF in tracker
    assert len(tracker) == 1


def test_snapshot_does_not_follow_later_records():
    tracker = LinkVisitTracker()
    tracker.record("a")
    snapshot = tracker.snapshot()
    tracker.record("b")
    assert snapshot == frozenset({"a"})
    assert set(tracker) == {"a", "b"}
