import pytest

from pane_browser.content import NavigationController, Pane


def make_controller(*titles, width=300, active=None):
    nav = NavigationController()
    for title in titles:
        nav.navigate(Pane(title, f"<p>{title}</p>", width=width), is_search_result=False)
    if active is not None:
        nav.focus(active)
    return nav


def titles(nav):
    return [pane.title for pane in nav.panes]


def widths(nav):
    return [pane.width for pane in nav.panes]


def test_starts_empty_with_no_active_index():
    nav = NavigationController()
    assert nav.panes == ()
    assert nav.active_index is None
    assert nav.active_pane is None


def test_first_navigation_resets_even_for_link_click():
    nav = NavigationController()
    pane = Pane("Main Page", "<p>hi</p>")
    nav.navigate(pane, is_search_result=False)
    assert nav.panes == (pane,)
    assert nav.active_index == 0


@pytest.mark.parametrize("active", [0, 1, 2])
def test_search_replaces_whole_sequence(active):
    nav = make_controller("A", "B", "C", active=active)
    cat = Pane("Cat", "<p>cat</p>", is_search_result=True)
    nav.navigate(cat, is_search_result=True)
    assert nav.panes == (cat,)
    assert nav.active_index == 0


def test_link_from_middle_pane_truncates_forward_panes():
    nav = make_controller("A", "B", "C", "D", active=1)
    a, b = nav.panes[0], nav.panes[1]
    dog = Pane("Dog", "<p>dog</p>")
    nav.navigate(dog, is_search_result=False)
    assert nav.panes == (a, b, dog)
    assert nav.active_index == 2
    assert nav.active_pane is dog


def test_link_from_last_pane_appends():
    nav = make_controller("A", "B")
    nav.navigate(Pane("C", ""), is_search_result=False)
    assert titles(nav) == ["A", "B", "C"]
    assert nav.active_index == 2


def test_close_before_active_shifts_active_left():
    nav = make_controller("A", "B", "C", active=2)
    nav.close(1)
    assert titles(nav) == ["A", "C"]
    assert nav.active_index == 1


def test_close_active_moves_focus_to_left_neighbor():
    nav = make_controller("A", "B", "C", active=1)
    nav.close(1)
    assert titles(nav) == ["A", "C"]
    assert nav.active_index == 0


def test_close_active_first_pane_keeps_index_zero():
    nav = make_controller("A", "B", "C", active=0)
    nav.close(0)
    assert titles(nav) == ["B", "C"]
    assert nav.active_index == 0


def test_close_after_active_leaves_active_alone():
    nav = make_controller("A", "B", "C", active=0)
    nav.close(2)
    assert titles(nav) == ["A", "B"]
    assert nav.active_index == 0


def test_close_last_remaining_pane_clears_active_index():
    nav = make_controller("A")
    nav.close(0)
    assert nav.panes == ()
    assert nav.active_index is None


@pytest.mark.parametrize("index", [0, 1, 2, 3])
def test_close_preserves_relative_order(index):
    nav = make_controller("A", "B", "C", "D", active=3)
    expected = [t for i, t in enumerate("ABCD") if i != index]
    nav.close(index)
    assert titles(nav) == expected
    assert 0 <= nav.active_index < len(nav)


def test_close_out_of_range_raises_and_keeps_state():
    nav = make_controller("A", "B")
    with pytest.raises(IndexError):
        nav.close(2)
    with pytest.raises(IndexError):
        nav.close(-1)
    assert titles(nav) == ["A", "B"]
    assert nav.active_index == 1


def test_resize_adjusts_dragged_pane_and_right_neighbor():
    nav = make_controller("A", "B", width=500)
    nav.resize(0, 50)
    assert widths(nav) == [550, 450]


def test_resize_clamps_each_pane_independently():
    nav = make_controller("A", "B", width=500)
    nav.resize(0, 50)
    nav.resize(0, -400)
    # pane 0 stops at the floor, the neighbour still receives the full delta
    assert widths(nav) == [200, 850]


def test_resize_clamps_neighbor_at_floor():
    nav = make_controller("A", "B", width=500)
    nav.resize(0, 400)
    assert widths(nav) == [900, 200]


def test_resize_last_pane_changes_only_that_pane():
    nav = make_controller("A", "B", width=500)
    nav.resize(1, 120)
    assert widths(nav) == [500, 620]


def test_resize_leaves_other_panes_untouched():
    nav = make_controller("A", "B", "C", "D", width=400)
    before = nav.panes
    nav.resize(1, 30)
    after = nav.panes
    assert after[0] is before[0]
    assert after[3] is before[3]
    assert widths(nav) == [400, 430, 370, 400]


def test_resize_then_inverse_restores_widths():
    nav = make_controller("A", "B", "C", width=400)
    nav.resize(1, 75)
    nav.resize(1, -75)
    assert widths(nav) == [400, 400, 400]


def test_resize_keeps_content_and_title():
    nav = make_controller("A", "B", width=400)
    original = nav.panes[0]
    nav.resize(0, 10)
    resized = nav.panes[0]
    assert resized.title == original.title
    assert resized.content is original.content


def test_focus_changes_only_active_index():
    nav = make_controller("A", "B", "C")
    before = nav.panes
    nav.focus(0)
    assert nav.active_index == 0
    assert nav.panes == before


def test_focus_out_of_range_raises():
    nav = make_controller("A")
    with pytest.raises(IndexError):
        nav.focus(1)
    assert nav.active_index == 0


def test_snapshot_is_not_aliased():
    nav = make_controller("A", "B")
    snapshot = nav.panes
    nav.close(0)
    assert [p.title for p in snapshot] == ["A", "B"]


def test_pane_rejects_non_positive_width():
    with pytest.raises(ValueError):
        Pane("A", "", width=0)
