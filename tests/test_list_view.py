import re

import pytest

from fuzzypick.list_view import ItemList, Mode, Paginator

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def plain(text):
    return ANSI.sub("", text)


def make_list(count=25):
    items = [f"file{i:02d}.txt" for i in range(count)]
    return ItemList(list(items), list(items), "/tmp")


@pytest.mark.parametrize("count", [1, 9, 10, 11, 25, 30])
def test_pages_cover_all_items(count):
    items = list(range(count))
    p = Paginator(per_page=10)
    pages = p.set_total_pages(count)
    collected = []
    for page in range(pages):
        p.page = page
        start, end = p.slice_bounds(count)
        assert 0 < end - start <= 10
        collected.extend(items[start:end])
    assert collected == items


def test_set_total_pages_zero_keeps_previous():
    p = Paginator(per_page=10)
    p.set_total_pages(25)
    before = p.total_pages
    assert p.set_total_pages(0) == before


def test_next_page_stops_at_last():
    p = Paginator(per_page=10)
    p.set_total_pages(15)
    p.next_page()
    assert p.on_last_page()
    p.next_page()
    assert p.page == p.total_pages - 1


def test_prev_page_stops_at_first():
    p = Paginator()
    p.prev_page()
    assert p.page == 0


def test_disabled_keys_do_nothing():
    p = Paginator(per_page=10, keys_enabled=False)
    p.set_total_pages(30)
    p.handle_key("l")
    assert p.page == 0


def test_view_has_one_dot_per_page():
    p = Paginator(per_page=10)
    p.set_total_pages(30)
    assert plain(p.view()) == "•" * p.total_pages


def test_selected_item_empty_raises():
    with pytest.raises(LookupError):
        ItemList([], [], "/tmp").selected_item()


def test_down_moves_cursor_and_crosses_page():
    lst = make_list()
    for _ in range(9):
        lst.handle_key("j")
    assert lst.selected_item() == lst.items[9]
    lst.handle_key("down")
    assert lst.paginator.page == 1
    assert lst.cursor == 0
    assert lst.selected_item() == lst.items[10]


def test_up_goes_back_to_last_of_previous_page():
    lst = make_list()
    lst.paginator.page = 1
    lst.handle_key("k")
    assert lst.paginator.page == 0
    assert lst.selected_item() == lst.items[9]


def test_insert_mode_ignores_paging_keys():
    lst = make_list()
    lst.handle_key("l")
    assert lst.paginator.page == 0


def test_normal_mode_enables_paging_keys():
    lst = make_list()
    lst.set_mode("normal")
    assert lst.mode is Mode.NORMAL
    lst.handle_key("l")
    assert lst.paginator.page == 1
    lst.set_mode(Mode.INSERT)
    lst.handle_key("h")
    assert lst.paginator.page == 1


def test_cursor_clamped_on_short_last_page():
    lst = make_list(25)
    lst.cursor = 9
    lst.paginator.page = 2
    lst.handle_key(None)
    assert lst.selected_item() == lst.items[-1]


def test_update_pages_count_resets_page_when_out_of_range():
    lst = make_list(25)
    lst.paginator.page = 2
    lst.items = lst.items[:5]
    lst.update_pages_count(5)
    assert lst.paginator.page == 0
    assert lst.sliced_items() == lst.items


def test_sliced_items_on_empty_list():
    assert ItemList([], [], "/tmp").sliced_items() == []


def test_highlight_without_filter_is_identity():
    lst = make_list()
    assert lst.highlight_match("abc") == "abc"


def test_highlight_non_match_is_identity():
    lst = make_list()
    lst.filter_value = "zz"
    assert lst.highlight_match("abc") == "abc"


def test_highlight_marks_matched_characters():
    lst = make_list()
    lst.filter_value = "AC"
    result = lst.highlight_match("abc")
    assert plain(result) == "abc"
    assert lst.highlight_match("abc") == result
    coloured = re.findall(r"\x1b\[[0-9;]*m(.)\x1b\[0m", result)
    assert coloured == ["a", "c"]


def test_view_of_empty_list():
    text = plain(ItemList([], [], "/tmp").view())
    assert "0 items" in text
    assert text.endswith("No items found")


def test_view_shows_cursor_on_selected_row():
    lst = make_list(3)
    lst.handle_key("j")
    lines = plain(lst.view()).splitlines()
    assert "> file01.txt" in lines
    assert "  file00.txt" in lines
    assert "3 items" in lines


def test_view_pads_to_list_height():
    lst = make_list(2)
    lst.set_list_height(6)
    rows = [line for line in plain(lst.view()).splitlines()]
    first = rows.index("> file00.txt")
    assert rows[first + 6].strip() == "•"