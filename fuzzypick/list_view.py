"""Paged, selectable list of file paths with match highlighting."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

_RESET = "\x1b[0m"


def _color(value: str | int, layer: int) -> str:
    if isinstance(value, int):
        return f"{layer};5;{value}"
    value = value.lstrip("#")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return f"{layer};2;{r};{g};{b}"


def _style(
    text: str,
    *,
    fg: str | int | None = None,
    bg: str | int | None = None,
    bold: bool = False,
    italic: bool = False,
) -> str:
    codes = []
    if bold:
        codes.append("1")
    if italic:
        codes.append("3")
    if fg is not None:
        codes.append(_color(fg, 38))
    if bg is not None:
        codes.append(_color(bg, 48))
    if not codes:
        return text
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


HEADER_TEXT = "Fuzzy finder :)"
_HIGHLIGHT = "#f43f5e"
_UP_KEYS = frozenset({"k", "up"})
_DOWN_KEYS = frozenset({"j", "down"})


class Mode(str, enum.Enum):
    INSERT = "insert"
    NORMAL = "normal"


@dataclass
class Paginator:
    """Tracks the current page over a list of a given length."""

    per_page: int = 1
    page: int = 0
    total_pages: int = 1
    keys_enabled: bool = True
    prev_keys: frozenset[str] = frozenset({"pgup", "left", "h"})
    next_keys: frozenset[str] = frozenset({"pgdown", "right", "l"})
    active_dot: str = _style("•", fg=252)
    inactive_dot: str = _style("•", fg=238)

    def set_total_pages(self, items: int) -> int:
        """Set the page count for ``items`` entries; fewer than 1 leaves it as is."""
        if items < 1:
            return self.total_pages
        pages, rest = divmod(items, self.per_page)
        if rest:
            pages += 1
        self.total_pages = pages
        return pages

    def slice_bounds(self, length: int) -> tuple[int, int]:
        start = self.page * self.per_page
        end = min(start + self.per_page, length)
        return start, end

    def prev_page(self) -> None:
        if self.page > 0:
            self.page -= 1

    def next_page(self) -> None:
        if not self.on_last_page():
            self.page += 1

    def on_last_page(self) -> bool:
        return self.page == self.total_pages - 1

    def handle_key(self, key: str | None) -> None:
        """Turn the page if ``key`` is a paging key and paging keys are enabled."""
        if not self.keys_enabled or key is None:
            return
        if key in self.next_keys:
            self.next_page()
        elif key in self.prev_keys:
            self.prev_page()

    def view(self) -> str:
        return "".join(
            self.active_dot if i == self.page else self.inactive_dot
            for i in range(self.total_pages)
        )


@dataclass
class ItemList:
    """The result list: current items, the full set, cursor and pages."""

    items: list[str]
    const_items: list[str]
    directory: str
    cursor: int = 0
    mode: Mode = Mode.INSERT
    filter_value: str = ""
    max_items: int = 1000
    paginator: Paginator = field(default_factory=lambda: Paginator(per_page=10))
    container_height: int = 0
    _match_cache: dict[str, list[int]] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.paginator.set_total_pages(len(self.items))
        self.paginator.keys_enabled = self.mode is Mode.NORMAL

    def set_list_height(self, height: int) -> None:
        self.paginator.per_page = max(1, height)
        self.container_height = max(0, height)

    def update_pages_count(self, total: int) -> None:
        p = self.paginator
        if total == 0 or p.page * p.per_page >= total:
            p.page = 0
        p.set_total_pages(total)

    def _page_items(self) -> Sequence[str]:
        start, end = self.paginator.slice_bounds(len(self.items))
        if start >= len(self.items):
            start = 0
            self.paginator.page = 0
        return self.items[start:end]

    def sliced_items(self) -> list[str]:
        """Return the items shown on the current page."""
        if not self.items:
            return []
        return list(self._page_items())

    def selected_item(self) -> str:
        """Return the item under the cursor; raise LookupError if there is none."""
        current = self._page_items()
        if not current:
            raise LookupError("no item found")
        return current[self.cursor]

    def set_mode(self, mode: Mode | str) -> None:
        self.mode = Mode(mode)
        self.paginator.keys_enabled = self.mode is Mode.NORMAL

    def handle_key(self, key: str | None) -> None:
        """Move the cursor or page for ``key``; ``None`` only re-clamps the position."""
        if not self.items:
            self.cursor = 0
            self.paginator.page = 0
            return

        p = self.paginator
        p.handle_key(key)
        if p.page * p.per_page >= len(self.items):
            p.page = (len(self.items) - 1) // p.per_page

        current = self._page_items()
        if not current:
            self.cursor = 0
        elif self.cursor >= len(current):
            self.cursor = len(current) - 1

        if key in _UP_KEYS:
            if self.cursor > 0:
                self.cursor -= 1
            elif p.page > 0:
                p.prev_page()
                start, end = p.slice_bounds(len(self.items))
                self.cursor = len(self.items[start:end]) - 1
        elif key in _DOWN_KEYS:
            if self.cursor < len(current) - 1:
                self.cursor += 1
            elif p.page < p.total_pages - 1:
                p.next_page()
                self.cursor = 0

    def highlight_match(self, item: str) -> str:
        """Colour the characters of ``item`` matched by the current filter."""
        if not self.filter_value:
            return item

        search_item = item.lower()
        search_filter = self.filter_value.lower()
        cache_key = f"{search_item}|{search_filter}"
        indices = self._match_cache.get(cache_key)
        if indices is None:
            indices = []
            last = 0
            for letter in search_filter:
                idx = search_item.find(letter, last)
                if idx == -1:
                    return item
                indices.append(idx)
                last = idx + 1
            self._match_cache[cache_key] = indices
        return self._apply_highlight(item, indices)

    @staticmethod
    def _apply_highlight(item: str, indices: list[int]) -> str:
        if not indices:
            return item
        parts = []
        last = 0
        for idx in indices:
            if idx >= len(item):
                continue
            parts.append(item[last:idx])
            parts.append(_style(item[idx], fg=_HIGHLIGHT))
            last = idx + 1
        parts.append(item[last:])
        return "".join(parts)

    def view(self) -> str:
        header = _style(f" {HEADER_TEXT} ", fg="#FFFFFF", bg="#4f46e5", bold=True, italic=True)
        count = _style(f"{len(self.items)} items", fg="#5e5e5e")
        out = f"{header}\n\n{count}\n\n"

        if not self.items:
            return out + "\nNo items found"

        start, end = self.paginator.slice_bounds(len(self.items))
        if start >= len(self.items):
            start = 0
        display = self.items[start:end]

        rows = []
        for i, item in enumerate(display):
            cursor = _style(">", fg=_HIGHLIGHT, bold=True) if i == self.cursor else " "
            rows.append(f"{cursor} {self.highlight_match(item)}")
        rows.extend([""] * (self.container_height - len(rows)))
        out += "\n".join(rows)

        if display:
            out += "\n  " + self.paginator.view()
        return out