"""Interactive fuzzy file picker: search state, rendering and the terminal loop."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from blessed import Terminal
from blessed.keyboard import Keystroke

from .algo import fuzzy_find
from .files import FileCollector
from .list_view import ItemList, Mode

log = logging.getLogger(__name__)

_RESET = "\x1b[0m"
_REVERSE = "\x1b[7m"
_FAINT = "\x1b[2m"
_LIST_HEIGHT_RESERVE = 13
_POLL_SECONDS = 0.05

_SEQUENCE_NAMES = {
    "KEY_ENTER": "enter",
    "KEY_ESCAPE": "esc",
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_LEFT": "left",
    "KEY_RIGHT": "right",
    "KEY_PGUP": "pgup",
    "KEY_PGDOWN": "pgdown",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "delete",
    "KEY_HOME": "home",
    "KEY_END": "end",
}

_CONTROL_NAMES = {
    "\r": "enter",
    "\n": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x03": "ctrl+c",
}


def _rgb(value: str, layer: int) -> str:
    value = value.lstrip("#")
    r, g, b = (int(value[i : i + 2], 16) for i in (0, 2, 4))
    return f"{layer};2;{r};{g};{b}"


def _paint(text: str, *, fg: str, bg: str, bold: bool = False) -> str:
    codes = ["1"] if bold else []
    codes += [_rgb(fg, 38), _rgb(bg, 48)]
    return f"\x1b[{';'.join(codes)}m{text}{_RESET}"


def _margin(text: str) -> str:
    """Surround ``text`` with one blank line above and below and indent it by two."""
    lines = [f"  {line}" for line in text.split("\n")]
    return "\n".join(["", *lines, ""])


@dataclass
class TextInput:
    """A single-line text field with a cursor and a character limit."""

    placeholder: str = "Search your stuff..."
    char_limit: int = 156
    width: int = 40
    prompt: str = "> "
    value: str = ""
    position: int = 0
    focused: bool = False
    blink: bool = False

    def focus(self) -> None:
        self.focused = True
        self.blink = True

    def blur(self) -> None:
        self.focused = False
        self.blink = False

    def handle_key(self, key: str | None) -> None:
        """Edit the value for ``key``; keys are ignored while the field is blurred."""
        if not self.focused or key is None:
            return
        if key == "backspace":
            if self.position > 0:
                self.value = self.value[: self.position - 1] + self.value[self.position :]
                self.position -= 1
        elif key == "delete":
            self.value = self.value[: self.position] + self.value[self.position + 1 :]
        elif key == "left":
            self.position = max(0, self.position - 1)
        elif key == "right":
            self.position = min(len(self.value), self.position + 1)
        elif key == "home":
            self.position = 0
        elif key == "end":
            self.position = len(self.value)
        elif len(key) == 1 and key.isprintable():
            if self.char_limit > 0 and len(self.value) >= self.char_limit:
                return
            self.value = self.value[: self.position] + key + self.value[self.position :]
            self.position += 1

    def view(self) -> str:
        if not self.value and self.placeholder:
            if self.focused:
                head, rest = self.placeholder[0], self.placeholder[1:]
                return f"{self.prompt}{_REVERSE}{head}{_RESET}{_FAINT}{rest}{_RESET}"
            return f"{self.prompt}{_FAINT}{self.placeholder}{_RESET}"

        offset = max(0, self.position - self.width + 1) if self.width > 0 else 0
        shown = self.value[offset : offset + self.width] if self.width > 0 else self.value
        if not self.focused:
            return f"{self.prompt}{shown}"
        at = self.position - offset
        under = shown[at] if at < len(shown) else " "
        return f"{self.prompt}{shown[:at]}{_REVERSE}{under}{_RESET}{shown[at + 1 :]}"


class Finder:
    """Search field, result list and mode, reacting to keys, files and resizes."""

    def __init__(self, directory: str, files: Iterable[str] = ()) -> None:
        initial = list(files)
        self.text_input = TextInput()
        self.text_input.focus()
        self.list = ItemList(items=list(initial), const_items=initial, directory=directory)
        self.mode = Mode.INSERT
        self.width = 0
        self.height = 0
        self.item = ""
        self.done = False

    def _refresh(self, key: str | None) -> None:
        query = self.text_input.value
        self.list.filter_value = query
        filtered = list(fuzzy_find(query, self.list.const_items))
        self.list.items = filtered
        self.list.update_pages_count(len(filtered))
        self.list.handle_key(key)

    def handle_files(self, files: Iterable[str]) -> None:
        """Replace the full set of candidates with ``files`` and refilter."""
        found = list(files)
        self.list.const_items = found
        self.list.items = list(found)
        self.list.update_pages_count(len(found))
        self._refresh(None)

    def handle_key(self, key: str | None) -> bool:
        """Apply ``key``; return True when the finder is finished."""
        if key == "enter":
            try:
                self.item = self.list.selected_item()
            except LookupError:
                return False
            self.done = True
            return True
        if key == "ctrl+c":
            self.done = True
            return True
        if key == "esc":
            if self.mode is Mode.NORMAL:
                self.done = True
                return True
            self.mode = Mode.NORMAL
            self.list.set_mode(Mode.NORMAL)
            self.text_input.blur()
            return False
        if key == "i" and self.mode is not Mode.INSERT:
            self.mode = Mode.INSERT
            self.list.set_mode(Mode.INSERT)
            self.text_input.focus()
            return False

        self.text_input.handle_key(key)
        self._refresh(key)
        return False

    def handle_resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.list.set_list_height(height - _LIST_HEIGHT_RESERVE)
        self._refresh(None)

    def view(self) -> str:
        items = self.list.sliced_items()
        label = _paint(f" {self.mode.value.upper()} ", fg="#18181b", bg="#5eead4", bold=True) + " "
        if self.mode is Mode.INSERT:
            help_text = "esc: normal mode"
        elif items:
            help_text = "←h|j↓|k↑|l→ • i: insert mode • esc: quit"
        else:
            help_text = "esc: quit"
        body = f"{self.list.view()}\n\n{self.text_input.view()}\n\n{label}{help_text}\n"
        return _margin(body)


def _key_name(keystroke: Keystroke) -> str | None:
    """Name a terminal keystroke the way Finder.handle_key expects."""
    if keystroke.is_sequence:
        name = _SEQUENCE_NAMES.get(keystroke.name or "")
        if name is not None:
            return name
    text = str(keystroke)
    if text in _CONTROL_NAMES:
        return _CONTROL_NAMES[text]
    if len(text) == 1 and text.isprintable():
        return text
    return None


def log_path() -> Path:
    """Return the debug log file path, creating its directory if needed."""
    home = Path.home()
    if sys.platform == "win32":
        directory = home / "AppData" / "Local" / "fzf_cli"
    else:
        directory = home / ".local" / "state" / "fzf_cli"
    directory.mkdir(parents=True, exist_ok=True)
    return directory / "debug.log"


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pick a file by fuzzy search.")
    parser.add_argument(
        "-dir",
        "--dir",
        dest="dir",
        default=os.getcwd(),
        help="directory to search in",
    )
    return parser.parse_args(argv)


def run(finder: Finder, collector: FileCollector) -> str:
    """Drive ``finder`` in the full-screen terminal until it is done; return the pick."""
    term = Terminal()
    seen = len(finder.list.const_items)
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        size = (term.width, term.height)
        finder.handle_resize(*size)
        dirty = True
        try:
            while not finder.done:
                files = collector.snapshot()
                if len(files) != seen:
                    seen = len(files)
                    finder.handle_files(files)
                    dirty = True
                current = (term.width, term.height)
                if current != size:
                    size = current
                    finder.handle_resize(*size)
                    dirty = True
                if dirty:
                    print(term.home + term.clear + finder.view(), end="", flush=True)
                    dirty = False
                keystroke = term.inkey(timeout=_POLL_SECONDS)
                if keystroke:
                    name = _key_name(keystroke)
                    if name is not None:
                        finder.handle_key(name)
                        dirty = True
        except KeyboardInterrupt:
            finder.handle_key("ctrl+c")
    return finder.item


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        filename=log_path(),
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    args = parse_args(argv)
    try:
        collector = FileCollector(args.dir).start()
    except OSError as exc:
        log.error("Error occurred while traversing: %s", exc)
        print(f"Error occurred while traversing: {exc}", file=sys.stderr)
        return 1

    initial = next(iter(collector.batches()), [])
    finder = Finder(args.dir, initial)
    print(run(finder, collector))
    return 0


if __name__ == "__main__":
    sys.exit(main())