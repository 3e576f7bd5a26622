import os
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from lostdoctor.domain.ports import NO_SELECTION, ChoiceMenu, Key
from lostdoctor.infrastructure.inmemory.sprite_catalog import sprite_for

try:  # Windows-specific keyboard handling
    import msvcrt  # type: ignore
except ImportError:  # pragma: no cover - fallback for non-Windows
    msvcrt = None


_CONSOLE = Console()
MENU_WINDOW = 3

_GAME_KEYS = {
    "UP": Key.UP,
    "DOWN": Key.DOWN,
    "LEFT": Key.LEFT,
    "RIGHT": Key.RIGHT,
    "ENTER": Key.ENTER,
    "ESC": Key.ESC,
    "HELP": Key.HELP,
}


def clear_screen() -> None:
    """Clear the console in a basic cross-platform way."""

    os.system("cls" if os.name == "nt" else "clear")


def _read_key_windows():
    """Read a single key from the keyboard on Windows using msvcrt."""

    ch = msvcrt.getch()

    if ch in (b"\x00", b"\xe0"):
        ch2 = msvcrt.getch()
        if ch2 == b"H":
            return "UP"
        if ch2 == b"P":
            return "DOWN"
        if ch2 == b"K":
            return "LEFT"
        if ch2 == b"M":
            return "RIGHT"
        if ch2 == b";":  # F1
            return "HELP"
        return None

    if ch in (b"\r", b"\n"):
        return "ENTER"
    if ch == b"\x1b":
        return "ESC"

    try:
        return ch.decode("utf-8")
    except UnicodeDecodeError:
        return None


def read_key():
    """Read a key, defaulting to line input when msvcrt is unavailable."""

    if msvcrt is not None:
        return _read_key_windows()

    line = sys.stdin.readline()
    if line == "":
        return None
    return line.strip()


def normalize_menu_key(key):
    if key is None:
        return None

    if not isinstance(key, str):
        return key

    if key in _GAME_KEYS:
        return key

    lowered = key.lower().strip()
    mapping = {
        "w": "UP",
        "s": "DOWN",
        "a": "LEFT",
        "d": "RIGHT",
        "": "ENTER",
        "enter": "ENTER",
        "q": "ESC",
        "esc": "ESC",
        "h": "HELP",
        "?": "HELP",
    }
    return mapping.get(lowered, key)


def to_game_key(key) -> Optional[Key]:
    """Map a normalized key name onto the game's input codes; anything else is ``None``."""

    if isinstance(key, Key):
        return key
    return _GAME_KEYS.get(normalize_menu_key(key))


class SelectionMenu:
    """Scrolling list cursor showing ``window`` rows at a time.

    ``base`` is the first visible option and ``selected`` the cursor row
    inside the window, so the chosen option is ``base + selected``.
    """

    def __init__(self, options: Sequence[str], *, window: int = MENU_WINDOW, icons: Sequence[int] | None = None) -> None:
        self.options = [str(option) for option in options]
        self.icons = list(icons) if icons is not None else None
        self.window = max(1, int(window))
        self.base = 0
        self.selected = 0

    @property
    def total(self) -> int:
        return len(self.options)

    @property
    def index(self) -> int:
        return self.base + self.selected

    def move_up(self) -> None:
        if self.selected > 0:
            self.selected -= 1
        elif self.base > 0:
            self.base -= 1

    def move_down(self) -> None:
        if self.selected < self.window - 1 and self.selected < self.total - 1:
            self.selected += 1
        elif self.base < self.total - self.window:
            self.base += 1

    def confirm(self) -> int:
        if not self.options:
            return NO_SELECTION
        return self.index

    def cancel(self) -> int:
        return NO_SELECTION

    def visible_rows(self) -> list[tuple[int, str, Optional[int], bool]]:
        rows = []
        for index in range(self.base, min(self.base + self.window, self.total)):
            icon = self.icons[index] if self.icons is not None and index < len(self.icons) else None
            rows.append((index, self.options[index], icon, index == self.index))
        return rows

    def handle_key(self, key) -> Optional[int]:
        """Apply one key; returns the final choice once the menu closes, else ``None``."""

        key = to_game_key(key)
        if key == Key.UP:
            self.move_up()
        elif key == Key.DOWN:
            self.move_down()
        elif key == Key.ENTER:
            return self.confirm()
        elif key == Key.ESC:
            return self.cancel()
        return None


def _build_menu_panel(title: str, menu: SelectionMenu) -> Panel:
    body = Text()
    if not menu.options:
        body.append("(empty)", style="dim")
    for index, label, icon, is_selected in menu.visible_rows():
        if index > menu.base:
            body.append("\n")
        if icon is not None:
            glyph = sprite_for(icon)
            body.append(glyph.text, style=glyph.style)
            body.append(" ")
        if is_selected:
            body.append(f"▶ {label} ", style="bold black on yellow")
        else:
            body.append(f"  {label}", style="white")
    more_above = menu.base > 0
    more_below = menu.base + menu.window < menu.total
    hint = ("▲ " if more_above else "") + ("▼" if more_below else "")
    return Panel.fit(
        body,
        title=f"[bold yellow]{title or 'Menu'}[/bold yellow]",
        border_style="yellow",
        subtitle=f"[dim]{hint or '↑/↓ Navigate • Enter Confirm • Esc Back'}[/dim]",
        subtitle_align="left",
        padding=(0, 1),
    )


def arrow_menu(title: str, options: Sequence[str], icons: Sequence[int] | None = None, *, key_reader=None) -> int:
    """Run a three-row selection menu until it is confirmed or cancelled.

    Returns the absolute option index, or ``NO_SELECTION`` on ESC or end of input.
    """

    reader = key_reader or read_key
    menu = SelectionMenu(options, icons=icons)
    with Live(_build_menu_panel(title, menu), console=_CONSOLE, refresh_per_second=30, transient=True) as live:
        while True:
            raw_key = reader()
            if raw_key is None:
                return NO_SELECTION
            choice = menu.handle_key(raw_key)
            if choice is not None:
                return choice
            live.update(_build_menu_panel(title, menu), refresh=True)


class TerminalChoiceMenu(ChoiceMenu):
    def __init__(self, key_reader=None) -> None:
        self._key_reader = key_reader

    def choose(self, title: str, options: Sequence[str], icons: Sequence[int] | None = None) -> int:
        return arrow_menu(title, options, icons, key_reader=self._key_reader)
