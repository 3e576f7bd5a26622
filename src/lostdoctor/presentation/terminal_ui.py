"""rich-backed implementations of the renderer, message box, clock and key source."""

import textwrap
import time
from typing import Optional

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from lostdoctor.domain.models.cell import Cell
from lostdoctor.domain.models.world_grid import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from lostdoctor.domain.ports import Clock, Key, KeySource, MessageDisplay, Renderer
from lostdoctor.infrastructure.inmemory.sprite_catalog import sprite_for
from lostdoctor.presentation.menu_controls import clear_screen, read_key, to_game_key


_CONSOLE = Console()
LINES_PER_PAGE = 3
_MESSAGE_BORDER = "#d6c59d"
_VIEW_BORDER = "cyan"


class TimeClock(Clock):
    def delay(self, ms: int) -> None:
        if ms > 0:
            time.sleep(ms / 1000.0)


class TerminalKeySource(KeySource):
    def __init__(self, key_reader=None) -> None:
        self._key_reader = key_reader or read_key
        self.closed = False

    def read_key(self) -> Optional[Key]:
        raw_key = self._key_reader()
        if raw_key is None:
            self.closed = True
            return None
        return to_game_key(raw_key)


class RichRenderer(Renderer):
    """Buffers one viewport of sprites and prints it as a framed grid on refresh."""

    def __init__(self, console: Console | None = None, width: int = VIEWPORT_WIDTH, height: int = VIEWPORT_HEIGHT) -> None:
        self.console = console or _CONSOLE
        self.width = width
        self.height = height
        self._tiles = self._blank()

    def _blank(self) -> list[list[int]]:
        return [[Cell.BLANK] * self.width for _ in range(self.height)]

    def tiles(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._tiles)

    def draw(self, cell: int, tile_x: int, tile_y: int) -> None:
        if 0 <= tile_x < self.width and 0 <= tile_y < self.height:
            self._tiles[tile_y][tile_x] = int(cell)

    def clear(self) -> None:
        self._tiles = self._blank()
        clear_screen()

    def refresh(self) -> None:
        grid = Table.grid(padding=0)
        for _ in range(self.width):
            grid.add_column(no_wrap=True)
        for row in self._tiles:
            cells = []
            for cell in row:
                glyph = sprite_for(cell)
                cells.append(Text(glyph.text, style=glyph.style))
            grid.add_row(*cells)
        clear_screen()
        self.console.print(Panel.fit(grid, border_style=_VIEW_BORDER, padding=(0, 1)))


class RichMessageDisplay(MessageDisplay):
    """Word-wrapped message box with a speaker portrait.

    Long text is split into pages of ``LINES_PER_PAGE`` lines; each page is
    typed out and then waits for any key before the next one.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        width: int = 36,
        typewriter_delay_ms: int = 5,
        key_reader=None,
    ) -> None:
        self.console = console or _CONSOLE
        self.width = max(12, int(width))
        self.typewriter_delay_ms = max(0, int(typewriter_delay_ms))
        self._key_reader = key_reader or read_key

    def pages(self, text: str) -> list[str]:
        lines: list[str] = []
        for paragraph in str(text).split("\n"):
            lines.extend(textwrap.wrap(paragraph, self.width) or [""])
        return ["\n".join(lines[start:start + LINES_PER_PAGE]) for start in range(0, len(lines), LINES_PER_PAGE)]

    def show(self, speaker: int, text: str) -> None:
        for page in self.pages(text):
            self._type_out(speaker, page)
            self._key_reader()

    def show_page(self, text: str) -> None:
        clear_screen()
        title, _, body = str(text).partition("\n")
        self.console.print(
            Panel.fit(
                body.strip("\n") or title,
                title=f"[bold yellow]{title}[/bold yellow]",
                border_style="yellow",
                subtitle="[dim]Press ENTER to continue[/dim]",
                subtitle_align="left",
            )
        )
        self._key_reader()

    def _panel(self, speaker: int, text: str) -> Panel:
        body = Text(text)
        if int(speaker) != Cell.BLANK:
            glyph = sprite_for(speaker)
            portrait = Text(glyph.text, style=glyph.style)
            body = Group(portrait, body)
        return Panel(body, width=self.width + 4, border_style=_MESSAGE_BORDER)

    def _type_out(self, speaker: int, page: str) -> None:
        if self.typewriter_delay_ms <= 0:
            self.console.print(self._panel(speaker, page))
            return
        with Live(self._panel(speaker, ""), console=self.console, refresh_per_second=60) as live:
            for end in range(1, len(page) + 1):
                live.update(self._panel(speaker, page[:end]), refresh=True)
                time.sleep(self.typewriter_delay_ms / 1000.0)
