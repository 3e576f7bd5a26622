"""Port implementations that record output instead of drawing it.

Used for scripted playthroughs and replays where no terminal is attached.
"""

from collections import deque
from typing import Iterable, Optional, Sequence

from lostdoctor.domain.models.cell import Cell
from lostdoctor.domain.models.world_grid import VIEWPORT_HEIGHT, VIEWPORT_WIDTH
from lostdoctor.domain.ports import NO_SELECTION, ChoiceMenu, Clock, Key, KeySource, MessageDisplay, Renderer


class RecordingRenderer(Renderer):
    def __init__(self, width: int = VIEWPORT_WIDTH, height: int = VIEWPORT_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.tiles = [[int(Cell.BLANK)] * width for _ in range(height)]
        self.frames: list[tuple[tuple[int, ...], ...]] = []
        self.clears = 0

    def draw(self, cell: int, tile_x: int, tile_y: int) -> None:
        self.tiles[tile_y][tile_x] = int(cell)

    def refresh(self) -> None:
        self.frames.append(tuple(tuple(row) for row in self.tiles))

    def clear(self) -> None:
        self.tiles = [[int(Cell.BLANK)] * self.width for _ in range(self.height)]
        self.clears += 1

    @property
    def last_frame(self) -> Optional[tuple[tuple[int, ...], ...]]:
        return self.frames[-1] if self.frames else None


class RecordingMessageDisplay(MessageDisplay):
    def __init__(self) -> None:
        self.shown: list[tuple[int, str]] = []
        self.pages: list[str] = []

    def show(self, speaker: int, text: str) -> None:
        self.shown.append((int(speaker), text))

    def show_page(self, text: str) -> None:
        self.pages.append(text)

    def texts(self) -> list[str]:
        return [text for _, text in self.shown]


class RecordingClock(Clock):
    def __init__(self) -> None:
        self.delays: list[int] = []

    def delay(self, ms: int) -> None:
        self.delays.append(int(ms))


class ScriptedChoiceMenu(ChoiceMenu):
    """Answers menu prompts from a queue.

    An answer may be an index or an option label; an exhausted queue or an
    unknown label cancels the menu.
    """

    def __init__(self, answers: Iterable[int | str] = ()) -> None:
        self._answers = deque(answers)
        self.prompts: list[tuple[str, tuple[str, ...]]] = []

    def push(self, *answers: int | str) -> None:
        self._answers.extend(answers)

    def choose(self, title: str, options: Sequence[str], icons: Sequence[int] | None = None) -> int:
        self.prompts.append((title, tuple(options)))
        if not self._answers:
            return NO_SELECTION
        answer = self._answers.popleft()
        if isinstance(answer, str):
            return list(options).index(answer) if answer in options else NO_SELECTION
        return int(answer)


class ScriptedKeySource(KeySource):
    def __init__(self, keys: Iterable[Optional[Key]] = ()) -> None:
        self._keys = deque(keys)
        self.closed = False

    def read_key(self) -> Optional[Key]:
        if not self._keys:
            self.closed = True
            return None
        return self._keys.popleft()
