from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Optional, Sequence


NO_SELECTION = -1


class Key(IntEnum):
    """Input codes delivered by the key source; values match the device codes."""

    ENTER = 13
    UP = 20
    DOWN = 21
    RIGHT = 22
    LEFT = 23
    HELP = 25
    ESC = 27


class Renderer(ABC):
    @abstractmethod
    def draw(self, cell: int, tile_x: int, tile_y: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def refresh(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError


class MessageDisplay(ABC):
    @abstractmethod
    def show(self, speaker: int, text: str) -> None:
        """Show ``text`` next to the speaker's portrait, paging on key input."""
        raise NotImplementedError

    def show_page(self, text: str) -> None:
        """Full-screen text page (help screens); defaults to a portrait-less message."""
        self.show(0, text)


class KeySource(ABC):
    @abstractmethod
    def read_key(self) -> Optional[Key]:
        raise NotImplementedError


class Clock(ABC):
    @abstractmethod
    def delay(self, ms: int) -> None:
        raise NotImplementedError


class ChoiceMenu(ABC):
    @abstractmethod
    def choose(self, title: str, options: Sequence[str], icons: Sequence[int] | None = None) -> int:
        """Return the chosen absolute index, or ``NO_SELECTION`` on cancel."""
        raise NotImplementedError
