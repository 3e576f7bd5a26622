from rich.console import Console
from rich.panel import Panel

from lostdoctor.application.services.game_service import GameService
from lostdoctor.domain.ports import Key, KeySource
from lostdoctor.presentation.menu_controls import arrow_menu, clear_screen


_CONSOLE = Console()
_BORDER_LOOP = "cyan"
_BORDER_ENDING = "magenta"


def _render_message_panel(title: str, lines: list[str], *, border_style: str = _BORDER_LOOP) -> None:
    rows = [str(line) for line in lines if str(line).strip()]
    body = "\n".join(rows) if rows else "No updates."
    _CONSOLE.print(Panel.fit(body, title=f"[bold yellow]{title}[/bold yellow]", border_style=border_style))


def _render_journal(game_service: GameService) -> None:
    entries = game_service.get_game_view().journal
    if entries:
        _render_message_panel("Journal", entries)


def _confirm_quit() -> bool:
    return arrow_menu("Leave the game?", ["Keep playing", "Quit to title"]) == 1


def run_game_loop(game_service: GameService, key_source: KeySource) -> bool:
    """Feed keys to the game until the story ends or the player quits.

    Returns True when the session reached its ending.
    """

    game_service.render_frame()
    while True:
        key = key_source.read_key()
        if key is None and getattr(key_source, "closed", False):
            return False
        if key == Key.ESC:
            if _confirm_quit():
                _render_journal(game_service)
                return False
            game_service.render_frame()
            continue

        result = game_service.handle_input(key)
        if result.game_over:
            clear_screen()
            _render_message_panel(
                "The Lost Doctor",
                ["You brought the doctor home.", "Thanks for playing!"],
                border_style=_BORDER_ENDING,
            )
            _render_journal(game_service)
            return True
