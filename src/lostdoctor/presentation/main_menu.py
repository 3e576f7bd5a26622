from rich.console import Console
from rich.panel import Panel

from lostdoctor.application.services.game_service import HELP_PAGES
from lostdoctor.bootstrap import create_game_service
from lostdoctor.config import GameSettings, load_settings
from lostdoctor.domain.ports import NO_SELECTION
from lostdoctor.presentation.game_loop import run_game_loop
from lostdoctor.presentation.menu_controls import TerminalChoiceMenu, arrow_menu, clear_screen
from lostdoctor.presentation.terminal_ui import RichMessageDisplay, RichRenderer, TerminalKeySource, TimeClock


_CONSOLE = Console()
_SPLASH_BORDER = "yellow"
_HELP_BORDER = "yellow"
_EXIT_BORDER = "magenta"

MAIN_MENU_OPTIONS = ["New Game", "Help", "Quit"]


def _ornate_title(title: str) -> str:
    return f"[bold yellow]{title}[/bold yellow]"


def _show_main_splash() -> None:
    clear_screen()
    _CONSOLE.print(
        Panel.fit(
            "[bold yellow]THE LOST DOCTOR[/bold yellow]",
            border_style=_SPLASH_BORDER,
            title=_ornate_title("Main Menu"),
        )
    )


def _show_help() -> None:
    for page in HELP_PAGES:
        clear_screen()
        title, _, body = page.partition("\n")
        _CONSOLE.print(Panel.fit(body.strip("\n"), title=_ornate_title(title), border_style=_HELP_BORDER))
        _CONSOLE.input("[dim]Press ENTER to continue...[/dim]")
    clear_screen()


def _start_new_game(settings: GameSettings) -> bool:
    service = create_game_service(
        RichRenderer(),
        RichMessageDisplay(width=settings.message_width, typewriter_delay_ms=settings.typewriter_delay_ms),
        TimeClock(),
        TerminalChoiceMenu(),
        settings=settings,
    )
    return run_game_loop(service, TerminalKeySource())


def main_menu(settings: GameSettings | None = None) -> None:
    settings = settings or load_settings()

    while True:
        _show_main_splash()
        choice_idx = arrow_menu("The Lost Doctor", MAIN_MENU_OPTIONS)

        if choice_idx == 0:  # New Game
            _start_new_game(settings)
            _CONSOLE.input("[dim]Press ENTER to return to the menu...[/dim]")

        elif choice_idx == 1:  # Help
            _show_help()

        elif choice_idx in (2, NO_SELECTION):  # Quit or ESC
            clear_screen()
            _CONSOLE.print(
                Panel.fit(
                    "[bold magenta]See you next time.[/bold magenta]",
                    title=_ornate_title("Farewell"),
                    border_style=_EXIT_BORDER,
                )
            )
            break
