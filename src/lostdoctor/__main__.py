from pathlib import Path
import logging
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from lostdoctor.config import load_settings
from lostdoctor.presentation.main_menu import main_menu

load_dotenv()


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- Menus: use UP/DOWN (or W/S), ENTER to select, ESC/Q to go back.")
    print("- In game: arrows or W/A/S/D walk, ENTER opens Talk/Search/Use item, H shows help.")
    print("- Settings: LOSTDOCTOR_* variables in the environment or a .env file.")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )


def main():
    try:
        settings = load_settings()
        _configure_logging(settings.log_level)
        main_menu(settings)
    except KeyboardInterrupt:
        print("\nSession ended.")
    except Exception as exc:
        logging.getLogger(__name__).debug("Unhandled error", exc_info=True)
        print("An unexpected error occurred. The game closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()


if __name__ == "__main__":
    main()
