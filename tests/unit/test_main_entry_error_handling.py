import io
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import lostdoctor.__main__ as runtime_main


class MainEntryErrorHandlingTests(unittest.TestCase):
    def test_main_handles_runtime_exceptions_without_traceback(self) -> None:
        output = io.StringIO()
        with mock.patch.object(runtime_main, "_configure_logging"), mock.patch.object(
            runtime_main, "main_menu", side_effect=RuntimeError("terminal unavailable")
        ), mock.patch("sys.stdout", output):
            runtime_main.main()

        text = output.getvalue()
        self.assertIn("An unexpected error occurred", text)
        self.assertIn("terminal unavailable", text)
        self.assertIn("Help:", text)
        self.assertNotIn("Traceback", text)

    def test_main_handles_keyboard_interrupt(self) -> None:
        output = io.StringIO()
        with mock.patch.object(runtime_main, "_configure_logging"), mock.patch.object(
            runtime_main, "main_menu", side_effect=KeyboardInterrupt
        ), mock.patch("sys.stdout", output):
            runtime_main.main()

        self.assertIn("Session ended", output.getvalue())

    def test_main_passes_loaded_settings_to_the_menu(self) -> None:
        with mock.patch.dict("os.environ", {"LOSTDOCTOR_MESSAGE_WIDTH": "40"}), mock.patch.object(
            runtime_main, "_configure_logging"
        ) as configure, mock.patch.object(runtime_main, "main_menu") as menu:
            runtime_main.main()

        settings = menu.call_args.args[0]
        self.assertEqual(40, settings.message_width)
        configure.assert_called_once_with(settings.log_level)


if __name__ == "__main__":
    unittest.main()
