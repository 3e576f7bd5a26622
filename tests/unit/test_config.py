import os
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from lostdoctor.config import GameSettings, load_settings


class ConfigTests(unittest.TestCase):
    def test_defaults_when_environment_is_empty(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = load_settings()

        self.assertEqual(GameSettings(), settings)
        self.assertEqual(200, settings.animation_delay_ms)
        self.assertEqual(100, settings.transition_pause_ms)
        self.assertEqual("WARNING", settings.log_level)

    def test_environment_overrides(self) -> None:
        env = {
            "LOSTDOCTOR_ANIMATION_DELAY_MS": "0",
            "LOSTDOCTOR_TRANSITION_PAUSE_MS": "50",
            "LOSTDOCTOR_TYPEWRITER_DELAY_MS": "0",
            "LOSTDOCTOR_MESSAGE_WIDTH": "48",
            "LOSTDOCTOR_LOG_LEVEL": "debug",
        }
        with mock.patch.dict(os.environ, env, clear=True):
            settings = load_settings()

        self.assertEqual(GameSettings(0, 50, 0, 48, "DEBUG"), settings)

    def test_invalid_values_fall_back_per_setting(self) -> None:
        env = {
            "LOSTDOCTOR_ANIMATION_DELAY_MS": "fast",
            "LOSTDOCTOR_TRANSITION_PAUSE_MS": "-5",
            "LOSTDOCTOR_MESSAGE_WIDTH": "4",
            "LOSTDOCTOR_LOG_LEVEL": "chatty",
        }
        with mock.patch.dict(os.environ, env, clear=True), self.assertLogs("lostdoctor.config", level="WARNING"):
            settings = load_settings()

        self.assertEqual(GameSettings(), settings)


if __name__ == "__main__":
    unittest.main()
