import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameSettings:
    animation_delay_ms: int = 200
    transition_pause_ms: int = 100
    typewriter_delay_ms: int = 5
    message_width: int = 36
    log_level: str = "WARNING"


_DEFAULTS = GameSettings()
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _int_env(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r; expected an integer", name, raw)
        return default
    if value < minimum:
        logger.warning("Ignoring %s=%s; must be at least %s", name, value, minimum)
        return default
    return value


def load_settings() -> GameSettings:
    """Read host settings from the environment, falling back per value on bad input."""

    log_level = os.getenv("LOSTDOCTOR_LOG_LEVEL", _DEFAULTS.log_level).strip().upper()
    if log_level not in _LOG_LEVELS:
        logger.warning("Ignoring LOSTDOCTOR_LOG_LEVEL=%r", log_level)
        log_level = _DEFAULTS.log_level

    return GameSettings(
        animation_delay_ms=_int_env("LOSTDOCTOR_ANIMATION_DELAY_MS", _DEFAULTS.animation_delay_ms),
        transition_pause_ms=_int_env("LOSTDOCTOR_TRANSITION_PAUSE_MS", _DEFAULTS.transition_pause_ms),
        typewriter_delay_ms=_int_env("LOSTDOCTOR_TYPEWRITER_DELAY_MS", _DEFAULTS.typewriter_delay_ms),
        message_width=_int_env("LOSTDOCTOR_MESSAGE_WIDTH", _DEFAULTS.message_width, minimum=12),
        log_level=log_level,
    )
