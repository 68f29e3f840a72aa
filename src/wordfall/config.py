"""Global constants, default settings, and the per-game configuration."""

from __future__ import annotations

import json
import logging
import string
from dataclasses import dataclass, fields
from pathlib import Path

from wordfall.models import FloorPolicy

logger = logging.getLogger(__name__)

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 720
FPS = 60
WINDOW_TITLE = "Wordfall"

# Play area (pixels)
PLAY_AREA_WIDTH = 640
PLAY_AREA_HEIGHT = 460
WORD_HEIGHT = 40

# Periodic triggers (milliseconds)
FALL_INTERVAL_MS = 30
TIMER_INTERVAL_MS = 100

# Falling speed, in pixels per fall tick
START_FALL_SPEED = 1.3
SPEED_INCREASE_PER_WORD = 0.15
MAX_FALL_SPEED = 8.0

START_OFFSET = 0.0
FLOOR_TOLERANCE = 2.0

LENIENT_SCORE_FLOOR = -5

STORAGE_KEY_BEST_SCORE = "fallingWordsBestScore"

DEFAULT_WORDS = (
    "cat", "dog", "javascript", "code", "school",
    "typing", "keyboard", "game", "browser", "student",
    "letter", "dom", "event", "storage", "function",
)

ALPHABET = frozenset(string.ascii_lowercase)

DEFAULT_SETTINGS_PATH = Path.home() / ".wordfall" / "settings.json"


class ConfigError(ValueError):
    """Raised when the game is configured with values it cannot run with."""


def is_word(text: str) -> bool:
    return isinstance(text, str) and bool(text) and all(ch in ALPHABET for ch in text)


@dataclass
class GameConfig:
    words: tuple[str, ...] = DEFAULT_WORDS
    start_speed: float = START_FALL_SPEED
    speed_increment: float = SPEED_INCREASE_PER_WORD
    max_speed: float = MAX_FALL_SPEED
    start_offset: float = START_OFFSET
    floor_y: float = PLAY_AREA_HEIGHT - WORD_HEIGHT
    floor_tolerance: float = FLOOR_TOLERANCE
    fall_interval_ms: int = FALL_INTERVAL_MS
    timer_interval_ms: int = TIMER_INTERVAL_MS
    policy: FloorPolicy = FloorPolicy.STRICT
    score_floor: int = LENIENT_SCORE_FLOOR
    storage_key: str = STORAGE_KEY_BEST_SCORE

    def validate(self) -> GameConfig:
        """Check the configuration, raising ConfigError on the first problem."""
        if not self.words:
            raise ConfigError("vocabulary must contain at least one word")
        for word in self.words:
            if not is_word(word):
                raise ConfigError(f"invalid word {word!r}: expected lowercase letters a-z")
        if self.start_speed <= 0:
            raise ConfigError("start_speed must be positive")
        if self.max_speed < self.start_speed:
            raise ConfigError("max_speed must not be below start_speed")
        if self.speed_increment < 0:
            raise ConfigError("speed_increment must not be negative")
        if self.fall_interval_ms <= 0 or self.timer_interval_ms <= 0:
            raise ConfigError("timer intervals must be positive")
        if self.floor_y <= self.start_offset:
            raise ConfigError("floor_y must lie below start_offset")
        if not isinstance(self.policy, FloorPolicy):
            raise ConfigError(f"unknown floor policy {self.policy!r}")
        return self


def parse_policy(name: str) -> FloorPolicy:
    try:
        return FloorPolicy[name.upper()]
    except KeyError:
        choices = ", ".join(p.name.lower() for p in FloorPolicy)
        raise ConfigError(f"unknown floor policy {name!r} (choose from {choices})") from None


def load_config(path: Path = DEFAULT_SETTINGS_PATH) -> GameConfig:
    """Load game settings from disk, returning defaults if absent.

    Only the ``"game"`` section of the file is read; unknown keys are dropped.
    Values that are present are validated, so a bad setting raises ConfigError.
    """
    if not path.exists():
        return GameConfig()
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return GameConfig()

    section = data.get("game", {}) if isinstance(data, dict) else {}
    known = {f.name for f in fields(GameConfig)}
    values = {k: v for k, v in section.items() if k in known}
    if "words" in values:
        if isinstance(values["words"], str):
            raise ConfigError("\"words\" must be a list of words")
        values["words"] = tuple(values["words"])
    if "policy" in values:
        values["policy"] = parse_policy(str(values["policy"]))
    return GameConfig(**values).validate()
