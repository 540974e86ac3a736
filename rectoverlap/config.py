"""Scene configuration loaded from JSON files."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .rectangle import Rectangle

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("x", "y", "width", "height")


class ConfigError(ValueError):
    """Raised when a scene file is readable but its content is not valid."""


@dataclass(frozen=True)
class RectangleSpec:
    """Parameters of one rectangle in a scene."""

    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0

    @classmethod
    def from_dict(cls, data: dict) -> "RectangleSpec":
        if not isinstance(data, dict):
            raise ConfigError(f"rectangle entry must be an object, got {type(data).__name__}")
        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise ConfigError(f"rectangle entry is missing {', '.join(missing)}")

        values = {}
        for key in REQUIRED_KEYS + ("rotation",):
            if key not in data:
                continue
            value = data[key]
            # bool is an int subclass but never a sensible coordinate
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"rectangle field {key!r} must be a number, got {value!r}")
            values[key] = float(value)
        return cls(**values)

    def build(self) -> Rectangle:
        return Rectangle(self.x, self.y, self.width, self.height, self.rotation)


@dataclass(frozen=True)
class SceneConfig:
    """The two rectangles to test against each other."""

    first: RectangleSpec
    second: RectangleSpec

    @classmethod
    def from_dict(cls, data: dict) -> "SceneConfig":
        if not isinstance(data, dict) or "rectangles" not in data:
            raise ConfigError("scene must be an object with a 'rectangles' list")
        rectangles = data["rectangles"]
        if not isinstance(rectangles, list) or len(rectangles) != 2:
            raise ConfigError("'rectangles' must be a list of exactly two entries")
        return cls(
            first=RectangleSpec.from_dict(rectangles[0]),
            second=RectangleSpec.from_dict(rectangles[1]),
        )

    @classmethod
    def from_config_file(cls, config_path: Path | str) -> "SceneConfig":
        """Load a scene from a JSON file."""
        config_path = Path(config_path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Scene file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise ConfigError(f"{config_path} is not valid JSON: {e}") from e

        logger.debug("loaded scene from %s", config_path)
        return cls.from_dict(data)

    def build(self) -> tuple[Rectangle, Rectangle]:
        return self.first.build(), self.second.build()
