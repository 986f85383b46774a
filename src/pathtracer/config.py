"""Render configuration, with defaults taken from environment variables."""

import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from pathtracer.errors import ConfigError

# Image settings
IMAGE_WIDTH = 400
ASPECT_RATIO = 16.0 / 9.0
SAMPLES_PER_PIXEL = 100
MAX_DEPTH = 50
SEED = 0

# Scene and output
SCENE = os.getenv("PATHTRACER_SCENE", "random_spheres")
OUTPUT = os.getenv("PATHTRACER_OUTPUT", "-")
TEXTURE_PATH: Optional[str] = os.getenv("PATHTRACER_TEXTURE", None)

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Quality presets: samples per pixel and maximum bounces
QUALITY_LEVELS = {
    "interactive": {"samples": 1, "bounces": 2},
    "balanced": {"samples": 16, "bounces": 8},
    "high_quality": {"samples": 100, "bounces": 50},
}


def env_number(name: str, default, convert: Callable = int):
    """Read a numeric environment variable, raising ConfigError if it does not parse."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return convert(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None


def _from_env(name: str, default, convert: Callable = int):
    # Numeric variables are parsed per instance so a bad value surfaces as ConfigError
    return field(default_factory=lambda: env_number(name, default, convert))


@dataclass(frozen=True)
class RenderSettings:
    """Everything the renderer and the scene builders need to know."""

    image_width: int = _from_env("PATHTRACER_WIDTH", IMAGE_WIDTH)
    aspect_ratio: float = _from_env("PATHTRACER_ASPECT_RATIO", ASPECT_RATIO, float)
    samples_per_pixel: int = _from_env("PATHTRACER_SPP", SAMPLES_PER_PIXEL)
    max_depth: int = _from_env("PATHTRACER_MAX_DEPTH", MAX_DEPTH)
    seed: int = _from_env("PATHTRACER_SEED", SEED)
    scene: str = SCENE
    output: str = OUTPUT
    texture_path: Optional[str] = TEXTURE_PATH

    def __post_init__(self):
        if self.image_width <= 0:
            raise ConfigError(f"image_width must be positive, got {self.image_width}")
        if not self.aspect_ratio > 0:
            raise ConfigError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ConfigError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ConfigError(f"max_depth must be positive, got {self.max_depth}")

    @property
    def image_height(self) -> int:
        return max(1, int(self.image_width / self.aspect_ratio))

    @classmethod
    def from_quality(cls, quality: str, **overrides) -> "RenderSettings":
        """Build settings from a QUALITY_LEVELS preset, then apply overrides."""
        try:
            preset = QUALITY_LEVELS[quality]
        except KeyError:
            raise ConfigError(
                f"Unknown quality {quality!r}; expected one of {sorted(QUALITY_LEVELS)}"
            ) from None
        values = {"samples_per_pixel": preset["samples"], "max_depth": preset["bounces"]}
        values.update(overrides)
        return cls(**values)


__all__ = [
    "IMAGE_WIDTH",
    "ASPECT_RATIO",
    "SAMPLES_PER_PIXEL",
    "MAX_DEPTH",
    "SEED",
    "SCENE",
    "OUTPUT",
    "TEXTURE_PATH",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "QUALITY_LEVELS",
    "env_number",
    "RenderSettings",
]
