from __future__ import annotations

import math
from dataclasses import dataclass

from asciify import config
from asciify.config import DEFAULT_CONFIG, PipelineConfig
from asciify.errors import ValidationError

# Contrast at or above this makes the contrast factor's denominator non-positive
MAX_CONTRAST = 259 / 255

_TRUE = "true"
_FALSE = "false"


@dataclass(frozen=True)
class RenderParameters:
    width: int = config.DEFAULT_WIDTH
    contrast: float = config.DEFAULT_CONTRAST
    gamma: float = config.DEFAULT_GAMMA
    brightness: float = config.DEFAULT_BRIGHTNESS
    invert: bool = config.DEFAULT_INVERT

    def __post_init__(self):
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width < 1:
            raise ValidationError("width", f"must be a positive integer, got {self.width!r}")
        for name in ("contrast", "gamma", "brightness"):
            if not math.isfinite(getattr(self, name)):
                raise ValidationError(name, "must be a finite number")
        if self.contrast >= MAX_CONTRAST:
            raise ValidationError("contrast", f"must be below {MAX_CONTRAST:.4f}, got {self.contrast}")
        if self.gamma <= 0:
            raise ValidationError("gamma", f"must be greater than 0, got {self.gamma}")

    def check_limits(self, cfg: PipelineConfig) -> "RenderParameters":
        if self.width > cfg.max_width:
            raise ValidationError("width", f"must be at most {cfg.max_width}, got {self.width}")
        return self


def _is_absent(raw: str | None) -> bool:
    return raw is None or not raw.strip()


def parse_int(field: str, raw: str | None, default: int) -> int:
    if _is_absent(raw):
        return default
    try:
        return int(raw.strip(), 10)
    except ValueError:
        raise ValidationError(field, f"expected an integer, got {raw!r}") from None


def parse_float(field: str, raw: str | None, default: float) -> float:
    if _is_absent(raw):
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        raise ValidationError(field, f"expected a number, got {raw!r}") from None
    if not math.isfinite(value):
        raise ValidationError(field, f"expected a finite number, got {raw!r}")
    return value


def parse_bool(field: str, raw: str | None, default: bool) -> bool:
    if _is_absent(raw):
        return default
    value = raw.strip().lower()
    if value == _TRUE:
        return True
    if value == _FALSE:
        return False
    raise ValidationError(field, f"expected 'true' or 'false', got {raw!r}")


def resolve_parameters(
    width: str | None = None,
    contrast: str | None = None,
    gamma: str | None = None,
    brightness: str | None = None,
    invert: str | None = None,
    cfg: PipelineConfig = DEFAULT_CONFIG,
) -> RenderParameters:
    """Parse raw string inputs into ``RenderParameters``, enforcing the config's width cap."""
    params = RenderParameters(
        width=parse_int("width", width, config.DEFAULT_WIDTH),
        contrast=parse_float("contrast", contrast, config.DEFAULT_CONTRAST),
        gamma=parse_float("gamma", gamma, config.DEFAULT_GAMMA),
        brightness=parse_float("brightness", brightness, config.DEFAULT_BRIGHTNESS),
        invert=parse_bool("invert", invert, config.DEFAULT_INVERT),
    )
    return params.check_limits(cfg)
