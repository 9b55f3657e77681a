from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from PIL import Image

from asciify.charsets import DEFAULT_RAMP, check_ramp

# =============================================================================
# RENDER PARAMETER DEFAULTS
# =============================================================================

DEFAULT_WIDTH = 200
DEFAULT_CONTRAST = 0.2
DEFAULT_GAMMA = 1.1
# Additive, in 0-1 units; scaled by 255 when applied
DEFAULT_BRIGHTNESS = 0.05
DEFAULT_INVERT = False

# =============================================================================
# GRID GEOMETRY
# =============================================================================

# Monospace cells are roughly twice as tall as wide; squash rows to compensate
HEIGHT_SCALE = 0.45

# Hard cap on output columns (bounds grid size and CPU per request)
MAX_WIDTH = 512

# Hard cap on output rows (tall, narrow sources)
MAX_ROWS = 1024

# =============================================================================
# UPLOADS
# =============================================================================

MAX_UPLOAD_BYTES = 20 * 1024 * 1024

RESAMPLE = Image.Resampling.LANCZOS

ENV_PREFIX = "ASCIIFY_"


@dataclass(frozen=True)
class PipelineConfig:
    ramp: str = DEFAULT_RAMP
    height_scale: float = HEIGHT_SCALE
    max_width: int = MAX_WIDTH
    max_rows: int = MAX_ROWS
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    resample: Image.Resampling = RESAMPLE

    def __post_init__(self):
        check_ramp(self.ramp)
        if not self.height_scale > 0:
            raise ValueError(f"height_scale must be positive, got {self.height_scale}")
        if self.max_width < 1:
            raise ValueError(f"max_width must be at least 1, got {self.max_width}")
        if self.max_rows < 1:
            raise ValueError(f"max_rows must be at least 1, got {self.max_rows}")
        if self.max_upload_bytes < 1:
            raise ValueError(f"max_upload_bytes must be at least 1, got {self.max_upload_bytes}")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PipelineConfig":
        """Build a config from ``ASCIIFY_*`` environment variables, falling back to defaults."""
        if environ is None:
            environ = os.environ
        kwargs = {}
        if environ.get(ENV_PREFIX + "RAMP"):
            kwargs["ramp"] = environ[ENV_PREFIX + "RAMP"]
        overrides = (("HEIGHT_SCALE", float), ("MAX_WIDTH", int), ("MAX_ROWS", int), ("MAX_UPLOAD_BYTES", int))
        for key, convert in overrides:
            raw = environ.get(ENV_PREFIX + key)
            if raw:
                try:
                    kwargs[key.lower()] = convert(raw)
                except ValueError:
                    raise ValueError(f"{ENV_PREFIX}{key} is not a valid {convert.__name__}: {raw!r}") from None
        return cls(**kwargs)


DEFAULT_CONFIG = PipelineConfig()
