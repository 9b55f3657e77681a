# Ramps run from least ink to most ink; index 0 is what a blank cell looks like.

# 70-level ramp, the default for rendering
DETAILED = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Short 10-level ramp, reads better at small widths
STANDARD = " .:-=+*#%@"

# Block elements: light, medium and dark shade, full block
BLOCKS = " ░▒▓█"

RAMPS = {
    "detailed": DETAILED,
    "standard": STANDARD,
    "blocks": BLOCKS,
}

DEFAULT_RAMP = DETAILED


def check_ramp(ramp: str) -> str:
    """Return the ramp unchanged, or raise ValueError if it cannot be mapped onto."""
    if not isinstance(ramp, str):
        raise ValueError(f"Ramp must be a string, got {type(ramp).__name__}")
    if len(ramp) < 2:
        raise ValueError(f"Ramp needs at least 2 characters, got {len(ramp)}")
    if "\n" in ramp or "\r" in ramp:
        raise ValueError("Ramp must not contain line breaks")
    return ramp
