import logging
from pathlib import Path

from PIL import Image

from asciify.config import DEFAULT_CONFIG, PipelineConfig
from asciify.errors import AsciifyError, NoInputError, ProcessingError, ValidationError
from asciify.grid import AsciiGrid, map_glyphs
from asciify.params import RenderParameters
from asciify.sampling import decode_image, grid_size, resample
from asciify.tone import apply_tone_curve

logger = logging.getLogger(__name__)


def load_image(source: bytes | str | Path | Image.Image) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    if isinstance(source, (str, Path)):
        path = Path(source)
        if not path.is_file():
            raise NoInputError(f"File not found: {path}")
        source = path.read_bytes()
    if not source:
        raise NoInputError()
    return decode_image(source)


def render(
    source: bytes | str | Path | Image.Image,
    params: RenderParameters | None = None,
    cfg: PipelineConfig = DEFAULT_CONFIG,
) -> AsciiGrid:
    """Run decode -> resample -> tone curve -> glyph mapping and return the grid."""
    if params is None:
        params = RenderParameters()
    params.check_limits(cfg)
    image = load_image(source)
    _, rows = grid_size(image.width, image.height, params.width, cfg.height_scale)
    if rows > cfg.max_rows:
        raise ValidationError("width", f"would produce {rows} rows, more than {cfg.max_rows}")

    try:
        luma = resample(image, params.width, cfg.height_scale, cfg.resample)
        luma = apply_tone_curve(luma, params.contrast, params.gamma, params.brightness)
        grid = map_glyphs(luma, cfg.ramp, invert=params.invert)
    except AsciifyError:
        raise
    except Exception as e:
        logger.exception("Image processing failed")
        raise ProcessingError(f"Processing failed: {e}") from e

    logger.debug(
        "Rendered %dx%d source to %dx%d grid (contrast=%s gamma=%s brightness=%s invert=%s)",
        image.width,
        image.height,
        params.width,
        grid.height,
        params.contrast,
        params.gamma,
        params.brightness,
        params.invert,
    )
    return grid


def image_to_ascii(
    source: bytes | str | Path | Image.Image,
    params: RenderParameters | None = None,
    cfg: PipelineConfig = DEFAULT_CONFIG,
) -> str:
    return render(source, params, cfg).text
