import io

from PIL import Image, ImageDraw, ImageFont

# Tried in order; Pillow's bundled font is the last resort
MONOSPACE_FONTS = [
    "DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/System/Library/Fonts/Menlo.ttc",
    "consola.ttf",
]

PADDING = 20


def load_monospace_font(font_size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for candidate in MONOSPACE_FONTS:
        try:
            return ImageFont.truetype(candidate, font_size)
        except OSError:
            continue
    return ImageFont.load_default(font_size)


def render_png(
    text: str,
    font_size: int = 12,
    background: str = "white",
    foreground: str = "black",
) -> bytes:
    """Draw ASCII art onto an image and return it encoded as PNG."""
    lines = text.splitlines() or [""]
    font = load_monospace_font(font_size)

    # Measure a full-height glyph for consistent cell size
    _, top, _, bottom = font.getbbox("M")
    char_width = max(1, int(font.getlength("M")))
    line_height = max(1, bottom - top) + 2

    columns = max(len(line) for line in lines)
    size = (columns * char_width + 2 * PADDING, len(lines) * line_height + 2 * PADDING)
    image = Image.new("RGB", size, color=background)
    draw = ImageDraw.Draw(image)

    y = PADDING
    for line in lines:
        draw.text((PADDING, y - top), line, font=font, fill=foreground)
        y += line_height

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
