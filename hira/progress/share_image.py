"""
Story-sized (1080x1920) PNG of the activity calendar, for sharing.
"""
import io
from pathlib import Path
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from hira.progress.models import CalendarDay
from hira.users.models import UserRecord

WIDTH, HEIGHT = 1080, 1920
TOP_COLOR = (102, 126, 234)     # #667eea
BOTTOM_COLOR = (118, 75, 162)   # #764ba2

CELL_SIZE = 80
CELL_SPACING = 10
DAYS_PER_ROW = 7
GRID_TOP = 500
DAY_LABELS = ["S", "M", "T", "W", "T", "F", "S"]

# White cell opacity per activity level
LEVEL_ALPHA = {0: 38, 1: 89, 2: 140, 3: 191, 4: 242}

FONT_DIR = Path("/usr/share/fonts/truetype/dejavu")


def _font(size: int, bold: bool = False):
    name = "DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf"
    try:
        return ImageFont.truetype(str(FONT_DIR / name), size)
    except OSError:
        return ImageFont.load_default()


def _gradient() -> Image.Image:
    img = Image.new("RGBA", (WIDTH, HEIGHT))
    draw = ImageDraw.Draw(img)
    for y in range(HEIGHT):
        t = y / (HEIGHT - 1)
        color = tuple(int(a + (b - a) * t) for a, b in zip(TOP_COLOR, BOTTOM_COLOR))
        draw.line([(0, y), (WIDTH, y)], fill=color + (255,))
    return img


def _centered(draw: ImageDraw.ImageDraw, y: int, text: str, font, fill) -> None:
    bbox = draw.textbbox((0, 0), text, font=font)
    draw.text(((WIDTH - (bbox[2] - bbox[0])) // 2, y), text, fill=fill, font=font)


def render_calendar_image(calendar: Sequence[CalendarDay], user: UserRecord) -> Image.Image:
    img = _gradient()
    overlay = Image.new("RGBA", (WIDTH, HEIGHT), (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)

    _centered(draw, 70, "Hira Activity", _font(64, bold=True), (255, 255, 255, 255))
    _centered(draw, 160, user.name, _font(48), (255, 255, 255, 255))
    _centered(draw, 230, f"{user.total_points} Hira Earned", _font(36), (255, 255, 255, 230))

    grid_width = (CELL_SIZE + CELL_SPACING) * DAYS_PER_ROW - CELL_SPACING
    start_x = (WIDTH - grid_width) // 2

    label_font = _font(40, bold=True)
    for i, label in enumerate(DAY_LABELS):
        bbox = draw.textbbox((0, 0), label, font=label_font)
        x = start_x + i * (CELL_SIZE + CELL_SPACING) + (CELL_SIZE - (bbox[2] - bbox[0])) // 2
        draw.text((x, GRID_TOP - 70), label, fill=(255, 255, 255, 230), font=label_font)

    for index, day in enumerate(calendar):
        row, col = divmod(index, DAYS_PER_ROW)
        x = start_x + col * (CELL_SIZE + CELL_SPACING)
        y = GRID_TOP + row * (CELL_SIZE + CELL_SPACING)
        draw.rounded_rectangle(
            [(x, y), (x + CELL_SIZE, y + CELL_SIZE)],
            radius=8,
            fill=(255, 255, 255, LEVEL_ALPHA.get(day.level, LEVEL_ALPHA[0])),
        )

    rows = -(-len(calendar) // DAYS_PER_ROW)
    footer_y = GRID_TOP + rows * (CELL_SIZE + CELL_SPACING) - CELL_SPACING + 60
    _centered(draw, footer_y, "Hunt for Diamonds", _font(48, bold=True), (255, 255, 255, 242))
    _centered(draw, footer_y + 70, "Hira App", _font(36), (255, 255, 255, 204))

    return Image.alpha_composite(img, overlay).convert("RGB")


def calendar_png(calendar: Sequence[CalendarDay], user: UserRecord) -> bytes:
    buffer = io.BytesIO()
    render_calendar_image(calendar, user).save(buffer, format="PNG")
    return buffer.getvalue()
