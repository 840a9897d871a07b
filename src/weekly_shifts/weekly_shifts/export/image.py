"""PNG summary of one week, meant to be shared from the phone."""
from __future__ import annotations

import io
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from ..calendar_grid.labels import ITALIAN, LabelProvider
from ..core.enums import DayType
from ..schedules.hours import day_hours, format_duration, week_hours
from ..schedules.model import DaySchedule

WIDTH = 720
HEADER_HEIGHT = 120
ROW_HEIGHT = 64
FOOTER_HEIGHT = 80
PADDING = 32

BACKGROUND = (15, 23, 42)
ROW_BACKGROUND = (30, 41, 59)
TEXT = (241, 245, 249)
MUTED = (148, 163, 184)
ACCENT = (45, 212, 191)
WARNING = (251, 191, 36)


def _font(size: int):
    return ImageFont.load_default(size=size)


def _shifts_text(day: DaySchedule, labels: LabelProvider) -> str:
    if day.type == DayType.WORK and day.shifts:
        return "  ".join(f"{s.start or '--:--'}-{s.end or '--:--'}" for s in day.shifts)
    if day.type == DayType.REST:
        return labels.rest_label
    return "-"


def render_week_image(
    days: Sequence[DaySchedule],
    date_range: str,
    labels: LabelProvider = ITALIAN,
) -> bytes:
    days = sorted(days, key=lambda d: d.date)
    height = HEADER_HEIGHT + ROW_HEIGHT * max(len(days), 1) + FOOTER_HEIGHT

    img = Image.new("RGB", (WIDTH, height), BACKGROUND)
    draw = ImageDraw.Draw(img)
    title_font, body_font, small_font = _font(30), _font(22), _font(16)

    draw.text((PADDING, 28), labels.week_title, font=title_font, fill=TEXT)
    draw.text((PADDING, 72), date_range or "", font=body_font, fill=ACCENT)

    y = HEADER_HEIGHT
    for day in days:
        draw.rounded_rectangle(
            (PADDING // 2, y + 4, WIDTH - PADDING // 2, y + ROW_HEIGHT - 4),
            radius=10,
            fill=ROW_BACKGROUND,
        )
        name = labels.weekday(day.date.weekday()).capitalize()
        draw.text((PADDING, y + 10), name, font=body_font, fill=TEXT)
        draw.text((PADDING, y + 38), f"{day.date.day:02d}", font=small_font, fill=MUTED)
        draw.text((200, y + 20), _shifts_text(day, labels), font=body_font, fill=TEXT)

        hours = day_hours(day)
        if hours:
            draw.text((WIDTH - 150, y + 20), format_duration(hours), font=body_font, fill=ACCENT)
        if day.is_uncertain:
            draw.ellipse((WIDTH - 40, y + 26, WIDTH - 28, y + 38), fill=WARNING)
        y += ROW_HEIGHT

    draw.text((PADDING, y + 24), labels.total_label, font=body_font, fill=MUTED)
    draw.text((WIDTH - 150, y + 24), format_duration(week_hours(days)), font=body_font, fill=ACCENT)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
