"""Progress bar rendering."""
from __future__ import annotations

import math

import pygame

from tick_progress import ProgressValue
from tick_progress.easing import clamp01

from ui.constants import (
    BAR_BG,
    BAR_BORDER,
    BAR_H,
    BAR_W,
    LABEL_W,
    PAD,
    READY_COLOR,
    ROW_H,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_bar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    row: int,
    label: str,
    value: ProgressValue,
    color: tuple[int, int, int],
    fill: float | None = None,
) -> None:
    """Draw one labelled bar. ``fill`` overrides ``value.progress()``."""
    y = PAD + row * ROW_H
    bar_x = PAD * 2 + LABEL_W
    bar_y = y + (ROW_H - BAR_H) // 2

    if fill is None:
        fill = value.progress()
    complete = value.is_complete()
    if math.isnan(fill):
        # zero-length sentinels report nan before any time has passed
        fill = 1.0 if complete else 0.0

    label_color = READY_COLOR if complete else TEXT_COLOR
    surface.blit(font.render(label, True, label_color), (PAD, bar_y + 3))

    pygame.draw.rect(surface, BAR_BG, (bar_x, bar_y, BAR_W, BAR_H))
    # UNLIMITED policies can report values past 1; the widget still caps
    width = int(BAR_W * clamp01(fill))
    if width > 0:
        pygame.draw.rect(surface, color, (bar_x, bar_y, width, BAR_H))
    pygame.draw.rect(surface, BAR_BORDER, (bar_x, bar_y, BAR_W, BAR_H), 1)

    text = font.render(f"{fill:5.2f}", True, TEXT_DIM)
    surface.blit(text, (bar_x + BAR_W - text.get_width() - 4, bar_y + 3))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, frame: int) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    hint = "1-3 ability  Space charge  F finish  R restart  Esc quit"
    surface.blit(font.render(hint, True, TEXT_COLOR), (PAD, y + 10))
    frame_text = font.render(f"frame {frame}", True, TEXT_DIM)
    surface.blit(frame_text, (SCREEN_W - frame_text.get_width() - PAD, y + 10))
