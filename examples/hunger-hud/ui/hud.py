"""Plate gauge, stats panel, and bottom status bar."""
from __future__ import annotations

import math

import pygame

from tick_hunger import HungerSystem, plate_color, seconds_label

from ui.constants import (
    FLASH_COLOR,
    LABEL_COLOR,
    LINE_H,
    PANEL_BG,
    PANEL_X,
    PANEL_Y,
    PAUSED_COLOR,
    PLATE_BG,
    PLATE_CX,
    PLATE_CY,
    PLATE_RADIUS,
    RIM_WIDTH,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_plate(
    surface: pygame.Surface,
    font: pygame.font.Font,
    system: HungerSystem,
    flash: float,
) -> None:
    """Draw the plate as a pie filled to the current fraction.

    `flash` in [0, 1] tints the rim red after a starvation tick.
    """
    fraction = system.get_fill_fraction()
    color = plate_color(system.get_severity())

    pygame.draw.circle(surface, PLATE_BG, (PLATE_CX, PLATE_CY), PLATE_RADIUS)

    # Pie wedge, clockwise from 12 o'clock
    if fraction > 0:
        samples = max(2, int(64 * fraction))
        points = [(PLATE_CX, PLATE_CY)]
        for i in range(samples + 1):
            angle = -math.pi / 2 + 2 * math.pi * fraction * i / samples
            points.append((
                PLATE_CX + math.cos(angle) * (PLATE_RADIUS - RIM_WIDTH),
                PLATE_CY + math.sin(angle) * (PLATE_RADIUS - RIM_WIDTH),
            ))
        pygame.draw.polygon(surface, color, points)

    rim = color
    if flash > 0:
        rim = tuple(int(c + (f - c) * flash) for c, f in zip(color, FLASH_COLOR))
    pygame.draw.circle(surface, rim, (PLATE_CX, PLATE_CY), PLATE_RADIUS, RIM_WIDTH)

    label = font.render(seconds_label(system.get_level()), True, TEXT_COLOR)
    surface.blit(
        label,
        (PLATE_CX - label.get_width() // 2, PLATE_CY + PLATE_RADIUS + 12),
    )


def draw_panel(
    surface: pygame.Surface,
    font: pygame.font.Font,
    system: HungerSystem,
    speed: float,
    paused: bool,
    tick_count: int,
    pitch_target: float,
) -> None:
    """Draw the right-side stats panel."""
    h = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, PANEL_BG, (PANEL_X - 10, 0, SCREEN_W - PANEL_X + 10, h))
    pygame.draw.line(surface, (50, 50, 70), (PANEL_X - 10, 0), (PANEL_X - 10, h))

    cx = PANEL_X
    cy = 12
    surface.blit(font.render("HUNGER", True, LABEL_COLOR), (cx, cy))
    cy = PANEL_Y

    severity = system.get_severity()
    rows = [
        (f"Severity: {severity.label}", plate_color(severity)),
        (f"Level:    {system.get_level():.1f}", TEXT_COLOR),
        (f"Fill:     {system.get_fill_fraction():.0%}", TEXT_COLOR),
        (f"Move:     x{system.movement_multiplier():.2f}", TEXT_COLOR),
        (f"Diff:     x{system.difficulty_multiplier():.2f}", TEXT_COLOR),
        (f"Pitch:    {system.music_pitch():.2f}", TEXT_COLOR),
        (f"Target:   {pitch_target:.2f}", TEXT_DIM),
        (f"Ticks:    {tick_count}", TEXT_DIM),
    ]
    for text, color in rows:
        surface.blit(font.render(text, True, color), (cx, cy))
        cy += LINE_H

    cy += 8
    if paused:
        surface.blit(font.render("PAUSED", True, PAUSED_COLOR), (cx, cy))
    else:
        surface.blit(font.render(f"Speed: {speed:g}x", True, TEXT_DIM), (cx, cy))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font) -> None:
    """Draw bottom key-bindings bar."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = "[E] Eat +60s  [R] Reset  [Space] Pause  [1-4] Speed  [Esc] Quit"
    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
