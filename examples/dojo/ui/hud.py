"""HUD strip plus the start and game-over overlays."""
from __future__ import annotations

import pygame

from ui.constants import (
    COLOR_HUD_BG,
    COLOR_SLOT_EMPTY,
    COLOR_SLOT_FULL,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    HUD_H,
)


class HUD:
    """Collects session reports and draws them above the canvas."""

    def __init__(self, slots: int) -> None:
        self.slots = slots
        self.score = 0
        self.time_text = "0:00"
        self.power = 0
        self.final: tuple[int, str] | None = None
        self.font = pygame.font.SysFont("monospace", 16, bold=True)

    def report_score(self, score: int) -> None:
        self.score = score

    def report_time(self, text: str) -> None:
        self.time_text = text

    def report_power_slots(self, count: int) -> None:
        self.power = count

    def report_game_over(self, score: int, text: str) -> None:
        self.final = (score, text)

    def reset(self) -> None:
        self.final = None

    def draw(self, surface: pygame.Surface) -> None:
        w = surface.get_width()
        pygame.draw.rect(surface, COLOR_HUD_BG, (0, 0, w, HUD_H))
        score = self.font.render(f"Score: {self.score}", True, COLOR_TEXT)
        surface.blit(score, (10, (HUD_H - score.get_height()) // 2))
        clock = self.font.render(self.time_text, True, COLOR_TEXT)
        surface.blit(clock, clock.get_rect(center=(w // 2, HUD_H // 2)))

        size = 14
        for i in range(self.slots):
            color = COLOR_SLOT_FULL if i < self.power else COLOR_SLOT_EMPTY
            x = w - 10 - (self.slots - i) * (size + 6)
            pygame.draw.rect(surface, color, (x, (HUD_H - size) // 2, size, size), border_radius=3)


def draw_banner(
    surface: pygame.Surface,
    area: pygame.Rect,
    title: str,
    lines: list[str],
) -> None:
    """Darken ``area`` and center a title with hint lines below it."""
    overlay = pygame.Surface(area.size, pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 150))
    surface.blit(overlay, area.topleft)

    big_font = pygame.font.SysFont("monospace", 32, bold=True)
    font = pygame.font.SysFont("monospace", 16)
    text = big_font.render(title, True, (255, 255, 255))
    surface.blit(text, text.get_rect(center=(area.centerx, area.centery - 30)))
    for i, line in enumerate(lines):
        hint = font.render(line, True, COLOR_TEXT_DIM)
        surface.blit(hint, hint.get_rect(center=(area.centerx, area.centery + 10 + i * 22)))
