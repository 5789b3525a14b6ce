"""Pygame draw service for the dojo presentation pass."""
from __future__ import annotations

import math

import pygame

from tick_dojo import DojoConfig, ShurikenKind
from tick_dojo.components import Body, Bomb, ComboPath, Ninja, Remnant, Shuriken, Sushi
from ui.constants import (
    BOARD_WIDTH,
    COLOR_BLADE,
    COLOR_BLADE_EDGE,
    COLOR_BOARD,
    COLOR_BORDER,
    COLOR_FLOOR,
    COLOR_FOG,
    COLOR_GLOW,
    COLOR_GRAIN,
    COLOR_HANDLE,
    COLOR_HOLE,
    COLOR_NINJA,
    COLOR_NINJA_OUTLINE,
    COLOR_OUTER,
    COLOR_OUTER_GRID,
    COLOR_POINT_EDGE,
    COLOR_POINT_FILL,
    COLOR_RANGE,
    COLOR_RANGE_EDGE,
    COLOR_RICE,
    COLOR_RICE_EDGE,
    COLOR_SALMON,
    COLOR_SELECT_DIM,
    COLOR_SHADOW_EDGE,
    COLOR_SHURIKEN_EDGE,
    FOG_EDGE,
    GRAIN_STEP,
    OUTER_GRID_STEP,
    SHURIKEN_COLORS,
    SUSHI_BOB_HEIGHT,
)


def _star(center: tuple[float, float], radius: float, rotation: float) -> list[tuple[float, float]]:
    """Four-pointed star outline."""
    cx, cy = center
    points = []
    for i in range(4):
        outer = rotation + i * math.pi / 2
        inner = outer + math.pi / 4
        points.append((cx + math.cos(outer) * radius, cy + math.sin(outer) * radius))
        points.append((cx + math.cos(inner) * radius * 0.4, cy + math.sin(inner) * radius * 0.4))
    return points


def _ipos(p: tuple[float, float]) -> tuple[int, int]:
    return int(p[0]), int(p[1])


class PygameRenderer:
    """Draws one frame onto a canvas-sized surface."""

    def __init__(self, surface: pygame.Surface, config: DojoConfig) -> None:
        self.surface = surface
        self.config = config
        self.font = pygame.font.SysFont("monospace", 14, bold=True)
        self.big_font = pygame.font.SysFont("monospace", 20, bold=True)
        self._overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    def draw_arena(self, config: DojoConfig) -> None:
        surf = self.surface
        w, h = int(config.canvas_width), int(config.canvas_height)
        surf.fill(COLOR_OUTER)
        for x in range(0, w, OUTER_GRID_STEP):
            pygame.draw.line(surf, COLOR_OUTER_GRID, (x, 0), (x, h))
        for y in range(0, h, OUTER_GRID_STEP):
            pygame.draw.line(surf, COLOR_OUTER_GRID, (0, y), (w, y))

        (x0, y0), (x1, y1) = config.arena_min, config.arena_max
        rect = pygame.Rect(int(x0), int(y0), int(x1 - x0), int(y1 - y0))
        pygame.draw.rect(surf, COLOR_FLOOR, rect)
        for x in range(rect.left, rect.right, BOARD_WIDTH):
            pygame.draw.line(surf, COLOR_BOARD, (x, rect.top), (x, rect.bottom))
        for y in range(rect.top, rect.bottom, GRAIN_STEP):
            pygame.draw.line(surf, COLOR_GRAIN, (rect.left, y), (rect.right, y))
        pygame.draw.rect(surf, COLOR_BORDER, rect, 4)

    def draw_remnant(self, body: Body, remnant: Remnant) -> None:
        r = self.config.shuriken_radius
        size = int(r * 2) + 2
        layer = pygame.Surface((size, size), pygame.SRCALPHA)
        color = (*SHURIKEN_COLORS[remnant.kind], int(255 * remnant.opacity))
        pygame.draw.polygon(layer, color, _star((size / 2, size / 2), r, 0.0))
        x, y = body.position
        self.surface.blit(layer, (int(x - size / 2), int(y - size / 2)))

    def draw_sushi(self, body: Body, sushi: Sushi) -> None:
        r = self.config.sushi_radius
        x, y = body.position
        y += math.sin(sushi.bob) * SUSHI_BOB_HEIGHT
        pygame.draw.circle(self.surface, COLOR_RICE, _ipos((x, y)), int(r))
        pygame.draw.circle(self.surface, COLOR_RICE_EDGE, _ipos((x, y)), int(r), 1)
        top = pygame.Rect(0, 0, int(r * 1.4), int(r))
        top.center = _ipos((x, y - 1))
        pygame.draw.ellipse(self.surface, COLOR_SALMON, top)

    def draw_shuriken(self, body: Body, shuriken: Shuriken) -> None:
        kind = shuriken.kind
        points = _star(body.position, self.config.shuriken_radius, shuriken.rotation)
        edge = COLOR_SHADOW_EDGE if kind is ShurikenKind.SHADOW else COLOR_SHURIKEN_EDGE
        pygame.draw.polygon(self.surface, SHURIKEN_COLORS[kind], points)
        pygame.draw.polygon(self.surface, edge, points, 1)
        pygame.draw.circle(self.surface, COLOR_HOLE, _ipos(body.position), 2)

    def draw_bomb(self, body: Body, bomb: Bomb) -> None:
        pos = _ipos(body.position)
        if not bomb.exploded:
            pulse = 0.5 + math.sin(bomb.timer * 10) * 0.5
            green = max(0, min(255, int(100 * bomb.timer / self.config.bomb_fuse)))
            radius = int(15 + pulse * 10)
            layer = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
            pygame.draw.circle(layer, (255, green, 0, 128), (radius, radius), radius)
            self.surface.blit(layer, (pos[0] - radius, pos[1] - radius))
            label = self.font.render(str(math.ceil(bomb.timer)), True, (255, 255, 255))
            self.surface.blit(label, label.get_rect(center=pos))
            return

        radius = max(1, int(bomb.radius))
        layer = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        alpha = int(255 * bomb.opacity)
        pygame.draw.circle(layer, (255, 50, 0, alpha // 2), (radius, radius), radius)
        pygame.draw.circle(layer, (255, 150, 50, int(alpha * 0.8)), (radius, radius), int(radius * 0.7))
        pygame.draw.circle(layer, (255, 255, 200, alpha), (radius, radius), int(radius * 0.3))
        self.surface.blit(layer, (pos[0] - radius, pos[1] - radius))

    def draw_ninja(self, body: Body, ninja: Ninja, executing: bool) -> None:
        config = self.config
        x, y = body.position
        pos = _ipos(body.position)

        if not ninja.moving and not executing:
            rng = int(config.move_range)
            layer = pygame.Surface((rng * 2, rng * 2), pygame.SRCALPHA)
            pygame.draw.circle(layer, COLOR_RANGE, (rng, rng), rng)
            pygame.draw.circle(layer, COLOR_RANGE_EDGE, (rng, rng), rng, 1)
            self.surface.blit(layer, (pos[0] - rng, pos[1] - rng))
        else:
            if executing:
                sweep = ninja.swing * math.tau
                extension = 1.0
            else:
                sweep = -math.pi * 0.75 + ninja.swing * math.pi * 1.5
                extension = 0.6 + math.sin(ninja.swing * math.pi) * 0.4
            heading = ninja.angle + sweep
            ux, uy = math.cos(heading), math.sin(heading)
            r = config.ninja_radius
            hilt = (x + ux * (r - 4), y + uy * (r - 4))
            guard = (x + ux * (r + 6), y + uy * (r + 6))
            tip_len = r + config.sword_length * extension
            tip = (x + ux * tip_len, y + uy * tip_len)
            pygame.draw.line(self.surface, COLOR_HANDLE, _ipos(hilt), _ipos(guard), 6)
            pygame.draw.line(self.surface, COLOR_BLADE, _ipos(guard), _ipos(tip), 5)
            pygame.draw.line(self.surface, COLOR_BLADE_EDGE, _ipos(guard), _ipos(tip), 1)

        radius = int(config.ninja_radius)
        if ninja.glowing:
            pulse = (math.sin(ninja.glow_phase) + 1) / 2
            halo = radius + int(4 + pulse * 6)
            layer = pygame.Surface((halo * 2, halo * 2), pygame.SRCALPHA)
            pygame.draw.circle(layer, (*COLOR_GLOW, int(80 + pulse * 80)), (halo, halo), halo)
            self.surface.blit(layer, (pos[0] - halo, pos[1] - halo))
            pygame.draw.circle(self.surface, COLOR_GLOW, pos, radius)
        else:
            pygame.draw.circle(self.surface, COLOR_NINJA, pos, radius)
        pygame.draw.circle(self.surface, COLOR_NINJA_OUTLINE, pos, radius, 2)

    def draw_visibility(self, center: tuple[float, float], diameter: float) -> None:
        overlay = self._overlay
        overlay.fill(COLOR_FOG)
        pos = _ipos(center)
        radius = diameter / 2
        # soft edge: rings of decreasing darkness toward the clear centre
        steps = 8
        for i in range(steps, -1, -1):
            ring = radius + FOG_EDGE * (i / steps * 2 - 1)
            if ring <= 0:
                continue
            alpha = int(COLOR_FOG[3] * i / steps)
            pygame.draw.circle(overlay, (0, 0, 0, alpha), pos, int(ring))
        self.surface.blit(overlay, (0, 0))

    def draw_combo_selection(self, body: Body, combo: ComboPath) -> None:
        overlay = self._overlay
        overlay.fill(COLOR_SELECT_DIM)
        if combo.points:
            trail = [_ipos(body.position)] + [_ipos(p) for p in combo.points]
            pygame.draw.lines(overlay, COLOR_POINT_FILL, False, trail, 3)
        for p in combo.points:
            pygame.draw.circle(overlay, COLOR_POINT_FILL, _ipos(p), 15)
        self.surface.blit(overlay, (0, 0))

        for i, p in enumerate(combo.points, start=1):
            pygame.draw.circle(self.surface, COLOR_POINT_EDGE, _ipos(p), 15, 2)
            label = self.font.render(str(i), True, (255, 255, 255))
            self.surface.blit(label, label.get_rect(center=_ipos(p)))

        remaining = self.config.combo_max_points - len(combo.points)
        banner = self.big_font.render(
            f"Select {remaining} more point(s) - {combo.countdown:.1f}s", True, COLOR_POINT_EDGE
        )
        self.surface.blit(banner, banner.get_rect(center=(int(self.config.canvas_width / 2), 30)))
