"""Dojo: deflect shuriken, grab sushi, chain combos.

Controls:
  Left-click  Move (within range) / tap the glowing ninja to start a combo
              / place combo points while time is slowed
  Space       Start or restart
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_dojo import DojoConfig, Phase, Session
from ui.constants import FPS, HUD_H
from ui.hud import HUD, draw_banner
from ui.renderer import PygameRenderer

TITLE = "Dojo - tick-dojo demo"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Dojo - tick-dojo visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--fps", type=int, default=FPS, help=f"Frame rate cap (default: {FPS})")
    p.add_argument("--scale", type=float, default=1.0, help="Window scale factor (0.5-3, default: 1)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    args = p.parse_args()
    args.fps = max(10, min(240, args.fps))
    args.scale = max(0.5, min(3.0, args.scale))
    return args


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    config = DojoConfig()
    canvas_w, canvas_h = int(config.canvas_width), int(config.canvas_height)
    view_w, view_h = int(canvas_w * args.scale), int(canvas_h * args.scale)

    screen = pygame.display.set_mode((view_w, view_h + HUD_H))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()
    canvas = pygame.Surface((canvas_w, canvas_h))

    hud = HUD(config.sushi_cap)
    session = Session(config=config, seed=args.seed, ui=hud)
    renderer = PygameRenderer(canvas, config)
    view = pygame.Rect(0, HUD_H, view_w, view_h)

    def restart() -> None:
        hud.reset()
        session.start()

    running = True
    while running:
        dt = clock.tick(args.fps) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE and session.state.phase in (Phase.IDLE, Phase.OVER):
                    restart()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if session.state.phase in (Phase.IDLE, Phase.OVER):
                    restart()
                elif view.collidepoint(event.pos):
                    mx, my = event.pos
                    session.pointer_input(mx / args.scale, (my - HUD_H) / args.scale)

        # --- Update ---
        session.frame(dt)

        # --- Draw ---
        session.present(renderer)
        if args.scale != 1.0:
            screen.blit(pygame.transform.smoothscale(canvas, (view_w, view_h)), view.topleft)
        else:
            screen.blit(canvas, view.topleft)
        hud.draw(screen)

        phase = session.state.phase
        if phase is Phase.IDLE:
            draw_banner(screen, view, "DOJO", ["Click or press Space to start"])
        elif phase is Phase.OVER and hud.final is not None:
            score, text = hud.final
            draw_banner(
                screen, view, "GAME OVER",
                [f"Score: {score}   Time: {text}", "Click or press Space to play again"],
            )

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
