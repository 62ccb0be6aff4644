"""World of Bits — collect and craft tokens on an endless grid with pygame.

Controls:
  Arrow keys  Move the player one cell
  W/A/S/D     Pan the view without moving
  C           Recenter the view on the player
  Left-click  Pick up a token, or craft onto a matching one
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from bitgrid import MEMORYLESS, PERSISTENT, GameSession, SessionConfig
from ui.camera import Camera
from ui.constants import CELL_PX, COLOR_BG, COLS, FPS, MAP_H, ROWS, SCREEN_H, SCREEN_W
from ui.hud import Hud
from ui.renderer import PygameRenderer

MOVE_KEYS = {
    pygame.K_UP: "north",
    pygame.K_DOWN: "south",
    pygame.K_LEFT: "west",
    pygame.K_RIGHT: "east",
}

PAN_KEYS = {
    pygame.K_w: (1, 0),
    pygame.K_s: (-1, 0),
    pygame.K_a: (0, -1),
    pygame.K_d: (0, 1),
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="World of Bits — bitgrid visual demo")
    p.add_argument("--policy", choices=(PERSISTENT, MEMORYLESS), default=PERSISTENT,
                   help="What happens to cells that leave the view (default: persistent)")
    p.add_argument("--radius", type=int, default=3, help="Interaction radius (default: 3)")
    p.add_argument("--victory", type=int, default=8, help="Token value that wins (default: 8)")
    p.add_argument("--verbose", "-v", action="store_true", help="Log every cell event")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    camera = Camera(COLS, ROWS, CELL_PX)
    renderer = PygameRenderer(camera)
    config = SessionConfig(
        interaction_radius=args.radius,
        victory_value=args.victory,
        policy=args.policy,
        view_radius=max(COLS, ROWS) // 2,
    )
    session = GameSession(config=config, renderer=renderer)
    hud = Hud(session.bus)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("World of Bits")
    clock = pygame.time.Clock()

    session.start()
    session.set_window(camera.window())

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in MOVE_KEYS:
                    session.move_direction(MOVE_KEYS[event.key])
                elif event.key in PAN_KEYS:
                    camera.pan(*PAN_KEYS[event.key])
                    session.set_window(camera.window())
                elif event.key == pygame.K_c:
                    camera.focus = session.position
                    session.set_window(camera.window())

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if my < MAP_H:
                    session.click(camera.cell_at(mx, my))

        # --- Render ---
        screen.fill(COLOR_BG)
        renderer.draw(screen, session)
        hud.draw(screen)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
