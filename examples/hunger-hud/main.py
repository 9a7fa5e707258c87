"""Hunger HUD: live view of a tick-hunger system.

The save file persists between runs, so closing the window and coming back
later shows offline decay.

Controls:
  E       Eat (+60 s)
  R       Reset to full
  Space   Pause / resume decay
  1-4     Simulation speed (1x, 2x, 5x, 10x)
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_hunger import (
    SEVERITY_CHANGED,
    STARVATION_TICK,
    HungerSystem,
    JsonFileStore,
    configure_logging,
    default_store_path,
    load_config,
    severity_pitch,
)

from ui.constants import (
    BG_COLOR,
    EAT_SECONDS,
    FLASH_SECONDS,
    FPS,
    SCREEN_H,
    SCREEN_W,
    SPEEDS,
    TPS,
)
from ui.hud import draw_panel, draw_plate, draw_status_bar

logger = logging.getLogger(__name__)


class HudState:
    """Owns the hunger system and the demo's view state."""

    def __init__(self, config_path: str | None = None) -> None:
        self.system = HungerSystem(
            load_config(config_path), JsonFileStore(default_store_path())
        )
        self.speed = SPEEDS[0]
        self.paused = False
        self.flash = 0.0
        self.tick_count = 0
        self.pitch_target = 1.0

        self.system.bus.subscribe(STARVATION_TICK, self._on_starvation_tick)
        self.system.bus.subscribe(SEVERITY_CHANGED, self._on_severity_changed)
        result = self.system.start()
        logger.info("Hunger HUD started (%s)", result.case.value)

    def _on_starvation_tick(self, signal: str, data: dict) -> None:
        self.tick_count += 1
        self.flash = FLASH_SECONDS

    def _on_severity_changed(self, signal: str, data: dict) -> None:
        self.pitch_target = severity_pitch(data["severity"], self.system.config)
        pygame.display.set_caption(f"Hunger HUD - {data['severity'].label}")

    def step(self, dt: float) -> None:
        if not self.paused:
            self.system.step(dt * self.speed)


def main() -> None:
    configure_logging()
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Hunger HUD")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 15)

    state = HudState(sys.argv[1] if len(sys.argv) > 1 else None)

    tick_interval = 1.0 / TPS
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt
        state.flash = max(0.0, state.flash - dt)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_e:
                    state.system.add_time(EAT_SECONDS)
                elif event.key == pygame.K_r:
                    state.system.reset_to_full()
                elif event.key == pygame.K_SPACE:
                    state.paused = not state.paused
                elif event.key == pygame.K_1:
                    state.speed = SPEEDS[0]
                elif event.key == pygame.K_2:
                    state.speed = SPEEDS[1]
                elif event.key == pygame.K_3:
                    state.speed = SPEEDS[2]
                elif event.key == pygame.K_4:
                    state.speed = SPEEDS[3]

        # --- Tick ---
        while accumulator >= tick_interval:
            state.step(tick_interval)
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_plate(screen, font, state.system, state.flash / FLASH_SECONDS)
        draw_panel(
            screen,
            font,
            state.system,
            speed=state.speed,
            paused=state.paused,
            tick_count=state.tick_count,
            pitch_target=state.pitch_target,
        )
        draw_status_bar(screen, font)

        pygame.display.flip()

    state.system.shutdown()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
