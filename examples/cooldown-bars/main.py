"""Cooldown Bars — ability cooldowns, a stamina meter and a pulse.

Exercises tick-progress: CountdownTimer under each normalization policy,
ChargeMeter with passive decay, and a timer routine driven once per frame.

Controls:
  1-3     Use ability (starts its cooldown when ready)
  Space   Charge stamina
  F       Finish every cooldown immediately
  R       Restart every bar
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_progress import ChargeMeter, CountdownTimer, default_clock

from ui.bars import draw_bar, draw_status_bar
from ui.constants import (
    ABILITIES,
    BG_COLOR,
    FPS,
    PULSE_COLOR,
    PULSE_PERIOD,
    SCREEN_H,
    SCREEN_W,
    STAMINA_CAPACITY,
    STAMINA_CHARGE,
    STAMINA_COLOR,
    STAMINA_DECAY,
)

logger = logging.getLogger("cooldown-bars")


class GameState:
    """Holds every bar shown on screen."""

    def __init__(self) -> None:
        self.cooldowns = [
            (name, CountdownTimer.finished(), duration, normalization, color)
            for name, duration, normalization, color in ABILITIES
        ]
        self.stamina = ChargeMeter(STAMINA_CAPACITY, decay_rate=STAMINA_DECAY)
        self.pulse = CountdownTimer.create(PULSE_PERIOD)
        self.pulse_count = 0
        self._pulse_routine = self.pulse.until_complete(self._on_pulse)

    def use_ability(self, index: int) -> None:
        name, timer, duration, normalization, color = self.cooldowns[index]
        if not timer.is_complete():
            logger.info("%s still cooling down (%.0f%%)", name, timer.progress() * 100)
            return
        fresh = CountdownTimer.create(duration, normalization=normalization)
        self.cooldowns[index] = (name, fresh, duration, normalization, color)
        logger.info("%s used", name)

    def finish_all(self) -> None:
        for _name, timer, *_rest in self.cooldowns:
            timer.finish()

    def restart_all(self) -> None:
        for _name, timer, *_rest in self.cooldowns:
            timer.restart()
        self.stamina.restart()

    def _on_pulse(self) -> None:
        self.pulse_count += 1

    def step(self) -> None:
        """Resume the pulse routine; start a new lap when it finishes."""
        try:
            next(self._pulse_routine)
        except StopIteration:
            self._pulse_routine = self.pulse.until_complete(self._on_pulse)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Cooldown Bars — tick-progress demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GameState()
    running = True

    while running:
        clock.tick(FPS)
        default_clock.tick()

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_1:
                    state.use_ability(0)
                elif event.key == pygame.K_2:
                    state.use_ability(1)
                elif event.key == pygame.K_3:
                    state.use_ability(2)
                elif event.key == pygame.K_SPACE:
                    state.stamina.charge(STAMINA_CHARGE)
                elif event.key == pygame.K_f:
                    state.finish_all()
                elif event.key == pygame.K_r:
                    state.restart_all()

        state.step()

        # --- Render ---
        screen.fill(BG_COLOR)

        for row, (name, timer, _duration, _normalization, color) in enumerate(state.cooldowns):
            draw_bar(screen, font, row, name, timer, color)
        draw_bar(screen, font, len(state.cooldowns), "Stamina", state.stamina, STAMINA_COLOR)
        draw_bar(
            screen,
            font,
            len(state.cooldowns) + 1,
            f"Pulse x{state.pulse_count}",
            state.pulse,
            PULSE_COLOR,
            fill=state.pulse.midway(),
        )
        draw_status_bar(screen, font, default_clock.frame)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
