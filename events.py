# ---------------------- Input events ----------------------
from dataclasses import dataclass

import pygame

from config import FPS


@dataclass(frozen=True)
class PointerEvent:
    x: float
    y: float


@dataclass(frozen=True)
class TickEvent:
    dt: float  # milliseconds since the previous tick


@dataclass(frozen=True)
class QuitEvent:
    pass


def pygame_events(clock=None, fps=FPS):
    """Yield pointer, tick and quit events from the pygame event queue.

    Each frame yields the clicks received since the last frame, then one
    TickEvent carrying the wall-time elapsed since the previous one.
    """
    clock = clock or pygame.time.Clock()
    clock.tick(fps)
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                yield QuitEvent()
                return
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                yield QuitEvent()
                return
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                x, y = event.pos
                yield PointerEvent(x, y)
        yield TickEvent(clock.tick(fps))
