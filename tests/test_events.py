import pygame
import pytest

from events import PointerEvent, QuitEvent, TickEvent, pygame_events


class FakeClock:
    def __init__(self, dt=16):
        self.dt = dt

    def tick(self, fps):
        return self.dt


@pytest.fixture
def event_queue():
    pygame.display.init()
    pygame.event.clear()
    yield
    pygame.display.quit()


def take(gen, n):
    return [next(gen) for _ in range(n)]


def test_clicks_then_tick(event_queue):
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(12, 34)))
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(1, 1)))
    events = take(pygame_events(FakeClock(16)), 2)
    assert events == [PointerEvent(12, 34), TickEvent(16)]


def test_quit_ends_the_stream(event_queue):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    assert list(pygame_events(FakeClock())) == [QuitEvent()]


def test_idle_frames_still_tick(event_queue):
    events = take(pygame_events(FakeClock(20)), 3)
    assert events == [TickEvent(20)] * 3
