"""Tests for remote/keyboard action mapping and held-direction repeat."""

import os
import sys

import pygame

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv.constants import (
    NAVIGATION_INITIAL_DELAY,
    NAVIGATION_MAX_RATE,
    NAVIGATION_START_RATE,
)
from jetcaster_tv.input import navigation as navigation_module
from jetcaster_tv.input.controller import ControllerHandler
from jetcaster_tv.input.navigation import NavigationHandler


class FakeKeys:
    def __init__(self, pressed):
        self.pressed = pressed

    def __getitem__(self, key):
        return key in self.pressed


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def test_keyboard_defaults():
    controller = ControllerHandler()
    assert controller.get_action_for_event(key(pygame.K_RETURN)) == "select"
    assert controller.get_action_for_event(key(pygame.K_KP_ENTER)) == "select"
    assert controller.get_action_for_event(key(pygame.K_ESCAPE)) == "back"
    assert controller.get_action_for_event(key(pygame.K_BACKSPACE)) == "back"
    assert controller.get_action_for_event(key(pygame.K_LEFT)) == "left"
    assert controller.get_action_for_event(key(pygame.K_TAB)) == "menu"
    assert controller.get_action_for_event(key(pygame.K_z)) is None


def test_hat_directions_work_without_mapping():
    controller = ControllerHandler()
    event = pygame.event.Event(pygame.JOYHATMOTION, value=(0, -1))
    assert controller.get_action_for_event(event) == "down"
    centered = pygame.event.Event(pygame.JOYHATMOTION, value=(0, 0))
    assert controller.get_action_for_event(centered) is None


def test_mapped_buttons_and_hats():
    controller = ControllerHandler({"select": 0, "back": 1, "menu": 7, "up": ("hat", 0, 1)})
    press = lambda b: pygame.event.Event(pygame.JOYBUTTONDOWN, button=b)  # noqa: E731
    assert controller.get_action_for_event(press(0)) == "select"
    assert controller.get_action_for_event(press(1)) == "back"
    assert controller.get_action_for_event(press(7)) == "menu"
    assert controller.get_action_for_event(press(3)) is None
    hat_up = pygame.event.Event(pygame.JOYHATMOTION, value=(0, 1))
    assert controller.get_action_for_event(hat_up) == "up"
    assert controller.unmapped_actions() == ["down", "left", "right"]


def test_held_direction_repeats_with_acceleration(monkeypatch):
    monkeypatch.setattr(
        navigation_module.pygame.key, "get_pressed", lambda: FakeKeys({pygame.K_RIGHT})
    )
    handler = NavigationHandler()
    handler.update(now=1000)
    assert handler.is_held("right")
    assert not handler.should_repeat("right", now=1000 + NAVIGATION_INITIAL_DELAY - 1)

    # first repeat after the initial delay
    t = 1000 + NAVIGATION_INITIAL_DELAY + NAVIGATION_START_RATE
    assert handler.should_repeat("right", now=t)
    assert not handler.should_repeat("right", now=t + 1)

    # intervals shrink but never below the max rate
    intervals = []
    for _ in range(40):
        step = 0
        while not handler.should_repeat("right", now=t + step):
            step += 1
        intervals.append(step)
        t += step
    assert intervals[0] < NAVIGATION_START_RATE
    assert intervals == sorted(intervals, reverse=True)
    assert intervals[-1] == NAVIGATION_MAX_RATE


def test_release_resets(monkeypatch):
    pressed = {pygame.K_UP}
    monkeypatch.setattr(navigation_module.pygame.key, "get_pressed", lambda: FakeKeys(pressed))
    handler = NavigationHandler()
    handler.update(now=0)
    pressed.clear()
    handler.update(now=10)
    assert not handler.is_held("up")
    assert not handler.should_repeat("up", now=10_000)


def test_handle_continuous_one_direction_per_frame(monkeypatch):
    monkeypatch.setattr(
        navigation_module.pygame.key,
        "get_pressed",
        lambda: FakeKeys({pygame.K_UP, pygame.K_LEFT}),
    )
    handler = NavigationHandler()
    handler.update(now=0)
    moves = []
    handler.handle_continuous(moves.append, now=NAVIGATION_INITIAL_DELAY + NAVIGATION_START_RATE)
    assert moves == ["up"]
