"""Tests for the session state machine."""

import random

from pacmaze.config.settings import GameSettings
from pacmaze.controller.game_controller import GameController, GameState
from pacmaze.model.cell import Direction
from pacmaze.service.game_event_service import GameEventType

from conftest import parse

SMALL = ("monsters: 0", "OOOOO", "O---O", "OOOOO")


def make_controller(*levels, clock, **overrides):
    settings = GameSettings(random_player_spawn=False, **overrides)
    return GameController(list(levels), settings=settings, rng=random.Random(0), clock=clock)


def test_countdown_before_playing(clock):
    controller = make_controller(parse(*SMALL), clock=clock)
    assert controller.state == GameState.LEVEL_START
    assert controller.countdown_remaining() == 3

    clock.advance(1.2)
    controller.tick()
    assert controller.state == GameState.LEVEL_START
    assert controller.countdown_remaining() == 2
    assert controller.game.player.position == (1, 1)

    clock.advance(2.0)
    controller.tick()
    assert controller.state == GameState.PLAYING
    assert controller.countdown_remaining() == 0
    # No game step on the transition tick
    assert controller.game.player.position == (1, 1)

    controller.tick()
    assert controller.game.player.position == (2, 1)


def test_directions_are_buffered_during_countdown(clock):
    controller = make_controller(parse("monsters: 0", "OOOO", "O--O", "O--O", "OOOO"), clock=clock)
    controller.handle_input("s")
    assert controller.game.player.desired == Direction.DOWN

    clock.advance(3.0)
    controller.tick()
    controller.tick()
    assert controller.game.player.position == (1, 2)


def test_level_progression_and_win(clock):
    controller = make_controller(parse(*SMALL), parse(*SMALL), clock=clock, countdown_seconds=0.0)
    won = []
    controller.event_service.add_listener(GameEventType.GAME_WON, won.append)

    controller.tick()
    assert controller.state == GameState.PLAYING
    controller.tick()
    controller.tick()
    assert controller.state == GameState.LEVEL_COMPLETE

    controller.tick()
    controller.tick()
    assert controller.state == GameState.LEVEL_COMPLETE
    assert controller.game.current_level == 0

    controller.tick()
    assert controller.state == GameState.LEVEL_START
    assert controller.game.current_level == 1
    assert controller.game.score == 20

    controller.tick()
    controller.tick()
    controller.tick()
    assert controller.state == GameState.WON
    assert controller.is_finished()
    assert len(won) == 1
    assert controller.stats.levels_completed == 2

    controller.tick()
    assert controller.state == GameState.WON
    assert len(won) == 1


def test_game_over_when_lives_run_out(clock):
    level_map = parse("playerStart: 1,1", "monsterStarts: 2,1", "OOOOO", "O---O", "OOOOO")
    controller = make_controller(level_map, clock=clock, countdown_seconds=0.0, lives=1)

    controller.tick()
    controller.tick()

    assert controller.state == GameState.GAME_OVER
    assert controller.is_finished()
    assert controller.view_state().lives == 0


def test_life_lost_keeps_playing(clock):
    level_map = parse("playerStart: 1,1", "monsterStarts: 2,1", "OOOOO", "O---O", "OOOOO")
    controller = make_controller(level_map, clock=clock, countdown_seconds=0.0)

    controller.tick()
    controller.tick()

    view = controller.view_state()
    assert controller.state == GameState.PLAYING
    assert view.life_lost
    assert view.lives == 2
    assert controller.stats.lives_lost == 1
    assert controller.countdown_remaining() == 0


def test_quit_is_always_honoured(clock):
    controller = make_controller(parse(*SMALL), clock=clock)
    controller.handle_input("quit")
    assert controller.state == GameState.GAME_OVER


def test_directions_ignored_after_game_end(clock):
    controller = make_controller(parse(*SMALL), clock=clock)
    controller.handle_input("q")
    controller.handle_input("s")
    assert controller.game.player.desired == Direction.RIGHT


def test_restart_restores_pristine_levels(clock):
    controller = make_controller(parse(*SMALL), clock=clock, countdown_seconds=0.0)
    for _ in range(3):
        controller.tick()
    assert controller.state == GameState.WON
    assert controller.stats.dots_eaten == 2

    controller.restart()

    assert controller.state == GameState.LEVEL_START
    assert controller.game.score == 0
    assert controller.game.lives == 3
    assert controller.game.current().count_dots() == 2
    assert controller.stats.dots_eaten == 0


def test_view_state_snapshot(clock):
    controller = make_controller(
        parse("name: Demo", "material: hedge", *SMALL), parse(*SMALL), clock=clock
    )
    view = controller.view_state()

    assert (view.width, view.height) == (5, 3)
    assert view.name == "Demo"
    assert view.material == "hedge"
    assert view.player.position == (1, 1)
    assert view.player.direction == Direction.RIGHT
    assert view.monsters == ()
    assert view.level_index == 0
    assert view.level_count == 2
    assert view.dots_left == 2
    assert view.state == GameState.LEVEL_START
    assert view.countdown == 3
