"""
Oyunu başlatmak için giriş noktası.
Varsayılan olarak pygame penceresi açılır; --terminal ile ANSI front-end kullanılır.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

from pacmaze.config.settings import GameSettings
from pacmaze.controller.game_controller import GameController
from pacmaze.model.errors import MapError
from pacmaze.service.level_service import LevelService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pacmaze", description="Grid maze game: eat every dot, avoid the monsters.")
    parser.add_argument("map_file", nargs="?", default=None, help="map file (default: maps/maps.txt)")
    parser.add_argument("--terminal", action="store_true", help="play in the terminal instead of a pygame window")
    parser.add_argument("--tick-ms", type=int, default=None, help="simulation tick in milliseconds")
    parser.add_argument("--lives", type=int, default=None, help="starting lives")
    parser.add_argument("--seed", type=int, default=None, help="random seed for spawn placement")
    parser.add_argument("--no-monsters", action="store_true", help="play without monsters")
    parser.add_argument("--block-size", type=int, default=None, help="pygame cell size in pixels")
    parser.add_argument("--log-level", default="INFO", help="logging level (DEBUG, INFO, ...)")
    return parser


def settings_from_args(args: argparse.Namespace, base: Optional[GameSettings] = None) -> GameSettings:
    """Ortam ayarlarının üzerine CLI parametrelerini uygular."""
    settings = base or GameSettings.from_env()
    return settings.with_overrides(
        tick_interval=args.tick_ms / 1000.0 if args.tick_ms else None,
        lives=args.lives,
        disable_monsters=True if args.no_monsters else None,
        block_size=args.block_size,
    )


def _run_pygame(controller: GameController, settings: GameSettings) -> None:
    from pacmaze.view.game_scene import GameScene
    from pacmaze.view.pygame_view import PygameView, ViewConfig

    scene = GameScene(controller, block_size=settings.block_size)
    width, height = scene.preferred_size()
    view = PygameView(ViewConfig(width=width, height=height))
    view.initialize()
    try:
        view.render(scene)
    finally:
        view.shutdown()


def _run_terminal(controller: GameController) -> None:
    from pacmaze.view.terminal_view import TerminalRunner

    TerminalRunner(controller).run()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Logging ayarları
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = settings_from_args(args)
        levels = LevelService().load_levels(args.map_file)
    except (MapError, ValueError) as exc:
        logger.error(f"Failed to start: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    rng = random.Random(args.seed)
    controller = GameController(levels, settings=settings, rng=rng)

    if args.terminal:
        _run_terminal(controller)
    else:
        _run_pygame(controller, settings)

    logger.info(f"Final score: {controller.game.score} ({controller.stats.summary()})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
