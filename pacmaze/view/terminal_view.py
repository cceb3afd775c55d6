"""
Terminal (ANSI) front-end.
Girdi ayrı bir daemon thread'de stdin satırlarından okunur; ana thread sabit
aralıkla tick atar ve ekranı yeniden çizer.
"""
from __future__ import annotations

import logging
import sys
import threading
import time
from typing import Callable, Optional, TextIO

from pacmaze.controller.game_controller import GameController, GameState
from pacmaze.model.cell import Cell

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[2J"
RESET = "\033[0m"
YELLOW = "\033[33m"
RED = "\033[31m"
BLUE = "\033[34m"

PLAYER_GLYPH = "C"
MONSTER_GLYPH = "M"
WALL_GLYPH = "O"
DOT_GLYPH = "·"
CONTROLS_LINE = "Controls: w/a/s/d + Enter to move, q to quit"


class AnsiRenderer:
    """GameViewState'i tek bir ANSI metnine çevirir."""

    def __init__(self, use_color: bool = True, clear: bool = True) -> None:
        self._use_color = use_color
        self._clear = clear

    def _paint(self, glyph: str, color: str) -> str:
        if not self._use_color:
            return glyph
        return f"{color}{glyph}{RESET}"

    def render(self, view: GameController.GameViewState) -> str:
        monster_cells = {monster.position for monster in view.monsters}
        lines: list[str] = []
        for y, row in enumerate(view.cells):
            chars = []
            for x, cell in enumerate(row):
                if (x, y) in monster_cells:
                    chars.append(self._paint(MONSTER_GLYPH, RED))
                elif (x, y) == view.player.position:
                    chars.append(self._paint(PLAYER_GLYPH, YELLOW))
                elif cell == Cell.WALL:
                    chars.append(self._paint(WALL_GLYPH, BLUE))
                elif cell == Cell.DOT:
                    chars.append(DOT_GLYPH)
                else:
                    chars.append(" ")
            lines.append("".join(chars))

        lines.append(self.status_line(view))
        lines.append(CONTROLS_LINE)
        text = "\n".join(lines) + "\n"
        return CLEAR_SCREEN + text if self._clear else text

    @staticmethod
    def status_line(view: GameController.GameViewState) -> str:
        status = (
            f"Level {view.level_index + 1}/{view.level_count}"
            f"  Score: {view.score}  Lives: {view.lives}  Dots: {view.dots_left}"
        )
        if view.state == GameState.LEVEL_START and view.countdown > 0:
            status += f"  Starting in {view.countdown}..."
        elif view.state == GameState.LEVEL_COMPLETE:
            status += "  LEVEL COMPLETE"
        elif view.state == GameState.GAME_OVER:
            status += "  GAME OVER"
        elif view.state == GameState.WON:
            status += "  YOU WON!"
        return status


class TerminalRunner:
    """Tick döngüsü + stdin okuyucu thread."""

    def __init__(
        self,
        controller: GameController,
        renderer: Optional[AnsiRenderer] = None,
        input_stream: Optional[TextIO] = None,
        output: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._controller = controller
        self._renderer = renderer or AnsiRenderer()
        self._input = input_stream if input_stream is not None else sys.stdin
        self._output = output if output is not None else sys.stdout
        self._sleep = sleep
        # Girdi thread'i ile tick döngüsü controller'a aynı anda dokunmasın
        self._lock = threading.Lock()

    def read_input(self, stream: TextIO) -> None:
        """Satırları token'lara bölüp controller'a iletir (EOF'ta döner)."""
        for line in stream:
            for token in line.split():
                with self._lock:
                    self._controller.handle_input(token)
                    if self._controller.is_finished():
                        return

    def start_input_thread(self) -> threading.Thread:
        thread = threading.Thread(
            target=self.read_input, args=(self._input,), name="stdin-reader", daemon=True
        )
        thread.start()
        return thread

    def draw(self) -> None:
        with self._lock:
            view = self._controller.view_state()
        self._output.write(self._renderer.render(view))
        self._output.flush()

    def run(self) -> None:
        """Oyun bitene kadar tick atar; son durumu çizip döner."""
        self.start_input_thread()
        interval = self._controller.settings.tick_interval
        logger.info("Terminal front-end started")

        while True:
            with self._lock:
                if self._controller.is_finished():
                    break
                self._controller.tick()
            self.draw()
            self._sleep(interval)

        self.draw()
        logger.info(f"Terminal front-end finished ({self._controller.state.name})")
