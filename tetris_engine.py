
"""Game engine: a pure reducer over immutable game state.

Every action takes a ``GameState`` and returns a new one. Blocked moves,
rotations and swaps return the state unchanged, and once ``game_over`` is
set every action is a no-op. Randomness (next piece, color, spawn
rotations) comes from an injected source with a single ``pick`` method,
see ``tetris_rng``.

Lock sequence, run when a downward step collides:

    merge -> sweep -> score -> spawn next -> game-over check

It completes inside one call, so no caller ever sees a merged board with
the old piece still active.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Mapping, Optional

from tetris_board import Board, collide, drop_y, empty_board, merge, sweep
from tetris_config import CONFIG
from tetris_piece import COLORS, PIECES, SHAPES, Piece, Shape, COLS, ROWS

log = logging.getLogger(__name__)

SCORE_MODES = ("row", "clear")
GHOST = "ghost"


class Action(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    ROTATE = "rotate"
    SWAP = "swap"


@dataclass(frozen=True)
class Rules:
    """Gameplay policies that differ between variants of the game."""
    rotate_cw: bool = True
    hard_drop_locks: bool = False
    spawn_rotations: bool = True
    score_mode: str = "row"      # "row": line_score per row, "clear": flat per clearing lock
    line_score: int = 100

    def __post_init__(self):
        if self.score_mode not in SCORE_MODES:
            raise ValueError(f"unknown score mode {self.score_mode!r}, expected one of {SCORE_MODES}")

    @staticmethod
    def from_config(config: Mapping = CONFIG) -> "Rules":
        return Rules(
            rotate_cw=bool(config["ROTATE_CW"]),
            hard_drop_locks=bool(config["HARD_DROP_LOCKS"]),
            spawn_rotations=bool(config["SPAWN_ROTATIONS"]),
            score_mode=config["SCORE_MODE"],
            line_score=int(config["LINE_SCORE"]),
        )

    def award(self, cleared: int) -> int:
        if not cleared:
            return 0
        if self.score_mode == "row":
            return self.line_score * cleared
        return self.line_score


@dataclass(frozen=True)
class GameState:
    board: Board
    current: Piece
    next_t: str
    next_color: str
    score: int = 0
    lines: int = 0
    game_over: bool = False

    @property
    def next_shape(self) -> Shape:
        return SHAPES[self.next_t]


# -------------------------------------------------------------
# Spawn / game over
# -------------------------------------------------------------

def _pick_next(rng):
    return rng.pick(PIECES), rng.pick(COLORS)


def _enter(state: GameState, piece: Piece, rng, rules: Rules) -> GameState:
    """Place a freshly spawned piece, pre-rotate it and test for top-out."""
    if rules.spawn_rotations:
        for _ in range(rng.pick(range(4))):
            turned = piece.rotated(rules.rotate_cw)
            if not collide(state.board, turned):
                piece = turned
    over = collide(state.board, piece)
    if over:
        log.info("game over: %s blocked at spawn, score %d, lines %d",
                 piece.t, state.score, state.lines)
    return replace(state, current=piece, game_over=over)


def new_game(rng, rules: Optional[Rules] = None) -> GameState:
    rules = rules or Rules()
    t, color = _pick_next(rng)
    next_t, next_color = _pick_next(rng)
    state = GameState(empty_board(), Piece.spawn(t, color), next_t, next_color)
    log.info("new game: %s, next %s", t, next_t)
    return _enter(state, state.current, rng, rules)


def spawn_next(state: GameState, rng, rules: Rules) -> GameState:
    """Promote the preview piece to active and roll a new preview."""
    piece = Piece.spawn(state.next_t, state.next_color)
    next_t, next_color = _pick_next(rng)
    state = replace(state, next_t=next_t, next_color=next_color)
    return _enter(state, piece, rng, rules)


# -------------------------------------------------------------
# Lock / line clear
# -------------------------------------------------------------

def lock(state: GameState, rng, rules: Rules) -> GameState:
    board, cleared = sweep(merge(state.board, state.current))
    gained = rules.award(cleared)
    log.debug("locked %s at (%d,%d)", state.current.t, state.current.x, state.current.y)
    if cleared:
        log.debug("cleared %d row(s), +%d", cleared, gained)
    state = replace(state, board=board, score=state.score + gained,
                    lines=state.lines + cleared)
    return spawn_next(state, rng, rules)


# -------------------------------------------------------------
# Active piece controller
# -------------------------------------------------------------

def _try(state: GameState, piece: Piece) -> GameState:
    if collide(state.board, piece):
        return state
    return replace(state, current=piece)


def move(state: GameState, direction: int) -> GameState:
    if state.game_over:
        return state
    return _try(state, state.current.moved(dx=direction))


def rotate(state: GameState, rules: Rules) -> GameState:
    """Naive rotation about the top-left anchor, no wall kicks."""
    if state.game_over:
        return state
    return _try(state, state.current.rotated(rules.rotate_cw))


def soft_drop(state: GameState, rng, rules: Rules) -> GameState:
    if state.game_over:
        return state
    down = state.current.moved(dy=1)
    if collide(state.board, down):
        return lock(state, rng, rules)
    return replace(state, current=down)


def hard_drop(state: GameState, rng, rules: Rules) -> GameState:
    if state.game_over:
        return state
    landed = ghost(state)
    state = replace(state, current=landed)
    if rules.hard_drop_locks:
        return lock(state, rng, rules)
    return state


def swap(state: GameState) -> GameState:
    """Exchange active and preview pieces; the new active piece restarts at spawn."""
    if state.game_over:
        return state
    cur = state.current
    piece = Piece.spawn(state.next_t, state.next_color)
    # rejected like any blocked move; swapping into a collision would overlap the stack
    if collide(state.board, piece):
        return state
    return replace(state, current=piece, next_t=cur.t, next_color=cur.color)


def ghost(state: GameState) -> Piece:
    cur = state.current
    return replace(cur, y=drop_y(state.board, cur))


# -------------------------------------------------------------
# Reducer
# -------------------------------------------------------------

def reduce(state: GameState, action: Action, rng, rules: Rules) -> GameState:
    if state.game_over:
        return state
    if action is Action.MOVE_LEFT:
        return move(state, -1)
    if action is Action.MOVE_RIGHT:
        return move(state, 1)
    if action is Action.SOFT_DROP:
        return soft_drop(state, rng, rules)
    if action is Action.HARD_DROP:
        return hard_drop(state, rng, rules)
    if action is Action.ROTATE:
        return rotate(state, rules)
    if action is Action.SWAP:
        return swap(state)
    raise ValueError(f"unknown action {action!r}")


def tick(state: GameState, rng, rules: Rules) -> GameState:
    return reduce(state, Action.SOFT_DROP, rng, rules)


def compose(state: GameState, with_ghost: bool = True) -> List[List[Optional[str]]]:
    """Board rows with the ghost and the active piece drawn in, for grid renderers."""
    grid = [list(r) for r in state.board]
    overlays = [(ghost(state), GHOST)] if with_ghost else []
    overlays.append((state.current, state.current.color))
    for piece, value in overlays:
        for x, y in piece.cells():
            if 0 <= y < ROWS and 0 <= x < COLS:
                grid[y][x] = value
    return grid


class Game:
    """Holds the current state together with its random source and rules."""
    def __init__(self, rng, rules: Optional[Rules] = None):
        self.rng = rng
        self.rules = rules or Rules()
        self.state = new_game(rng, self.rules)

    @property
    def over(self) -> bool:
        return self.state.game_over

    def dispatch(self, action: Action) -> GameState:
        self.state = reduce(self.state, action, self.rng, self.rules)
        return self.state

    def tick(self) -> GameState:
        self.state = tick(self.state, self.rng, self.rules)
        return self.state
