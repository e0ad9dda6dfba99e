
"""Key map and scoped drop-timer / key-listener resources"""
from contextlib import contextmanager
from typing import Dict, Optional
import pygame
from tetris_config import CONFIG
from tetris_engine import Action

DROP_EVENT = pygame.USEREVENT + 1

KEYMAP: Dict[int, Action] = {
    pygame.K_a: Action.MOVE_LEFT,
    pygame.K_d: Action.MOVE_RIGHT,
    pygame.K_s: Action.SOFT_DROP,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_w: Action.ROTATE,
    pygame.K_q: Action.SWAP,
}

def action_for(key: int) -> Optional[Action]:
    return KEYMAP.get(key)

@contextmanager
def drop_timer(interval_ms: Optional[int] = None, event_type: int = DROP_EVENT):
    """Post event_type every interval_ms while the block runs; always cancelled on exit."""
    if interval_ms is None:
        interval_ms = int(CONFIG["TICK_MS"])
    pygame.event.set_allowed(event_type)
    pygame.time.set_timer(event_type, interval_ms)
    try:
        yield event_type
    finally:
        pygame.time.set_timer(event_type, 0)
        pygame.event.clear(event_type)

@contextmanager
def key_listener():
    """Let KEYDOWN events through only while the block runs."""
    pygame.event.set_allowed(pygame.KEYDOWN)
    try:
        yield
    finally:
        pygame.event.set_blocked(pygame.KEYDOWN)
        pygame.event.clear(pygame.KEYDOWN)
