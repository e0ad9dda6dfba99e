
import logging
import sys
import pygame
from tetris_rng import UniformRandom
from tetris_config import CONFIG
from tetris_engine import Game, Rules
from tetris_input import action_for, drop_timer, key_listener
from tetris_overlay import Overlay
from tetris_layout import compute_dims
from tetris_render import RenderAssets

log = logging.getLogger("tetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def quit_game():
    pygame.quit(); sys.exit()


def run(game, tick_event, overlay, screen, render, font, clock):
    """Pump events until game over (returns False) or the overlay closes (True).

    A batch from the event queue is always handled to the end, so keys
    pressed right after closing the overlay still reach the game in order.
    """
    while True:
        closed = False
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                quit_game()
            if e.type == tick_event and not overlay.active:
                game.tick()
            elif e.type == pygame.KEYDOWN:
                if overlay.active:
                    overlay.handle(e)
                    closed = closed or not overlay.active
                elif e.key == pygame.K_F1:
                    overlay.toggle()
                else:
                    action = action_for(e.key)
                    if action is not None:
                        game.dispatch(action)
            if game.over:
                return False
        if closed:
            return True

        render.draw(screen, game.state)
        overlay.draw(screen, font, render.dims.total_w, render.dims.total_h)
        pygame.display.flip()
        clock.tick(60)


def play(game, screen, render, font, clock):
    """One session; drop timer and key listener are released on game over."""
    overlay = Overlay()
    with key_listener():
        while not game.over:
            with drop_timer() as tick_event:
                changed = run(game, tick_event, overlay, screen, render, font, clock)
            if changed:
                # settings may have changed: new rules, timer re-armed with new period
                game.rules = Rules.from_config()
                log.info("config applied: %s, tick %d ms", game.rules, CONFIG["TICK_MS"])


def wait_restart(screen, render, big_font, state):
    render.draw(screen, state)
    render.draw_game_over(screen, big_font)
    pygame.display.flip()
    with key_listener():
        while True:
            ev = pygame.event.wait()
            if ev.type == pygame.QUIT: quit_game()
            if ev.type == pygame.KEYDOWN and ev.key == pygame.K_r: return


def main():
    logging.basicConfig(
        level=CONFIG["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    pygame.init()
    pygame.event.set_blocked(None)
    pygame.event.set_allowed([pygame.QUIT])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 30)
    render = RenderAssets(dims, font)
    clock = pygame.time.Clock()

    rng = UniformRandom(CONFIG["SEED"])
    log.info("seed %d", rng.seed)
    while True:
        game = Game(rng, Rules.from_config())
        play(game, screen, render, font, clock)
        wait_restart(screen, render, big_font, game.state)
        log.info("restart")


if __name__ == '__main__':
    main()
