import os
import unittest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from tetris_engine import GameState, Rules, new_game, tick
from tetris_layout import compute_dims
from tetris_render import PALETTE, RenderAssets
from tetris_piece import COLORS, COLS, ROWS, SHAPES, Piece
from tetris_rng import ScriptedRandom


class RenderTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()
        cls.dims = compute_dims()
        cls.font = pygame.font.Font(None, 22)

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def setUp(self):
        self.render = RenderAssets(self.dims, self.font)
        self.screen = pygame.Surface((self.dims.total_w, self.dims.total_h))
        self.state = new_game(ScriptedRandom(["O", "T"]), Rules(spawn_rotations=False))

    def test_palette_covers_piece_colors(self):
        self.assertEqual(set(PALETTE), set(COLORS))

    def test_layout_fits_board(self):
        self.assertEqual(self.dims.board_w, COLS * self.dims.cell)
        self.assertEqual(self.dims.board_h, ROWS * self.dims.cell)

    def test_draws_active_piece(self):
        self.render.draw(self.screen, self.state)
        d = self.dims
        cur = self.state.current
        px = (d.board_x + cur.x * d.cell + d.cell // 2, d.board_y + cur.y * d.cell + d.cell // 2)
        self.assertEqual(tuple(self.screen.get_at(px))[:3], PALETTE[cur.color])

    def test_board_surface_rebuilt_only_on_change(self):
        self.render.sync_board(self.state.board)
        cached = self.render._board
        self.render.sync_board(self.state.board)
        self.assertIs(self.render._board, cached)
        moved = tick(self.state, ScriptedRandom(), Rules(spawn_rotations=False))
        self.render.sync_board(moved.board)
        self.assertIs(self.render._board, moved.board)

    def test_game_over_frame(self):
        top = [[None] * COLS for _ in range(ROWS)]
        for y in (0, 1):
            for x in range(3, 7):
                top[y][x] = "blue"
        board = tuple(tuple(r) for r in top)
        landing = Piece("O", SHAPES["O"], 0, 0, ROWS - 2, "red")
        over = tick(GameState(board, landing, "T", "green"), ScriptedRandom(), Rules(spawn_rotations=False))
        self.assertTrue(over.game_over)
        self.assertEqual(over.current.color, "green")

        self.render.draw(self.screen, over)
        d = self.dims
        # the blocked T spawned on (4, 0); only the settled cell shows there
        px = (d.board_x + 4 * d.cell + d.cell // 2, d.board_y + d.cell // 2)
        self.assertEqual(tuple(self.screen.get_at(px))[:3], PALETTE["blue"])

        before = self.screen.copy()
        big = pygame.font.Font(None, 30)
        self.render.draw_game_over(self.screen, big)
        rect = big.render("GAME OVER (R to Restart)", True, (255, 220, 220)).get_rect(
            center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2))
        changed = [(x, y) for x in range(rect.left, rect.right) for y in range(rect.top, rect.bottom)
                   if self.screen.get_at((x, y)) != before.get_at((x, y))]
        self.assertTrue(changed)
        outside = (d.board_x + 2, d.board_y + 2 * d.cell + 2)
        self.assertEqual(self.screen.get_at(outside), before.get_at(outside))


if __name__ == "__main__":
    unittest.main()
