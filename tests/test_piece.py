import unittest

from tetris_piece import (COLS, PIECES, SHAPES, Piece, cell_count, rotate,
                          rotate_ccw, rotate_cw)


class ShapeCatalogTests(unittest.TestCase):
    def test_every_piece_has_four_cells(self):
        for t in PIECES:
            self.assertEqual(cell_count(SHAPES[t]), 4, t)

    def test_rotation_preserves_cell_count(self):
        for t in PIECES:
            for cw in (True, False):
                m = SHAPES[t]
                for _ in range(4):
                    m = rotate(m, cw)
                    self.assertEqual(cell_count(m), 4, (t, cw))

    def test_four_turns_return_to_base(self):
        for t in PIECES:
            m = SHAPES[t]
            for _ in range(4):
                m = rotate_cw(m)
            self.assertEqual(m, SHAPES[t])

    def test_ccw_undoes_cw(self):
        for t in PIECES:
            self.assertEqual(rotate_ccw(rotate_cw(SHAPES[t])), SHAPES[t])

    def test_rotate_cw_t_piece(self):
        self.assertEqual(rotate_cw(SHAPES["T"]), ((1, 0), (1, 1), (1, 0)))
        self.assertEqual(rotate_ccw(SHAPES["T"]), ((0, 1), (1, 1), (0, 1)))

    def test_rotate_i_is_vertical(self):
        self.assertEqual(rotate_cw(SHAPES["I"]), ((1,), (1,), (1,), (1,)))


class PieceTests(unittest.TestCase):
    def test_spawn_position(self):
        p = Piece.spawn("O", "cyan")
        self.assertEqual((p.x, p.y), (COLS // 2 - 2, 0))
        self.assertEqual(p.state, 0)
        self.assertEqual(p.color, "cyan")
        self.assertIs(p.shape, SHAPES["O"])

    def test_rotating_a_piece_leaves_catalog_alone(self):
        before = SHAPES["L"]
        p = Piece.spawn("L").rotated()
        self.assertEqual(SHAPES["L"], before)
        self.assertNotEqual(p.shape, before)
        self.assertEqual(Piece.spawn("L").shape, before)

    def test_rotation_state_wraps(self):
        p = Piece.spawn("T")
        self.assertEqual(p.rotated(cw=False).state, 3)
        for _ in range(4):
            p = p.rotated()
        self.assertEqual(p.state, 0)

    def test_cells_are_absolute(self):
        p = Piece.spawn("S").moved(dx=1, dy=-1)
        self.assertEqual(sorted(p.cells()), sorted([(5, -1), (6, -1), (4, 0), (5, 0)]))


if __name__ == "__main__":
    unittest.main()
