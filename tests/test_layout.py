from tetris_layout import compute_dims


def test_default_dims():
    d = compute_dims()
    assert d.cell == 30
    assert (d.board_w, d.board_h) == (300, 600)
    assert d.panel_x == d.board_x + d.board_w + d.margin
    assert d.total_h == 600 + 2 * d.margin


def test_fits_small_window():
    d = compute_dims(400, 300)
    assert d.cell == 13
    assert d.board_h <= 300 - 2 * d.margin


def test_cell_is_capped_in_large_window():
    d = compute_dims(2000, 1500)
    assert d.cell == 30
    assert (d.total_w, d.total_h) == (2000, 1500)


def test_cell_has_minimum():
    assert compute_dims(100, 100).cell == 10


def test_custom_board_size():
    d = compute_dims(cols=6, rows=12)
    assert (d.cols, d.rows) == (6, 12)
    assert (d.board_w, d.board_h) == (180, 360)
