from solong.pathfinding import check_path, flood_fill

OPEN = ["11111", "1P0C1", "10E01", "11111"]


def test_flood_fill_marks_reachable_tiles():
    assert flood_fill(OPEN, (1, 1)) == ["11111", "1vvc1", "1vev1", "11111"]


def test_flood_fill_leaves_input_untouched():
    rows = list(OPEN)
    flood_fill(rows, (1, 1))
    assert rows == OPEN


def test_flood_fill_keeps_walls():
    filled = flood_fill(OPEN, (1, 1))
    for before, after in zip(OPEN, filled):
        walls_before = [i for i, tile in enumerate(before) if tile == "1"]
        walls_after = [i for i, tile in enumerate(after) if tile == "1"]
        assert walls_before == walls_after


def test_flood_fill_from_wall_changes_nothing():
    assert flood_fill(OPEN, (0, 0)) == OPEN


def test_flood_fill_out_of_bounds_changes_nothing():
    assert flood_fill(OPEN, (-1, 5)) == OPEN


def test_check_path_open_map():
    assert check_path(OPEN, (1, 1)) is True


def test_check_path_blocked_collectible():
    assert check_path(["1111111", "1P0E1C1", "1111111"], (1, 1)) is False


def test_check_path_blocked_exit():
    assert check_path(["1111111", "1PC01E1", "1111111"], (1, 1)) is False


def test_check_path_through_exit():
    assert check_path(["1111111", "1PE0C01", "1111111"], (1, 1)) is True


def test_check_path_large_map():
    size = 300
    inner = "1" + "0" * (size - 2) + "1"
    rows = ["1" * size] + [inner] * (size - 2) + ["1" * size]
    rows[1] = "1P" + "0" * (size - 3) + "1"
    rows[-2] = "1" + "0" * (size - 4) + "EC" + "1"
    assert check_path(rows, (1, 1)) is True
    filled = flood_fill(rows, (1, 1))
    assert not any("0" in row for row in filled)