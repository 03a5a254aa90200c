from snowflake_ca.config.constants import (
    BORDER_MARGIN,
    CENTER_SEED_COLDNESS,
    FLUSH_THRESHOLD,
    FREEZE_THRESHOLD,
    GRID_SIZE,
    MIN_GRID_SIZE,
    PERLIN_OCTAVES,
    PROGRESS_INTERVAL,
    SHEAR_ANGLE_DEG,
)


def test_grid_size_is_even_and_above_minimum() -> None:
    assert isinstance(GRID_SIZE, int) and GRID_SIZE % 2 == 0
    assert GRID_SIZE >= MIN_GRID_SIZE


def test_minimum_leaves_room_inside_border() -> None:
    assert MIN_GRID_SIZE // 2 - BORDER_MARGIN >= 1


def test_center_seed_is_frozen() -> None:
    assert CENTER_SEED_COLDNESS >= FREEZE_THRESHOLD


def test_shear_angle_is_thirty_degrees() -> None:
    assert abs(SHEAR_ANGLE_DEG) == 30.0


def test_counters_are_positive() -> None:
    assert PERLIN_OCTAVES >= 1
    assert PROGRESS_INTERVAL >= 1
    assert FLUSH_THRESHOLD >= 1
