import pytest

from particlesim.colors import ColorName, color_for


def test_named_colors():
    assert color_for(ColorName.YELLOW) == (1.0, 1.0, 0.0, 1.0)
    assert color_for(ColorName.RED) == (1.0, 0.0, 0.0, 1.0)
    assert color_for(ColorName.ORANGE) == (1.0, 0.5, 0.2, 1.0)


def test_integer_index_matches_name():
    assert color_for(3) == color_for(ColorName.BLUE)


def test_table_entries_after_pink():
    assert color_for(ColorName.BROWN) == (0.0, 0.0, 0.0, 1.0)
    assert color_for(ColorName.BLACK) == (1.0, 1.0, 1.0, 1.0)


@pytest.mark.parametrize("index", [ColorName.WHITE, 9, -1, 100])
def test_out_of_range_raises(index):
    with pytest.raises(IndexError):
        color_for(index)


def test_all_colors_opaque():
    assert all(color_for(i)[3] == 1.0 for i in range(9))