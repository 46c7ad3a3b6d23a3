import pytest

from heistkit.color import Color


def test_default_is_opaque_black():
    assert Color() == Color(0, 0, 0, 255)
    assert Color() == Color.black()


def test_primary_colours():
    assert Color.red() == Color(255, 0, 0, 255)
    assert Color.green() == Color(0, 255, 0, 255)
    assert Color.blue() == Color(0, 0, 255, 255)


def test_secondary_colours_combine_primaries():
    assert Color.yellow() == Color(255, 255, 0)
    assert Color.cyan() == Color(0, 255, 255)
    assert Color.magenta() == Color(255, 0, 255)


def test_dark_colours_use_half_shade():
    assert Color.dark_red() == Color.red(128)
    assert Color.dark_green() == Color.green(128)
    assert Color.dark_blue() == Color.blue(128)
    assert Color.dark_yellow() == Color.yellow(128)
    assert Color.dark_cyan() == Color.cyan(128)
    assert Color.dark_magenta() == Color.magenta(128)


def test_light_colours_or_with_gray():
    assert Color.light_red() == Color.red() | Color.white(128)
    assert Color.light_green() == Color.green() | Color.white(128)
    assert Color.light_blue() == Color.blue() | Color.white(128)
    assert Color.light_yellow() == Color.yellow() | Color.white(128)
    assert Color.light_cyan() == Color.cyan() | Color.white(128)
    assert Color.light_magenta() == Color.magenta() | Color.white(128)


def test_greyscale():
    assert Color.white() == Color(255, 255, 255)
    assert Color.light_gray() == Color(192, 192, 192)
    assert Color.dark_gray() == Color(128, 128, 128)
    assert Color.black() == Color(0, 0, 0)


def test_addition_saturates():
    assert Color(200, 200, 200) + Color(100, 100, 100) == Color(255, 255, 255, 255)


def test_subtraction_saturates():
    assert Color(10, 20, 30, 40) - Color(50, 50, 50, 50) == Color(0, 0, 0, 0)


def test_multiply_by_white_is_identity():
    c = Color(12, 34, 56, 78)
    assert c * Color.white() == c


def test_multiply_by_black_clears_rgb_keeps_alpha():
    c = Color(12, 34, 56, 78)
    assert c * Color.black() == Color(0, 0, 0, 78)


def test_multiply_by_int_255_is_identity():
    c = Color(12, 34, 56, 78)
    assert c * 255 == c
    assert c * 0 == Color(0, 0, 0, 78)


def test_bitwise_operators():
    c = Color(12, 34, 56, 78)
    assert c ^ c == Color(0, 0, 0, 0)
    assert c & c == c
    assert c | c == c
    assert c & Color(0, 0, 0, 0) == Color(0, 0, 0, 0)


def test_invert_is_involution():
    c = Color(12, 34, 56, 78)
    assert ~~c == c
    assert ~Color.white() == Color(0, 0, 0, 0)


def test_any_but_single():
    assert Color.any_but(Color.red()) == Color.black()
    assert Color.any_but(Color.black()) == Color.white()


def test_any_but_pair():
    assert Color.any_but(Color.black(), Color.white()) == Color.dark_gray()
    assert Color.any_but(Color.white(), Color.red()) == Color.black()
    assert Color.any_but(Color.red(), Color.black()) == Color.white()


def test_any_but_wrong_arity():
    with pytest.raises(TypeError):
        Color.any_but()
    with pytest.raises(TypeError):
        Color.any_but(Color.red(), Color.green(), Color.blue())


def test_hsb_primaries():
    assert Color.hsb(0, 1, 1) == Color.red()
    assert Color.hsb(120, 1, 1) == Color.green()
    assert Color.hsb(240, 1, 1) == Color.blue()


def test_hsb_zero_brightness_is_black():
    assert Color.hsb(200, 0.5, 0) == Color.black()


def test_hsb_negative_sector_is_black():
    assert Color.hsb(-90, 1, 1) == Color.black()


def test_channel_range_validated():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_colours_are_immutable_and_hashable():
    c = Color.red()
    with pytest.raises(AttributeError):
        c.r = 3
    assert {c, Color.red()} == {Color.red()}