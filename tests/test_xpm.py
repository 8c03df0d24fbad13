import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    channel_shifts,
    good_color,
    load_xpm,
    parse_xpm_lines,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42

SHIFTS_565 = channel_shifts(0xF800, 0x07E0, 0x001F)
SHIFTS_888 = channel_shifts(0xFF0000, 0x00FF00, 0x0000FF)


def _color_map_1(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb  c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_strip_comments_block():
    text = '/* XPM */\n"1 1 1 1"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "XPM" not in result
    assert result.endswith('"1 1 1 1"')


def test_strip_comments_line_comment_eats_newline():
    assert strip_comments("a// note\nb") == "a" + " " * 8 + "b"


def test_strip_comments_ignores_quoted_markers():
    text = '"a /* b */ // c"'
    assert strip_comments(text) == text


def test_strip_comments_unterminated_block():
    assert strip_comments("x/* open") == "x" + " " * 7


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF8000", None) == 0xFF8000


def test_text_to_rgb_hex_wraps_to_int():
    assert text_to_rgb("#FFFFFFFF", None) == -1


def test_text_to_rgb_bad_hex():
    assert text_to_rgb("#zz", None) == 0


def test_text_to_rgb_name():
    assert text_to_rgb("red", None) == 0xFF0000


def test_text_to_rgb_two_words():
    assert text_to_rgb("light", "blue") == 0xADD8E6


def test_text_to_rgb_none_is_transparent():
    assert text_to_rgb("None", None) == -1


def test_text_to_rgb_unknown():
    assert text_to_rgb("nosuchcolour", None) == 0


def test_channel_shifts_565():
    assert SHIFTS_565 == (11, 5, 5, 6, 0, 5)


def test_channel_shifts_888():
    assert SHIFTS_888 == (16, 8, 8, 8, 0, 8)


def test_channel_shifts_zero_mask():
    with pytest.raises(ValueError):
        channel_shifts(0, 0xFF00, 0xFF)


@pytest.mark.parametrize("x,y", [(0, 0), (IM1_SX - 1, 0), (10, 20), (WIN1_SX - 1, WIN1_SY - 1)])
def test_good_color_truecolor_unchanged(x, y):
    color = _color_map_1(x, y, WIN1_SX, WIN1_SY)
    assert good_color(color, 24, SHIFTS_888) == color


@pytest.mark.parametrize("x,y", [(0, 0), (120, 60), (WIN1_SX - 1, WIN1_SY - 1)])
def test_good_color_16bit_fits(x, y):
    value = good_color(_color_map_1(x, y, WIN1_SX, WIN1_SY), 16, SHIFTS_565)
    assert 0 <= value <= 0xFFFF


def test_good_color_16bit_values():
    assert good_color(0xFFFFFF, 16, SHIFTS_565) == 0xFFFF
    assert good_color(0xFF0000, 16, SHIFTS_565) == 0xF800
    assert good_color(0x000000, 16, SHIFTS_565) == 0


def test_parse_lines_basic():
    image = parse_xpm_lines(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == ((0xFF0000, TRANSPARENT), (TRANSPARENT, 0xFF0000))


def test_parse_lines_three_chars_per_pixel():
    image = parse_xpm_lines(["1 1 1 3", "abc c blue", "abc"])
    assert image.pixels == ((0xFF,),)


def test_parse_lines_two_word_colour():
    image = parse_xpm_lines(["1 1 1 1", "x c light blue", "x"])
    assert image.pixels == ((0xADD8E6,),)


def test_parse_lines_short_keys_last_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixels == ((0xFF,),)


def test_parse_lines_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixels == ((0xFF0000,),)


def test_parse_lines_unknown_key_is_black():
    image = parse_xpm_lines(["1 1 1 1", "a c red", "b"])
    assert image.pixels == ((0,),)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["1 1 1"],
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        ["1 1 2 1", "a c red"],
    ],
)
def test_parse_lines_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


XPM_TEXT = """/* XPM */
static char *test_xpm[] = {
/* columns rows colors chars-per-pixel */
"2 1 2 1 ",
"  c black",
". c #FFFFFF",
// pixels
" .",
};
"""


def test_parse_text_with_comments():
    image = parse_xpm_text(XPM_TEXT)
    assert image.width == 2
    assert image.height == 1
    assert image.pixels == ((0, 0xFFFFFF),)


def _square_xpm(size):
    rows = ",\n".join(f'"{"." * size}"' for _ in range(size))
    return f'/* XPM */\nstatic char *sq[] = {{\n"{size} {size} 1 1",\n". c #00FF00",\n{rows}\n}};\n'


def test_load_xpm_image_size(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(_square_xpm(IM1_SX))
    image = load_xpm(path)
    assert (image.width, image.height) == (IM1_SX, IM1_SY)
    assert len(image.pixels) == IM1_SY
    assert all(len(row) == IM1_SX for row in image.pixels)
    assert {value for row in image.pixels for value in row} == {0x00FF00}


def test_load_xpm_missing(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")