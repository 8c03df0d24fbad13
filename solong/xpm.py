"""XPM pixmap reader and colour conversion for low-depth visuals."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .colors import color_by_name

TRANSPARENT = 0xFF000000
"""Pixel value used for the XPM colour ``None``."""

_COLOR_NAME_LIMIT = 63
_ATOI = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")
_QUOTED = re.compile(r'"([^"]*)"')
_BLANKS = re.compile(r"[ \t]+")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: rows of 0xRRGGBB values, transparent pixels as TRANSPARENT."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def split_words(text: str) -> list[str]:
    """Split text into words separated by spaces and tabs only."""
    return [word for word in _BLANKS.split(text) if word]


def _find_unquoted(text: str, token: str) -> int:
    quoted = False
    for pos, char in enumerate(text):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces, keeping the length."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        stop = len(text) if end == -1 else end + 2
        text = _blank(text, begin, stop)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = _blank(text, begin, stop)
    return text


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn an XPM colour specification into 0xRRGGBB.

    ``#hex`` values are read as hexadecimal; otherwise ``name`` (joined with
    ``end`` when given) is looked up in the colour table. Unknown names give 0
    and ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        if match.group(1) == "-":
            value = -value
        return _wrap_int32(value)
    if end is not None:
        name = f"{name} {end}"[:_COLOR_NAME_LIMIT]
    value = color_by_name(name)
    return 0 if value is None else value


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (offset, bits) for the red, green and blue masks, flattened."""
    shifts: list[int] = []
    for mask in (red_mask, green_mask, blue_mask):
        if mask <= 0:
            raise ValueError("colour mask must be a positive bit mask")
        offset = (mask & -mask).bit_length() - 1
        mask >>= offset
        bits = (mask ^ (mask + 1)).bit_length() - 1
        shifts.extend((offset, bits))
    return tuple(shifts)


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Convert 0xRRGGBB into a pixel value for a visual of the given depth."""
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_off, red_bits, green_off, green_bits, blue_off, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_off)
        + ((green >> (16 - green_bits)) << green_off)
        + ((blue >> (16 - blue_bits)) << blue_off)
    )


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode the quoted strings of an XPM image: header, colours, pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"no colour in definition: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"no colour in definition: {line!r}")
        end = words[index + 2] if index + 2 < len(words) else None
        rgb = text_to_rgb(words[index + 1], end)
        key = line[:cpp]
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows: list[tuple[int, ...]] = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        keys = (line[start:start + cpp] for start in range(0, width * cpp, cpp))
        values = (palette.get(key, 0) for key in keys)
        rows.append(tuple(TRANSPARENT if value == -1 else value for value in values))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)