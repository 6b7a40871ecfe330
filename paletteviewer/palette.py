"""Palette utilities: read an indexed spreadsheet palette and sort it by HSB."""
from bisect import bisect_left
from dataclasses import dataclass
from functools import cmp_to_key
import colorsys

from openpyxl.styles.colors import COLOR_INDEX

from paletteviewer.catalog import find_names

# slots below this one mirror the first eight palette entries
FIRST_CUSTOM_INDEX = 0x08
LEGIBILITY_THRESHOLD = 0x808080
OR_SEPARATOR = '\nor\n'


def rgb_to_hex(rgb):
    return '#{:02X}{:02X}{:02X}'.format(*rgb)


def hex_to_rgb(hexstr):
    hexstr = hexstr.strip().lstrip('#')
    return tuple(int(hexstr[i:i+2], 16) for i in (0,2,4))


def argb_to_rgb(argb: str):
    """Convert an 'AARRGGBB' string (as stored by openpyxl) to an RGB tuple."""
    return hex_to_rgb(argb[-6:])


def rgb_to_int(rgb):
    r, g, b = rgb
    return ((r << 16) | (g << 8) | b) & 0xFFFFFF


def rgb_to_hsb(rgb):
    r, g, b = [x/255 for x in rgb]
    return colorsys.rgb_to_hsv(r, g, b)


def compare_hsb(a, b):
    """Three-way comparison on hue, then saturation, then brightness."""
    for x, y in zip(rgb_to_hsb(a), rgb_to_hsb(b)):
        if x < y:
            return -1
        if x > y:
            return 1
    return 0


class SortedColorSet:
    """Ordered set of RGB tuples.

    The comparator decides both the order and which colors count as
    duplicates: a color comparing equal to one already present is dropped.
    """

    def __init__(self, colors=(), cmp=compare_hsb):
        self._cmp = cmp
        self._key = cmp_to_key(cmp)
        self._keys = []
        self._colors = []
        for rgb in colors:
            self.add(rgb)

    def add(self, rgb) -> bool:
        rgb = tuple(rgb)
        key = self._key(rgb)
        pos = bisect_left(self._keys, key)
        if pos < len(self._colors) and self._cmp(self._colors[pos], rgb) == 0:
            return False
        self._keys.insert(pos, key)
        self._colors.insert(pos, rgb)
        return True

    def __contains__(self, rgb):
        rgb = tuple(rgb)
        pos = bisect_left(self._keys, self._key(rgb))
        return pos < len(self._colors) and self._cmp(self._colors[pos], rgb) == 0

    def __iter__(self):
        return iter(self._colors)

    def __len__(self):
        return len(self._colors)

    def __repr__(self):
        return f'SortedColorSet({[rgb_to_hex(c) for c in self._colors]})'


class IndexedPalette:
    """Indexed color palette backed by a sequence of ARGB strings.

    Defaults to openpyxl's built-in indexed palette. Looking up a slot past
    the end of the table returns None, which is how callers detect the end
    of the palette.
    """

    def __init__(self, colors=COLOR_INDEX):
        self.colors = [argb_to_rgb(c) for c in colors]

    def get_color(self, index: int):
        if 0 <= index < len(self.colors):
            return self.colors[index]
        return None

    def __len__(self):
        return len(self.colors)


def get_sorted_colors(palette, start: int = FIRST_CUSTOM_INDEX):
    """Collect the colors of `palette` from slot `start` onwards, HSB-sorted.

    The scan stops at the first slot for which the palette returns None; the
    palette is expected to return None eventually.
    """
    colors = SortedColorSet()
    index = start
    rgb = palette.get_color(index)
    while rgb is not None:
        colors.add(rgb)
        index += 1
        rgb = palette.get_color(index)
    return colors


def swatch_hex(rgb):
    return '{:06X}'.format(rgb_to_int(rgb))


def foreground_for(rgb):
    return 'white' if rgb_to_int(rgb) < LEGIBILITY_THRESHOLD else 'black'


def tooltip_text(names):
    return OR_SEPARATOR.join(names)


@dataclass(frozen=True)
class Swatch:
    """One grid cell: the color, its hex label, text color and tooltip."""
    rgb: tuple
    hex: str
    foreground: str
    tooltip: str

    @property
    def background(self):
        return rgb_to_hex(self.rgb)


def build_swatches(colors, catalog):
    swatches = []
    for rgb in colors:
        rgb = tuple(rgb)
        names = find_names(catalog, rgb)
        swatches.append(Swatch(rgb, swatch_hex(rgb), foreground_for(rgb), tooltip_text(names)))
    return swatches
