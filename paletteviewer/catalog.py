"""Named spreadsheet colors and the reverse lookup from RGB to constant names."""
from dataclasses import dataclass


class CatalogError(Exception):
    """Raised when a color constant has no retrievable triplet."""


@dataclass(frozen=True)
class NamedColor:
    name: str
    index: int
    triplet: tuple


# published constant list of the spreadsheet palette, in declaration order
HSSF_COLORS = (
    NamedColor('BLACK', 0x08, (0x00, 0x00, 0x00)),
    NamedColor('BROWN', 0x3C, (0x99, 0x33, 0x00)),
    NamedColor('OLIVE_GREEN', 0x3B, (0x33, 0x33, 0x00)),
    NamedColor('DARK_GREEN', 0x3A, (0x00, 0x33, 0x00)),
    NamedColor('DARK_TEAL', 0x38, (0x00, 0x33, 0x66)),
    NamedColor('DARK_BLUE', 0x12, (0x00, 0x00, 0x80)),
    NamedColor('INDIGO', 0x3E, (0x33, 0x33, 0x99)),
    NamedColor('GREY_80_PERCENT', 0x3F, (0x33, 0x33, 0x33)),
    NamedColor('ORANGE', 0x35, (0xFF, 0x66, 0x00)),
    NamedColor('DARK_YELLOW', 0x13, (0x80, 0x80, 0x00)),
    NamedColor('GREEN', 0x11, (0x00, 0x80, 0x00)),
    NamedColor('TEAL', 0x15, (0x00, 0x80, 0x80)),
    NamedColor('BLUE', 0x0C, (0x00, 0x00, 0xFF)),
    NamedColor('BLUE_GREY', 0x36, (0x66, 0x66, 0x99)),
    NamedColor('GREY_50_PERCENT', 0x17, (0x80, 0x80, 0x80)),
    NamedColor('RED', 0x0A, (0xFF, 0x00, 0x00)),
    NamedColor('LIGHT_ORANGE', 0x34, (0xFF, 0x99, 0x00)),
    NamedColor('LIME', 0x32, (0x99, 0xCC, 0x00)),
    NamedColor('SEA_GREEN', 0x39, (0x33, 0x99, 0x66)),
    NamedColor('AQUA', 0x31, (0x33, 0xCC, 0xCC)),
    NamedColor('LIGHT_BLUE', 0x30, (0x33, 0x66, 0xFF)),
    NamedColor('VIOLET', 0x14, (0x80, 0x00, 0x80)),
    NamedColor('GREY_40_PERCENT', 0x37, (0x96, 0x96, 0x96)),
    NamedColor('PINK', 0x0E, (0xFF, 0x00, 0xFF)),
    NamedColor('GOLD', 0x33, (0xFF, 0xCC, 0x00)),
    NamedColor('YELLOW', 0x0D, (0xFF, 0xFF, 0x00)),
    NamedColor('BRIGHT_GREEN', 0x0B, (0x00, 0xFF, 0x00)),
    NamedColor('TURQUOISE', 0x0F, (0x00, 0xFF, 0xFF)),
    NamedColor('DARK_RED', 0x10, (0x80, 0x00, 0x00)),
    NamedColor('SKY_BLUE', 0x28, (0x00, 0xCC, 0xFF)),
    NamedColor('PLUM', 0x3D, (0x99, 0x33, 0x66)),
    NamedColor('GREY_25_PERCENT', 0x16, (0xC0, 0xC0, 0xC0)),
    NamedColor('ROSE', 0x2D, (0xFF, 0x99, 0xCC)),
    NamedColor('LIGHT_YELLOW', 0x2B, (0xFF, 0xFF, 0x99)),
    NamedColor('LIGHT_GREEN', 0x2A, (0xCC, 0xFF, 0xCC)),
    NamedColor('LIGHT_TURQUOISE', 0x29, (0xCC, 0xFF, 0xFF)),
    NamedColor('PALE_BLUE', 0x2C, (0x99, 0xCC, 0xFF)),
    NamedColor('LAVENDER', 0x2E, (0xCC, 0x99, 0xFF)),
    NamedColor('WHITE', 0x09, (0xFF, 0xFF, 0xFF)),
    NamedColor('CORNFLOWER_BLUE', 0x18, (0x99, 0x99, 0xFF)),
    NamedColor('LEMON_CHIFFON', 0x1A, (0xFF, 0xFF, 0xCC)),
    # differs from the color held in its palette slot
    NamedColor('MAROON', 0x19, (0x7F, 0x00, 0x00)),
    NamedColor('ORCHID', 0x1C, (0x66, 0x00, 0x66)),
    NamedColor('CORAL', 0x1D, (0xFF, 0x80, 0x80)),
    NamedColor('ROYAL_BLUE', 0x1E, (0x00, 0x66, 0xCC)),
    NamedColor('LIGHT_CORNFLOWER_BLUE', 0x1F, (0xCC, 0xCC, 0xFF)),
    NamedColor('TAN', 0x2F, (0xFF, 0xCC, 0x99)),
    # system foreground slot, outside the 56 customizable ones
    NamedColor('AUTOMATIC', 0x40, (0x00, 0x00, 0x00)),
)


def _triplet_of(definition):
    """Return the RGB triplet of a constant definition.

    A definition either carries its triplet directly or exposes an `instance`
    whose `get_triplet()` yields it. Anything else means the constant table
    does not have the expected shape and the catalog cannot be built.
    """
    triplet = getattr(definition, 'triplet', None)
    if triplet is None:
        instance = getattr(definition, 'instance', None)
        if instance is None or not hasattr(instance, 'get_triplet'):
            name = getattr(definition, 'name', repr(definition))
            raise CatalogError(f'color constant {name} exposes neither a triplet nor an instance')
        triplet = instance.get_triplet()
    if len(triplet) != 3:
        raise CatalogError(f'invalid triplet {triplet!r}')
    return tuple(int(c) for c in triplet)


def build_catalog(constants=HSSF_COLORS):
    """Map each RGB triplet to the names of every constant that produces it."""
    catalog = {}
    for definition in constants:
        rgb = _triplet_of(definition)
        catalog.setdefault(rgb, []).append(definition.name)
    return catalog


def find_names(catalog, rgb):
    return list(catalog.get(tuple(rgb), ()))


COLOR_NAMES = build_catalog(HSSF_COLORS)
