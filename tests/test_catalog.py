from types import SimpleNamespace

import pytest

from paletteviewer.catalog import (
    COLOR_NAMES,
    HSSF_COLORS,
    CatalogError,
    NamedColor,
    build_catalog,
    find_names,
)


def test_every_constant_is_catalogued_under_its_triplet():
    for named in HSSF_COLORS:
        assert named.name in COLOR_NAMES[named.triplet]


def test_no_name_list_is_empty():
    assert all(COLOR_NAMES.values())
    assert sum(len(v) for v in COLOR_NAMES.values()) == len(HSSF_COLORS)


def test_aliases_share_one_key_in_enumeration_order():
    assert COLOR_NAMES[(0x99, 0x33, 0x66)] == ['PLUM']
    assert COLOR_NAMES[(0x7F, 0x00, 0x00)] == ['MAROON']
    assert COLOR_NAMES[(0x00, 0x00, 0x00)] == ['BLACK', 'AUTOMATIC']
    assert len(COLOR_NAMES) == len(HSSF_COLORS) - 1


def test_build_catalog_reads_instance_accessor():
    class Instance:
        def get_triplet(self):
            return [1, 2, 3]

    constants = [
        NamedColor('DIRECT', 0, (1, 2, 3)),
        SimpleNamespace(name='VIA_INSTANCE', instance=Instance()),
    ]
    catalog = build_catalog(constants)
    assert catalog == {(1, 2, 3): ['DIRECT', 'VIA_INSTANCE']}


def test_build_catalog_fails_fast_on_malformed_constant():
    constants = [NamedColor('RED', 0x0A, (255, 0, 0)), SimpleNamespace(name='BROKEN')]
    with pytest.raises(CatalogError, match='BROKEN'):
        build_catalog(constants)


def test_build_catalog_rejects_short_triplet():
    with pytest.raises(CatalogError):
        build_catalog([NamedColor('SHORT', 0, (1, 2))])


def test_find_names_returns_copy_and_empty_for_unknown():
    names = find_names(COLOR_NAMES, (255, 0, 0))
    assert names == ['RED']
    names.append('OTHER')
    assert COLOR_NAMES[(255, 0, 0)] == ['RED']
    assert find_names(COLOR_NAMES, (1, 2, 3)) == []
