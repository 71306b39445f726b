"""Tests for the fontTools outline provider."""

import pytest
from svgpathtools import parse_path

from tests.conftest import TEST_ASCENT, TEST_UPM

from glyph_outline import FontOutlineProvider, format_number
from ids_errors import UnsupportedCharacterError


@pytest.fixture
def provider(box_font_path):
    return FontOutlineProvider.from_file(str(box_font_path))


def test_metrics(provider):
    assert provider.units_per_em == TEST_UPM
    assert provider.ascender == TEST_ASCENT


def test_outline_on_zero_baseline(provider):
    outline = provider.get_outline('口', 100)
    assert outline.ascender == TEST_ASCENT
    assert outline.units_per_em == TEST_UPM
    assert parse_path(outline.path).bbox() == pytest.approx((10, 90, -80, 0))


def test_path_placed_at_origin(provider):
    d = provider.get_path('口', 5, 110, 100)
    assert parse_path(d).bbox() == pytest.approx((15, 95, 30, 110))


def test_path_is_closed(provider):
    assert provider.get_path('口', 0, 0, 72).rstrip().endswith('Z')


def test_empty_glyph(provider):
    assert provider.has_character(' ')
    assert provider.get_path(' ', 0, 0, 72) == ''


def test_missing_character(provider):
    assert not provider.has_character('木')
    with pytest.raises(UnsupportedCharacterError) as e:
        provider.get_path('木', 0, 0, 72)
    assert e.value.character == '木'
    assert 'U+6728' in str(e.value)


@pytest.mark.parametrize('value, text', [
    (12.5, '12.5'),
    (3.0, '3'),
    (1.256, '1.26'),
    (-0.001, '0'),
    (-7.1, '-7.1'),
    (0, '0'),
])
def test_format_number(value, text):
    assert format_number(value) == text
