import pytest

from sitemapitem.errors import InvalidAttrError, InvalidAttrValueError
from sitemapitem.validators import attr_builder, validate_value


def test_attr_builder_single_key():
    doc = {'player_loc': 'https://example.com/p', 'player_loc:autoplay': 'ap=1'}
    assert attr_builder(doc, 'player_loc:autoplay') == {'autoplay': 'ap=1'}


def test_attr_builder_keeps_key_order():
    doc = {
        'price:type': 'rent',
        'price:currency': 'USD',
        'price:resolution': 'hd',
    }
    attrs = attr_builder(doc,
        ['price:resolution', 'price:currency', 'price:type'])
    assert list(attrs.items()) == [
        ('resolution', 'hd'),
        ('currency', 'USD'),
        ('type', 'rent'),
    ]


def test_attr_builder_skips_missing_and_none():
    doc = {'price:currency': None}
    assert attr_builder(doc, ['price:currency', 'price:type']) == {}


def test_attr_builder_rejects_malformed_key():
    with pytest.raises(InvalidAttrError) as exc_info:
        attr_builder({'bogus': 'x'}, 'bogus')
    assert exc_info.value.key == 'bogus'
    with pytest.raises(InvalidAttrError):
        attr_builder({'a:b:c': 'x'}, ['a:b:c'])


def test_attr_builder_currency():
    assert attr_builder({'price:currency': 'USD'}, 'price:currency') == \
        {'currency': 'USD'}
    with pytest.raises(InvalidAttrValueError) as exc_info:
        attr_builder({'price:currency': 'usd'}, 'price:currency')
    assert exc_info.value.key == 'price:currency'
    assert exc_info.value.value == 'usd'
    assert exc_info.value.pattern == '[A-Z]{3}'


@pytest.mark.parametrize('key,value', [
    ('price:type', 'rent'),
    ('price:type', 'PURCHASE'),
    ('price:type', 'Rent'),
    ('price:resolution', 'HD'),
    ('price:resolution', 'sd'),
    ('platform:relationship', 'allow'),
    ('restriction:relationship', 'deny'),
    ('live', 'yes'),
])
def test_validate_value_accepts(key, value):
    validate_value(key, value)


@pytest.mark.parametrize('key,value', [
    ('price:currency', 'EURO'),
    ('price:type', 'rental'),
    ('price:resolution', '4k'),
    ('platform:relationship', 'allowed'),
    ('restriction:relationship', 'ALLOW'),
    ('family_friendly', 'maybe'),
])
def test_validate_value_rejects(key, value):
    with pytest.raises(InvalidAttrValueError):
        validate_value(key, value)


def test_validate_value_unregistered_key():
    validate_value('gallery_loc:title', 'anything at all')
