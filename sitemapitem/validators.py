'''
Value validators and the namespaced attribute extractor.

Sitemap extensions encode an element's attributes as sibling keys named
``element:attribute``, e.g. ``price:currency`` is the ``currency`` attribute of
``<video:price>``. Any key with a registered pattern is checked whenever it is
present, independent of an item's ``safe`` flag.
'''
import logging
import re

from .errors import InvalidAttrError, InvalidAttrValueError


logger = logging.getLogger(__name__)
_ALLOW_DENY = re.compile(r'allow|deny')
_YES_NO = re.compile(r'yes|no')

VALIDATORS = {
    'price:currency': re.compile(r'[A-Z]{3}'),
    'price:type': re.compile(r'rent|purchase', re.IGNORECASE),
    'price:resolution': re.compile(r'hd|sd', re.IGNORECASE),
    'platform:relationship': _ALLOW_DENY,
    'restriction:relationship': _ALLOW_DENY,
    'family_friendly': _YES_NO,
    'requires_subscription': _YES_NO,
    'live': _YES_NO,
}


def validate_value(key, value):
    '''
    Check ``value`` against the pattern registered for ``key``.

    Keys without a registered pattern accept any value.

    :param str key: A field name, e.g. ``price:currency``.
    :param value: The value to check.
    :raises InvalidAttrValueError: If the value does not fully match.
    '''
    pattern = VALIDATORS.get(key)
    if pattern is not None and not pattern.fullmatch(str(value)):
        raise InvalidAttrValueError(key, value, pattern.pattern)


def attr_builder(doc, keys):
    '''
    Collect XML attributes for one element from namespaced keys in ``doc``.

    :param dict doc: The source document.
    :param keys: A key or list of keys of the form ``element:attribute``.
    :type keys: str or list[str]
    :returns: A mapping of attribute name to value, in ``keys`` order. Keys
        that are absent from ``doc`` (or ``None``) are skipped.
    :rtype: dict
    :raises InvalidAttrError: If a key is not exactly two segments.
    :raises InvalidAttrValueError: If a value fails its registered pattern.
    '''
    if isinstance(keys, str):
        keys = [keys]

    attrs = dict()
    for key in keys:
        value = doc.get(key)
        if value is None:
            continue
        parts = key.split(':')
        if len(parts) != 2:
            raise InvalidAttrError(key)
        validate_value(key, value)
        attrs[parts[1]] = value
    logger.debug('Attributes for %r: %r', keys, attrs)
    return attrs
