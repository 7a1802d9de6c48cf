'''
Sub-schemas for the sitemap extensions.

Each class is built from a plain document (``dict``) and only knows the keys
listed in its ``FIELDS``: any other key is rejected instead of being silently
dropped from the output.
'''
from collections.abc import Mapping
import logging

from .errors import (
    InvalidImageFormatError,
    InvalidLinkFormatError,
    InvalidNewsAccessValueError,
    InvalidNewsFormatError,
    InvalidVideoDescriptionError,
    InvalidVideoDurationError,
    InvalidVideoFormatError,
    UnknownFieldError,
)
from .validators import attr_builder, validate_value


logger = logging.getLogger(__name__)
MAX_VIDEO_DURATION = 28800
MAX_VIDEO_DESCRIPTION = 2048
NEWS_ACCESS = ('Registration', 'Subscription')

# Element name -> namespaced keys holding that element's attributes.
VIDEO_ATTRIBUTES = {
    'player_loc': ('player_loc:autoplay',),
    'restriction': ('restriction:relationship',),
    'gallery_loc': ('gallery_loc:title',),
    'price': ('price:resolution', 'price:currency', 'price:type'),
    'platform': ('platform:relationship',),
}


def is_present(value):
    ''' Return True if ``value`` should produce output. '''
    return value is not None and value != ''


def as_list(value):
    '''
    Wrap a single entry in a list.

    :param value: An entry or a list/tuple of entries.
    :rtype: list
    '''
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _check_fields(schema, doc, fields):
    ''' Reject keys that ``schema`` does not define. '''
    for key in doc:
        if key not in fields:
            raise UnknownFieldError(schema, key)


class Image:
    ''' An ``<image:image>`` entry. '''
    FIELDS = ('url', 'caption', 'title', 'geoLocation', 'license')

    def __init__(self, doc):
        '''
        Constructor.

        :param doc: An image location or a mapping with ``url`` and optional
            ``caption``, ``title``, ``geoLocation`` and ``license``.
        :type doc: str or dict
        '''
        if isinstance(doc, str):
            doc = {'url': doc}
        elif not isinstance(doc, Mapping):
            raise InvalidImageFormatError()
        _check_fields('image', doc, self.FIELDS)
        if not is_present(doc.get('url')):
            raise InvalidImageFormatError()
        self.url = doc['url']
        self.caption = doc.get('caption')
        self.title = doc.get('title')
        self.geo_location = doc.get('geoLocation')
        self.license = doc.get('license')


class Link:
    ''' An alternate-language ``<xhtml:link>``. '''
    FIELDS = ('lang', 'url')

    def __init__(self, doc):
        '''
        Constructor.

        :param dict doc: A mapping with ``lang`` and ``url``.
        '''
        if not isinstance(doc, Mapping):
            raise InvalidLinkFormatError()
        _check_fields('link', doc, self.FIELDS)
        if not is_present(doc.get('lang')) or not is_present(doc.get('url')):
            raise InvalidLinkFormatError()
        self.lang = doc['lang']
        self.url = doc['url']


class Publication:
    ''' The publication a news article belongs to. '''
    FIELDS = ('name', 'language')

    def __init__(self, doc):
        if not isinstance(doc, Mapping):
            raise InvalidNewsFormatError()
        _check_fields('news publication', doc, self.FIELDS)
        if not is_present(doc.get('name')) or \
           not is_present(doc.get('language')):
            raise InvalidNewsFormatError()
        self.name = doc['name']
        self.language = doc['language']


class News:
    ''' A ``<news:news>`` entry. '''
    FIELDS = ('publication', 'access', 'genres', 'publication_date', 'title',
        'keywords', 'stock_tickers')

    def __init__(self, doc):
        '''
        Constructor.

        The required fields are checked before ``access``, so a document with
        both problems fails with :class:`InvalidNewsFormatError`.

        :param dict doc: A news document.
        '''
        if not isinstance(doc, Mapping):
            raise InvalidNewsFormatError()
        _check_fields('news', doc, self.FIELDS)
        if doc.get('publication') is None or \
           not is_present(doc.get('publication_date')) or \
           not is_present(doc.get('title')):
            raise InvalidNewsFormatError()
        self.publication = Publication(doc['publication'])
        self.publication_date = doc['publication_date']
        self.title = doc['title']

        self.access = doc.get('access')
        if is_present(self.access) and self.access not in NEWS_ACCESS:
            raise InvalidNewsAccessValueError(self.access)
        self.genres = doc.get('genres')
        self.keywords = doc.get('keywords')
        self.stock_tickers = doc.get('stock_tickers')


class Video:
    ''' A ``<video:video>`` entry. '''
    FIELDS = (
        'thumbnail_loc', 'title', 'description', 'content_loc', 'player_loc',
        'player_loc:autoplay', 'duration', 'expiration_date', 'rating',
        'view_count', 'publication_date', 'family_friendly', 'tag',
        'category', 'restriction', 'restriction:relationship', 'gallery_loc',
        'gallery_loc:title', 'price', 'price:resolution', 'price:currency',
        'price:type', 'requires_subscription', 'uploader', 'platform',
        'platform:relationship', 'live',
    )

    def __init__(self, doc):
        '''
        Constructor.

        :param dict doc: A video document. Attribute values use namespaced
            keys, e.g. ``{'price': '1.99', 'price:currency': 'EUR'}``.
        '''
        if not isinstance(doc, Mapping):
            raise InvalidVideoFormatError()
        _check_fields('video', doc, self.FIELDS)
        if not is_present(doc.get('thumbnail_loc')) or \
           not is_present(doc.get('title')) or \
           not is_present(doc.get('description')):
            raise InvalidVideoFormatError()

        self.thumbnail_loc = doc['thumbnail_loc']
        self.title = doc['title']
        self.description = doc['description']
        if len(str(self.description)) > MAX_VIDEO_DESCRIPTION:
            raise InvalidVideoDescriptionError()

        self.duration = doc.get('duration')
        if is_present(self.duration):
            _check_duration(self.duration)

        for key in ('family_friendly', 'requires_subscription', 'live'):
            if is_present(doc.get(key)):
                validate_value(key, doc[key])

        self.content_loc = doc.get('content_loc')
        self.player_loc = doc.get('player_loc')
        self.expiration_date = doc.get('expiration_date')
        self.rating = doc.get('rating')
        self.view_count = doc.get('view_count')
        self.publication_date = doc.get('publication_date')
        self.family_friendly = doc.get('family_friendly')
        tag = doc.get('tag')
        self.tags = [t for t in as_list(tag) if is_present(t)] \
            if is_present(tag) else list()
        self.category = doc.get('category')
        self.restriction = doc.get('restriction')
        self.gallery_loc = doc.get('gallery_loc')
        self.price = doc.get('price')
        self.requires_subscription = doc.get('requires_subscription')
        self.uploader = doc.get('uploader')
        self.platform = doc.get('platform')
        self.live = doc.get('live')

        self.attributes = {element: attr_builder(doc, keys)
            for element, keys in VIDEO_ATTRIBUTES.items()}


def _check_duration(duration):
    ''' Duration is a gate, not a clamp: the value itself is kept as is. '''
    try:
        seconds = float(duration)
    except (TypeError, ValueError):
        raise InvalidVideoDurationError(duration) from None
    if isinstance(duration, bool) or not 0 <= seconds <= MAX_VIDEO_DURATION:
        raise InvalidVideoDurationError(duration)
