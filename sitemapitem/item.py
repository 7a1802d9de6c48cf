'''
Assemble a single sitemap ``<url>`` element from an item document.
'''
from collections.abc import Mapping
from decimal import Decimal, ROUND_HALF_UP
import logging
import os

from .config import ItemDefaults
from .errors import (
    ChangeFreqInvalidError,
    NoURLError,
    PriorityInvalidError,
    UnknownFieldError,
)
from .extensions import (
    build_amp_link,
    build_android_link,
    build_images,
    build_links,
    build_mobile,
    build_news,
    build_videos,
)
from .schema import Image, Link, News, Video, as_list, is_present
from .timestamp import normalize_lastmod, parse_expires
from .tree import Element, element, raw_element, serialize


logger = logging.getLogger(__name__)
CHANGEFREQ = ('always', 'hourly', 'daily', 'weekly', 'monthly', 'yearly',
    'never')
FIELDS = ('url', 'lastmodFromFile', 'lastmod', 'lastmodISO',
    'lastmodrealtime', 'changefreq', 'priority', 'news', 'img', 'video',
    'links', 'expires', 'androidLink', 'mobile', 'ampLink', 'safe', 'cdata')


def is_priority(value):
    ''' Return True if ``value`` is a number in [0.0, 1.0]. '''
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return 0.0 <= value <= 1.0


def _coerce_priority(value):
    ''' Turn a numeric string into a float, leaving anything else as is. '''
    try:
        return float(value)
    except ValueError:
        return value


def format_priority(priority):
    '''
    Format a priority with one decimal place.

    Ties round away from zero, judged on the float's exact binary value, so
    ``0.25`` gives ``0.3`` while ``0.35`` (stored as 0.34999...) gives
    ``0.3``.

    :param float priority:
    :rtype: str
    '''
    return str(Decimal(priority).quantize(Decimal('0.1'),
        rounding=ROUND_HALF_UP))


class SitemapItem:
    '''
    One URL of a sitemap.

    The constructor validates the whole document and normalizes its dates;
    :meth:`build` then turns that state into a fresh element tree each time it
    is called, so an item can be built and serialized any number of times.
    '''

    def __init__(self, doc, defaults=None, stat=os.stat, now=None):
        '''
        Constructor.

        :param dict doc: The item document, e.g. ``{'url': ..., 'changefreq':
            'daily', 'priority': 0.7}``.
        :param ItemDefaults defaults: Fallbacks for ``safe``, ``cdata`` and
            ``lastmodrealtime``.
        :param stat: Callable used to read ``lastmodFromFile``'s mtime.
        :param datetime now: Stand-in for the host clock when applying the
            local offset to ``lastmod`` strings.
        '''
        if not isinstance(doc, Mapping):
            raise TypeError('Item document must be a mapping, not {}'.format(
                type(doc).__name__))
        for key in doc:
            if key not in FIELDS:
                raise UnknownFieldError('item', key)
        if not doc.get('url'):
            raise NoURLError()

        if defaults is None:
            defaults = ItemDefaults()
        self.safe = bool(doc.get('safe', defaults.safe))
        self.cdata = bool(doc.get('cdata', defaults.cdata))
        realtime = bool(doc.get('lastmodrealtime', defaults.realtime))

        self.loc = doc['url']
        self.lastmod = normalize_lastmod(doc, realtime, stat, now)

        # Both fields are optional, so there is no default value. See
        # https://www.sitemaps.org/protocol.html
        self.changefreq = doc.get('changefreq')
        if not self.safe and is_present(self.changefreq) and \
           self.changefreq not in CHANGEFREQ:
            raise ChangeFreqInvalidError(self.changefreq)

        self.priority = doc.get('priority')
        if self.safe and isinstance(self.priority, str):
            self.priority = _coerce_priority(self.priority)
        if not self.safe and is_present(self.priority) and \
           not is_priority(self.priority):
            raise PriorityInvalidError(self.priority)

        self.images = self._parse_all(doc.get('img'), Image)
        self.videos = self._parse_all(doc.get('video'), Video)
        self.links = self._parse_all(doc.get('links'), Link)
        self.news = News(doc['news']) if is_present(doc.get('news')) \
            else None
        self.expires = parse_expires(doc['expires']) \
            if is_present(doc.get('expires')) else None
        self.android_link = doc.get('androidLink') or None
        self.mobile = doc.get('mobile') or None
        self.amp_link = doc.get('ampLink') or None
        logger.debug('Created item %s (lastmod=%s safe=%s)', self.loc,
            self.lastmod, self.safe)

    @staticmethod
    def _parse_all(value, schema):
        if not is_present(value):
            return list()
        return [entry if isinstance(entry, schema) else schema(entry)
            for entry in as_list(value)]

    def build(self):
        '''
        Build the ``<url>`` element.

        :rtype: sitemapitem.tree.Element
        '''
        url = Element('url')
        add = url.children.append
        extend = url.children.extend

        if self.cdata:
            add(raw_element('loc', self.loc))
        else:
            add(element('loc', self.loc))
        if is_present(self.lastmod):
            add(element('lastmod', self.lastmod))
        if is_present(self.changefreq):
            add(element('changefreq', self.changefreq))
        if is_priority(self.priority):
            add(element('priority', format_priority(self.priority)))
        extend(build_images(self.images))
        extend(build_videos(self.videos))
        extend(build_links(self.links))
        if self.expires is not None:
            add(element('expires', self.expires))
        if self.android_link is not None:
            add(build_android_link(self.android_link))
        if self.mobile is not None:
            add(build_mobile(self.mobile))
        if self.news is not None:
            add(build_news(self.news))
        if self.amp_link is not None:
            add(build_amp_link(self.amp_link))
        return url

    def to_xml(self, builder=None):
        '''
        Serialize the item.

        :param sitemapitem.tree.TreeBuilder builder: Defaults to
            :class:`sitemapitem.tree.StringTreeBuilder`.
        :rtype: str
        '''
        return serialize(self.build(), builder)

    def __str__(self):
        return self.to_xml()
