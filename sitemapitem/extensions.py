'''
Builders for the sitemap extensions.

Each builder takes one extension's data and returns the list of child elements
it contributes to ``<url>``. Builders accept either the schema objects from
:mod:`sitemapitem.schema` or the plain documents those are built from.
'''
import logging

from .schema import Image, Link, News, Video, as_list, is_present
from .timestamp import parse_expires
from .tree import Element, cdata_element, element


logger = logging.getLogger(__name__)


def build_images(images):
    '''
    Build one ``<image:image>`` per image, in order.

    :param images: An image or a list of images (location strings, mappings
        or :class:`Image`).
    :rtype: list[Element]
    '''
    nodes = list()
    for image in as_list(images):
        if not isinstance(image, Image):
            image = Image(image)
        node = Element('image:image')
        node.children.append(element('image:loc', image.url))
        if is_present(image.caption):
            node.children.append(cdata_element('image:caption', image.caption))
        if is_present(image.geo_location):
            node.children.append(
                element('image:geo_location', image.geo_location))
        if is_present(image.title):
            node.children.append(cdata_element('image:title', image.title))
        if is_present(image.license):
            node.children.append(element('image:license', image.license))
        nodes.append(node)
    return nodes


def build_video(video):
    '''
    Build a ``<video:video>`` element.

    :param video: A video document or :class:`Video`.
    :rtype: Element
    '''
    if not isinstance(video, Video):
        video = Video(video)
    attributes = video.attributes
    node = Element('video:video')
    add = node.children.append

    add(element('video:thumbnail_loc', video.thumbnail_loc))
    add(cdata_element('video:title', video.title))
    add(cdata_element('video:description', video.description))
    if is_present(video.content_loc):
        add(element('video:content_loc', video.content_loc))
    if is_present(video.player_loc):
        add(element('video:player_loc', video.player_loc,
            attributes['player_loc']))
    if is_present(video.duration):
        add(element('video:duration', video.duration))
    if is_present(video.expiration_date):
        add(element('video:expiration_date', video.expiration_date))
    if is_present(video.rating):
        add(element('video:rating', video.rating))
    if is_present(video.view_count):
        add(element('video:view_count', video.view_count))
    if is_present(video.publication_date):
        add(element('video:publication_date', video.publication_date))
    if is_present(video.family_friendly):
        add(element('video:family_friendly', video.family_friendly))
    for tag in video.tags:
        add(element('video:tag', tag))
    if is_present(video.category):
        add(element('video:category', video.category))
    if is_present(video.restriction):
        add(element('video:restriction', video.restriction,
            attributes['restriction']))
    if is_present(video.gallery_loc):
        add(element('video:gallery_loc', video.gallery_loc,
            attributes['gallery_loc']))
    if is_present(video.price):
        add(element('video:price', video.price, attributes['price']))
    if is_present(video.requires_subscription):
        add(element('video:requires_subscription',
            video.requires_subscription))
    if is_present(video.uploader):
        add(element('video:uploader', video.uploader))
    if is_present(video.platform):
        add(element('video:platform', video.platform,
            attributes['platform']))
    if is_present(video.live):
        add(element('video:live', video.live))
    return node


def build_videos(videos):
    ''' Build one ``<video:video>`` per video, in order. '''
    return [build_video(video) for video in as_list(videos)]


def build_news(news):
    '''
    Build a ``<news:news>`` element.

    :param news: A news document or :class:`News`.
    :rtype: Element
    '''
    if not isinstance(news, News):
        news = News(news)
    publication = Element('news:publication', children=[
        cdata_element('news:name', news.publication.name),
        element('news:language', news.publication.language),
    ])
    node = Element('news:news', children=[publication])
    if is_present(news.access):
        node.children.append(element('news:access', news.access))
    if is_present(news.genres):
        node.children.append(element('news:genres', news.genres))
    node.children.append(
        element('news:publication_date', news.publication_date))
    node.children.append(cdata_element('news:title', news.title))
    if is_present(news.keywords):
        node.children.append(element('news:keywords', news.keywords))
    if is_present(news.stock_tickers):
        node.children.append(
            element('news:stock_tickers', news.stock_tickers))
    return node


def build_links(links):
    '''
    Build one alternate-language ``<xhtml:link>`` per link, in order.

    :param links: A list of link documents or :class:`Link`.
    :rtype: list[Element]
    '''
    nodes = list()
    for link in as_list(links):
        if not isinstance(link, Link):
            link = Link(link)
        nodes.append(element('xhtml:link', attrs={
            'rel': 'alternate',
            'hreflang': link.lang,
            'href': link.url,
        }))
    return nodes


def build_expires(expires):
    ''' Build ``<expires>`` with the date in strict ISO-8601 form. '''
    return element('expires', parse_expires(expires))


def build_android_link(url):
    ''' Build the ``<xhtml:link>`` pointing at an Android app URI. '''
    return element('xhtml:link', attrs={'rel': 'alternate', 'href': url})


def build_amp_link(url):
    ''' Build the ``<xhtml:link>`` pointing at the AMP version of a page. '''
    return element('xhtml:link', attrs={'rel': 'amphtml', 'href': url})


def build_mobile(mobile):
    '''
    Build ``<mobile:mobile>``.

    :param mobile: True, or a device type string which becomes the ``type``
        attribute.
    :rtype: Element
    '''
    if isinstance(mobile, str):
        return element('mobile:mobile', attrs={'type': mobile})
    return element('mobile:mobile')
