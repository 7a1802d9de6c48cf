'''
A minimal XML tree: node types, a builder interface, and a string serializer.

Sitemap code produces :class:`Element` trees. Turning a tree into text is the
job of a :class:`TreeBuilder`, so any XML library can be plugged in by
implementing that interface. :class:`StringTreeBuilder` is the default.
'''
from dataclasses import dataclass, field
import logging
from typing import Dict, List, Union
from xml.sax.saxutils import escape, quoteattr


logger = logging.getLogger(__name__)

SITEMAP_NS = 'http://www.sitemaps.org/schemas/sitemap/0.9'
NAMESPACES = {
    '': SITEMAP_NS,
    'news': 'http://www.google.com/schemas/sitemap-news/0.9',
    'xhtml': 'http://www.w3.org/1999/xhtml',
    'mobile': 'http://www.google.com/schemas/sitemap-mobile/1.0',
    'image': 'http://www.google.com/schemas/sitemap-image/1.1',
    'video': 'http://www.google.com/schemas/sitemap-video/1.1',
}


@dataclass(frozen=True)
class Text:
    ''' Character data, escaped on output. '''
    value: str


@dataclass(frozen=True)
class CData:
    ''' Character data wrapped in a CDATA section. '''
    value: str


@dataclass(frozen=True)
class Raw:
    ''' Markup written out exactly as given. '''
    value: str


@dataclass
class Element:
    ''' An XML element with ordered attributes and children. '''
    name: str
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List[Union['Element', Text, CData, Raw]] = \
        field(default_factory=list)

    def find(self, name):
        ''' Return the first child element called ``name``, or None. '''
        for child in self.children:
            if isinstance(child, Element) and child.name == name:
                return child
        return None

    def findall(self, name):
        ''' Return all child elements called ``name``. '''
        return [child for child in self.children
            if isinstance(child, Element) and child.name == name]

    @property
    def text(self):
        ''' The concatenated character data of this element's own leaves. '''
        return ''.join(child.value for child in self.children
            if not isinstance(child, Element))


def element(name, value=None, attrs=None):
    '''
    Create an element holding escaped text.

    :param str name: Element name (with prefix, e.g. ``video:title``).
    :param value: Text content, converted with ``str()``. None for an empty
        element.
    :param dict attrs: Attributes; None values are left out.
    :rtype: Element
    '''
    node = Element(name, _clean_attrs(attrs))
    if value is not None:
        node.children.append(Text(_to_text(value)))
    return node


def cdata_element(name, value, attrs=None):
    ''' Create an element whose content is a CDATA section. '''
    node = Element(name, _clean_attrs(attrs))
    node.children.append(CData(_to_text(value)))
    return node


def raw_element(name, value, attrs=None):
    ''' Create an element whose content is written out unescaped. '''
    node = Element(name, _clean_attrs(attrs))
    node.children.append(Raw(_to_text(value)))
    return node


def _to_text(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def _clean_attrs(attrs):
    if not attrs:
        return dict()
    return {name: _to_text(value) for name, value in attrs.items()
        if value is not None}


class TreeBuilder:
    '''
    Interface for turning :class:`Element` trees into output.

    Element handles are opaque to callers: they come from
    :meth:`create_element` and are passed back into the other methods.
    '''

    def create_element(self, name, parent=None):
        ''' Create an element, appended to ``parent`` if given. '''
        raise NotImplementedError()

    def set_attribute(self, handle, name, value):
        ''' Set an attribute on an element. '''
        raise NotImplementedError()

    def append_text(self, handle, value):
        ''' Append escaped character data. '''
        raise NotImplementedError()

    def append_cdata(self, handle, value):
        ''' Append a CDATA section. '''
        raise NotImplementedError()

    def append_raw(self, handle, value):
        ''' Append markup without escaping it. '''
        raise NotImplementedError()

    def serialize(self, handle):
        ''' Return the element as a string. '''
        raise NotImplementedError()


class StringTreeBuilder(TreeBuilder):
    ''' Builds compact XML text with no whitespace between elements. '''

    class _Handle:
        def __init__(self, name):
            self.name = name
            self.attrs = list()
            self.parts = list()

    def create_element(self, name, parent=None):
        handle = StringTreeBuilder._Handle(name)
        if parent is not None:
            parent.parts.append(handle)
        return handle

    def set_attribute(self, handle, name, value):
        handle.attrs.append((name, value))

    def append_text(self, handle, value):
        handle.parts.append(escape(value))

    def append_cdata(self, handle, value):
        # A CDATA section cannot contain "]]>", so split it across two.
        value = value.replace(']]>', ']]]]><![CDATA[>')
        handle.parts.append('<![CDATA[{}]]>'.format(value))

    def append_raw(self, handle, value):
        handle.parts.append(value)

    def serialize(self, handle):
        attrs = ''.join(' {}={}'.format(name, quoteattr(value))
            for name, value in handle.attrs)
        if not handle.parts:
            return '<{}{}/>'.format(handle.name, attrs)
        content = ''.join(part if isinstance(part, str)
            else self.serialize(part) for part in handle.parts)
        return '<{0}{1}>{2}</{0}>'.format(handle.name, attrs, content)


def render(node, builder, parent=None):
    '''
    Replay ``node`` into ``builder``.

    :param Element node: The tree to render.
    :param TreeBuilder builder: The builder to drive.
    :param parent: A handle from ``builder`` to attach the new element to.
    :returns: The builder's handle for ``node``.
    '''
    handle = builder.create_element(node.name, parent)
    for name, value in node.attrs.items():
        builder.set_attribute(handle, name, value)
    for child in node.children:
        if isinstance(child, Element):
            render(child, builder, handle)
        elif isinstance(child, CData):
            builder.append_cdata(handle, child.value)
        elif isinstance(child, Raw):
            builder.append_raw(handle, child.value)
        else:
            builder.append_text(handle, child.value)
    return handle


def serialize(node, builder=None):
    '''
    Serialize ``node`` to a string.

    :param Element node: The tree to serialize.
    :param TreeBuilder builder: Defaults to a new :class:`StringTreeBuilder`.
    :rtype: str
    '''
    if builder is None:
        builder = StringTreeBuilder()
    return builder.serialize(render(node, builder))


def urlset(nodes):
    '''
    Wrap ``<url>`` elements in a ``<urlset>`` that declares every sitemap
    namespace.

    :param list nodes: Elements built by :class:`sitemapitem.item.SitemapItem`.
    :rtype: Element
    '''
    attrs = dict()
    for prefix, uri in NAMESPACES.items():
        attrs['xmlns:' + prefix if prefix else 'xmlns'] = uri
    return Element('urlset', attrs, list(nodes))
