import logging

from .errors import SitemapItemError
from .item import SitemapItem
from .version import __version__


logger = logging.getLogger(__name__)
VERSION = __version__
