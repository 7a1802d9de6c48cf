import argparse
import json
import logging
import sys

from .config import ItemDefaults, get_config
from .errors import SitemapItemError
from .item import SitemapItem
from .tree import serialize, urlset


logger = logging.getLogger(__name__)


def configure_logging(log_level, error_log):
    ''' Set default format and output stream for logging. '''
    log_format = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
    log_date_format = '%Y-%m-%d %H:%M:%S'
    log_formatter = logging.Formatter(log_format, log_date_format)
    log_level = getattr(logging, log_level.upper())
    log_handler = logging.StreamHandler(sys.stderr)
    log_handler.setFormatter(log_formatter)
    log_handler.setLevel(log_level)
    logger = logging.getLogger()
    logger.addHandler(log_handler)
    logger.setLevel(log_level)

    if error_log is not None:
        exc_handler = logging.FileHandler(error_log)
        exc_handler.setFormatter(log_formatter)
        exc_handler.setLevel(logging.ERROR)
        logger.addHandler(exc_handler)


def get_args(argv=None):
    ''' Parse command line arguments. '''
    arg_parser = argparse.ArgumentParser(
        description='Render sitemap <url> elements from JSON item documents')
    arg_parser.add_argument(
        'item_file',
        type=argparse.FileType('r'),
        help='JSON file holding one item document or a list of them '
             '("-" for stdin)'
    )
    arg_parser.add_argument(
        '--log-level',
        default='warning',
        metavar='LEVEL',
        choices=['debug', 'info', 'warning', 'error', 'critical'],
        help='Set logging verbosity (default: warning)'
    )
    arg_parser.add_argument(
        '--error-log',
        help='Copy error logs to the specified file.'
    )
    arg_parser.add_argument(
        '--urlset',
        action='store_true',
        help='Wrap the output in a <urlset> declaring the sitemap namespaces.'
    )
    return arg_parser.parse_args(argv)


def run(args, out=sys.stdout):
    '''
    Render the items named by ``args`` to ``out``.

    :returns: Process exit status.
    :rtype: int
    '''
    defaults = ItemDefaults.from_config(get_config())
    try:
        with args.item_file as f:
            docs = json.load(f)
    except ValueError as exc:
        logger.error('Cannot read %s: %s', args.item_file.name, exc)
        return 1
    if not isinstance(docs, list):
        docs = [docs]

    try:
        nodes = [SitemapItem(doc, defaults).build() for doc in docs]
    except (OSError, SitemapItemError, TypeError) as exc:
        logger.error('Cannot build sitemap item: %s', exc)
        return 1

    logger.info('Built %d item(s)', len(nodes))
    if args.urlset:
        out.write(serialize(urlset(nodes)) + '\n')
    else:
        for node in nodes:
            out.write(serialize(node) + '\n')
    return 0


def main():
    ''' Parse arguments, set up logging, and render items. '''
    args = get_args()
    configure_logging(args.log_level, args.error_log)
    sys.exit(run(args))


if __name__ == '__main__':
    main()
