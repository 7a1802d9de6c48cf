'''
Normalize the dates found in an item document.

``lastmod`` is written as a W3C date (``YYYY-MM-DD``), or as a full UTC
timestamp when ``realtime`` is set. ``expires`` is always written as a full
ISO-8601 timestamp with milliseconds.
'''
from datetime import date, datetime, timezone
import logging
import os

import dateutil.parser
from dateutil.tz import tzlocal, tzoffset

from .errors import InvalidExpiresError, InvalidLastmodError


logger = logging.getLogger(__name__)
# Fills in whatever a partial date string leaves out, e.g. '2011-06'.
PARSE_DEFAULT = datetime(1970, 1, 1)


def get_timestamp_from_date(dt, realtime=False):
    '''
    Format a datetime as a sitemap ``lastmod`` value in UTC.

    :param datetime dt: An aware datetime.
    :param bool realtime: Include the time of day.
    :rtype: str
    '''
    dt = dt.astimezone(timezone.utc)
    timestamp = dt.strftime('%Y-%m-%d')
    if realtime:
        timestamp += dt.strftime('T%H:%M:%SZ')
    return timestamp


def _host_offset_minutes(now=None):
    ''' Minutes to add to local time to get UTC (west of UTC is positive). '''
    if now is None:
        now = datetime.now(tzlocal())
    return -int(now.utcoffset().total_seconds() // 60)


def local_offset_label(now=None):
    '''
    Describe the offset applied to naive ``lastmod`` strings, e.g.
    ``UTC-500``.

    The host offset is always rendered behind a minus sign: an east-of-UTC
    host would produce ``UTC--200``, which is corrected to ``UTC-200``.

    :param datetime now: An aware datetime whose offset stands in for the
        host's (default: the current local time).
    :rtype: str
    '''
    hours = _host_offset_minutes(now) / 60
    label = 'UTC-{:g}00'.format(hours)
    return label.replace('--', '-')


def local_offset(now=None):
    '''
    Return the tzinfo described by :func:`local_offset_label`.

    A date-only string placed in this zone lands on the same UTC day on every
    host, so ``lastmod`` does not depend on where the build runs.

    :rtype: dateutil.tz.tzoffset
    '''
    minutes = abs(_host_offset_minutes(now))
    return tzoffset(local_offset_label(now), -minutes * 60)


def parse_lastmod(value, realtime=False, now=None):
    '''
    Parse a date-like string into a ``lastmod`` value.

    :param value: A date string (any format ``dateutil`` understands) or a
        datetime.
    :type value: str or datetime
    :param bool realtime: Include the time of day.
    :param datetime now: Stand-in for the host clock, see
        :func:`local_offset_label`.
    :rtype: str
    :raises InvalidLastmodError: If the string is not a date.
    '''
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    else:
        try:
            dt = dateutil.parser.parse(value, default=PARSE_DEFAULT)
        except (OverflowError, TypeError, ValueError):
            raise InvalidLastmodError(value) from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=local_offset(now))
    return get_timestamp_from_date(dt, realtime)


def lastmod_from_file(path, realtime=False, stat=os.stat):
    '''
    Use a file's modification time as ``lastmod``.

    :param path: Path of the file.
    :param bool realtime: Include the time of day.
    :param stat: A callable like :func:`os.stat`. Its errors propagate.
    :rtype: str
    '''
    mtime = stat(path).st_mtime
    dt = datetime.fromtimestamp(mtime, timezone.utc)
    return get_timestamp_from_date(dt, realtime)


def normalize_lastmod(doc, realtime=False, stat=os.stat, now=None):
    '''
    Pick the ``lastmod`` value for an item document.

    ``lastmodFromFile`` wins over ``lastmod``, which wins over ``lastmodISO``
    (used verbatim).

    :param dict doc: An item document.
    :param bool realtime: Include the time of day.
    :param stat: Passed to :func:`lastmod_from_file`.
    :param datetime now: Passed to :func:`parse_lastmod`.
    :returns: The timestamp, or None if the document has no date.
    :rtype: str
    '''
    if doc.get('lastmodFromFile'):
        logger.debug('lastmod from file %s', doc['lastmodFromFile'])
        return lastmod_from_file(doc['lastmodFromFile'], realtime, stat)
    if doc.get('lastmod'):
        return parse_lastmod(doc['lastmod'], realtime, now)
    if doc.get('lastmodISO'):
        return doc['lastmodISO']
    return None


def parse_expires(value):
    '''
    Convert an expiry date to ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Naive dates and datetimes are taken to be UTC. Numbers are milliseconds
    since the epoch.

    :param value: A date string, date, datetime or number.
    :rtype: str
    :raises InvalidExpiresError: If the value is not a date.
    '''
    try:
        if isinstance(value, bool):
            raise TypeError(value)
        elif isinstance(value, datetime):
            dt = value
        elif isinstance(value, date):
            dt = datetime(value.year, value.month, value.day)
        elif isinstance(value, (int, float)):
            dt = datetime.fromtimestamp(value / 1000, timezone.utc)
        else:
            dt = dateutil.parser.parse(value, default=PARSE_DEFAULT)
    except (OSError, OverflowError, TypeError, ValueError):
        raise InvalidExpiresError(value) from None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return '{}.{:03d}Z'.format(dt.strftime('%Y-%m-%dT%H:%M:%S'),
        dt.microsecond // 1000)
