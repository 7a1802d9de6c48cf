'''
Exceptions raised while validating and building sitemap items.

Every error is a hard failure: the item (or the extension being built) is
abandoned and nothing partial is returned.
'''


class SitemapItemError(Exception):
    ''' Base class for sitemap item errors. '''


class NoURLError(SitemapItemError):
    ''' The item document has no ``url``. '''
    def __init__(self, message='URL is required'):
        super().__init__(message)


class PriorityInvalidError(SitemapItemError):
    ''' Priority is not a number between 0.0 and 1.0. '''
    def __init__(self, priority=None):
        self.priority = priority
        super().__init__(
            'Priority must be a number between 0.0 and 1.0 (got {!r})'.format(
            priority))


class ChangeFreqInvalidError(SitemapItemError):
    ''' Changefreq is not one of the protocol's values. '''
    def __init__(self, changefreq=None):
        self.changefreq = changefreq
        super().__init__('Invalid changefreq: {!r}'.format(changefreq))


class InvalidAttrError(SitemapItemError):
    ''' A namespaced attribute key is not of the form ``element:attribute``. '''
    def __init__(self, key):
        self.key = key
        super().__init__('Invalid attribute key: "{}"'.format(key))


class InvalidAttrValueError(SitemapItemError):
    ''' A value does not match the pattern registered for its key. '''
    def __init__(self, key, value, pattern):
        self.key = key
        self.value = value
        self.pattern = pattern
        super().__init__('Invalid value for "{}": {!r} (expected {})'.format(
            key, value, pattern))


class UnknownFieldError(SitemapItemError):
    ''' A document contains a key that its schema does not define. '''
    def __init__(self, schema, key):
        self.schema = schema
        self.key = key
        super().__init__('Unknown {} field: "{}"'.format(schema, key))


class InvalidImageFormatError(SitemapItemError):
    ''' An image is neither a location string nor a mapping with ``url``. '''
    def __init__(self, message='Image must be a URL or a mapping with "url"'):
        super().__init__(message)


class InvalidLinkFormatError(SitemapItemError):
    ''' An alternate link lacks ``lang`` or ``url``. '''
    def __init__(self, message='Link must be a mapping with "lang" and "url"'):
        super().__init__(message)


class InvalidVideoFormatError(SitemapItemError):
    ''' A video is not a mapping or lacks one of its required fields. '''
    def __init__(self, message='Video must be a mapping with "thumbnail_loc", '
            '"title" and "description"'):
        super().__init__(message)


class InvalidVideoDurationError(SitemapItemError):
    ''' Video duration is outside [0, 28800] seconds. '''
    def __init__(self, duration=None):
        self.duration = duration
        super().__init__(
            'Video duration must be between 0 and 28800 seconds (got {!r})'
            .format(duration))


class InvalidVideoDescriptionError(SitemapItemError):
    ''' Video description is longer than 2048 characters. '''
    def __init__(self, message='Video description must be at most 2048 '
            'characters'):
        super().__init__(message)


class InvalidNewsFormatError(SitemapItemError):
    ''' News metadata lacks one of its required fields. '''
    def __init__(self, message='News must have publication name, '
            'publication language, publication_date and title'):
        super().__init__(message)


class InvalidNewsAccessValueError(SitemapItemError):
    ''' News access is not ``Registration`` or ``Subscription``. '''
    def __init__(self, access=None):
        self.access = access
        super().__init__(
            'News access must be "Registration" or "Subscription" (got {!r})'
            .format(access))


class InvalidLastmodError(SitemapItemError):
    ''' A lastmod string cannot be parsed as a date. '''
    def __init__(self, value=None):
        self.value = value
        super().__init__('Cannot parse lastmod date: {!r}'.format(value))


class InvalidExpiresError(SitemapItemError):
    ''' An expires value cannot be parsed as a date. '''
    def __init__(self, value=None):
        self.value = value
        super().__init__('Cannot parse expires date: {!r}'.format(value))
