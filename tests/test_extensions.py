import pytest

from sitemapitem import schema
from sitemapitem.errors import (
    InvalidAttrError,
    InvalidExpiresError,
    InvalidNewsFormatError,
    InvalidVideoDurationError,
    InvalidVideoFormatError,
)
from sitemapitem.extensions import (
    build_amp_link,
    build_android_link,
    build_expires,
    build_images,
    build_links,
    build_mobile,
    build_news,
    build_video,
    build_videos,
)
from sitemapitem.schema import Video
from sitemapitem.tree import serialize


FULL_VIDEO = {
    'thumbnail_loc': 'https://example.com/t.jpg',
    'title': 'Grilling steaks',
    'description': 'How to grill',
    'content_loc': 'https://example.com/v.mp4',
    'player_loc': 'https://example.com/player',
    'player_loc:autoplay': 'ap=1',
    'duration': 600,
    'expiration_date': '2030-11-05T19:20:30+08:00',
    'rating': 4.2,
    'view_count': 12345,
    'publication_date': '2020-11-05',
    'family_friendly': 'yes',
    'tag': ['steak', 'meat'],
    'category': 'Grilling',
    'restriction': 'IE GB US CA',
    'restriction:relationship': 'allow',
    'gallery_loc': 'https://example.com/gallery',
    'gallery_loc:title': 'Cooking',
    'price': '1.99',
    'price:currency': 'EUR',
    'price:type': 'rent',
    'price:resolution': 'HD',
    'requires_subscription': 'no',
    'uploader': 'GrillyMcGrillerson',
    'platform': 'web mobile',
    'platform:relationship': 'deny',
    'live': 'no',
}


def test_build_video_all_fields():
    assert serialize(build_video(FULL_VIDEO)) == (
        '<video:video>'
        '<video:thumbnail_loc>https://example.com/t.jpg</video:thumbnail_loc>'
        '<video:title><![CDATA[Grilling steaks]]></video:title>'
        '<video:description><![CDATA[How to grill]]></video:description>'
        '<video:content_loc>https://example.com/v.mp4</video:content_loc>'
        '<video:player_loc autoplay="ap=1">https://example.com/player'
            '</video:player_loc>'
        '<video:duration>600</video:duration>'
        '<video:expiration_date>2030-11-05T19:20:30+08:00'
            '</video:expiration_date>'
        '<video:rating>4.2</video:rating>'
        '<video:view_count>12345</video:view_count>'
        '<video:publication_date>2020-11-05</video:publication_date>'
        '<video:family_friendly>yes</video:family_friendly>'
        '<video:tag>steak</video:tag>'
        '<video:tag>meat</video:tag>'
        '<video:category>Grilling</video:category>'
        '<video:restriction relationship="allow">IE GB US CA'
            '</video:restriction>'
        '<video:gallery_loc title="Cooking">https://example.com/gallery'
            '</video:gallery_loc>'
        '<video:price resolution="HD" currency="EUR" type="rent">1.99'
            '</video:price>'
        '<video:requires_subscription>no</video:requires_subscription>'
        '<video:uploader>GrillyMcGrillerson</video:uploader>'
        '<video:platform relationship="deny">web mobile</video:platform>'
        '<video:live>no</video:live>'
        '</video:video>'
    )


def test_build_video_minimal():
    node = build_video({'thumbnail_loc': 't.jpg', 'title': 'T',
        'description': 'D'})
    assert [child.name for child in node.children] == [
        'video:thumbnail_loc', 'video:title', 'video:description']


def test_build_video_attributes_optional():
    video = dict(FULL_VIDEO)
    del video['player_loc:autoplay']
    del video['gallery_loc:title']
    node = build_video(video)
    assert node.find('video:player_loc').attrs == {}
    assert node.find('video:gallery_loc').attrs == {}


@pytest.mark.parametrize('duration', [0, 28800])
def test_build_video_duration_bounds(duration):
    video = dict(FULL_VIDEO, duration=duration)
    assert build_video(video).find('video:duration').text == str(duration)


def test_build_video_errors():
    with pytest.raises(InvalidVideoFormatError):
        build_video({'title': 'T', 'description': 'D'})
    with pytest.raises(InvalidVideoDurationError):
        build_video(dict(FULL_VIDEO, duration=28801))


def test_build_video_from_schema_is_repeatable():
    video = Video(FULL_VIDEO)
    assert serialize(build_video(video)) == serialize(build_video(video))


def test_build_videos():
    second = dict(FULL_VIDEO, title='Second')
    nodes = build_videos([FULL_VIDEO, second])
    assert [node.find('video:title').text for node in nodes] == \
        ['Grilling steaks', 'Second']
    assert len(build_videos(FULL_VIDEO)) == 1


def test_build_images():
    nodes = build_images([
        'https://example.com/1.jpg',
        {
            'url': 'https://example.com/2.jpg',
            'caption': 'A & B',
            'geoLocation': 'Limerick, Ireland',
            'title': 'Two',
            'license': 'https://example.com/license',
        },
    ])
    assert [serialize(node) for node in nodes] == [
        '<image:image><image:loc>https://example.com/1.jpg</image:loc>'
            '</image:image>',
        '<image:image>'
        '<image:loc>https://example.com/2.jpg</image:loc>'
        '<image:caption><![CDATA[A & B]]></image:caption>'
        '<image:geo_location>Limerick, Ireland</image:geo_location>'
        '<image:title><![CDATA[Two]]></image:title>'
        '<image:license>https://example.com/license</image:license>'
        '</image:image>',
    ]


def test_build_single_image():
    nodes = build_images({'url': 'https://example.com/1.jpg'})
    assert len(nodes) == 1


def test_build_news():
    node = build_news({
        'publication': {'name': 'The Example Times', 'language': 'en'},
        'access': 'Registration',
        'genres': 'PressRelease, Blog',
        'publication_date': '2008-12-23',
        'title': 'Companies A, B in Merger Talks',
        'keywords': 'business, merger',
        'stock_tickers': 'NASDAQ:A, NASDAQ:B',
    })
    assert serialize(node) == (
        '<news:news>'
        '<news:publication>'
        '<news:name><![CDATA[The Example Times]]></news:name>'
        '<news:language>en</news:language>'
        '</news:publication>'
        '<news:access>Registration</news:access>'
        '<news:genres>PressRelease, Blog</news:genres>'
        '<news:publication_date>2008-12-23</news:publication_date>'
        '<news:title><![CDATA[Companies A, B in Merger Talks]]></news:title>'
        '<news:keywords>business, merger</news:keywords>'
        '<news:stock_tickers>NASDAQ:A, NASDAQ:B</news:stock_tickers>'
        '</news:news>'
    )


def test_build_news_minimal():
    node = build_news({
        'publication': {'name': 'The Example Times', 'language': 'en'},
        'publication_date': '2008-12-23',
        'title': 'T',
    })
    assert [child.name for child in node.children] == [
        'news:publication', 'news:publication_date', 'news:title']


def test_build_news_missing_language():
    with pytest.raises(InvalidNewsFormatError):
        build_news({
            'publication': {'name': 'The Example Times'},
            'publication_date': '2008-12-23',
            'title': 'T',
        })


def test_build_links():
    nodes = build_links([
        {'lang': 'en', 'url': 'https://example.com/en'},
        {'lang': 'ja', 'url': 'https://example.com/ja'},
    ])
    assert [serialize(node) for node in nodes] == [
        '<xhtml:link rel="alternate" hreflang="en" '
            'href="https://example.com/en"/>',
        '<xhtml:link rel="alternate" hreflang="ja" '
            'href="https://example.com/ja"/>',
    ]


def test_build_android_link():
    assert serialize(build_android_link('android-app://com.example/page')) \
        == '<xhtml:link rel="alternate" href="android-app://com.example/page"/>'


def test_build_amp_link():
    assert serialize(build_amp_link('https://example.com/amp')) == \
        '<xhtml:link rel="amphtml" href="https://example.com/amp"/>'


def test_build_mobile():
    assert serialize(build_mobile(True)) == '<mobile:mobile/>'
    assert serialize(build_mobile('pc,mobile')) == \
        '<mobile:mobile type="pc,mobile"/>'


def test_build_expires():
    assert serialize(build_expires('2016-09-13')) == \
        '<expires>2016-09-13T00:00:00.000Z</expires>'
    with pytest.raises(InvalidExpiresError):
        build_expires('garbage')


def test_malformed_attribute_key_in_registry(monkeypatch):
    monkeypatch.setitem(schema.VIDEO_ATTRIBUTES, 'price', ('price',))
    with pytest.raises(InvalidAttrError):
        build_video(dict(FULL_VIDEO))
