import pytest

from rss_reader.ingest.xml_tree import parse_xml

from sample_feeds import feed_xml


@pytest.fixture
def make_channel():
    """Parse a feed document and hand back its <channel> element."""
    def _make(*items, **kw):
        root = parse_xml(feed_xml("".join(items), **kw))
        return root.child(0)
    return _make
