import os, requests
import xml.etree.ElementTree as ET
from typing import Dict, List
from urllib.parse import urlsplit
from urllib.request import url2pathname
from requests.exceptions import RequestException

from rss_reader.exceptions import FeedFetchError, FeedParseError
from rss_reader.tree import Element, Node, Text

DEFAULT_HEADERS = {
    # Some publishers refuse the default python-requests UA
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/124.0.0.0 Safari/537.36"
    ),
    "Accept": "application/rss+xml,application/xml;q=0.9,text/xml;q=0.8,*/*;q=0.5",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "close",
}

DEFAULT_TIMEOUT = 12


# --------------------------------- parse --------------------------------------

def _is_blank(s: str | None) -> bool:
    return s is None or not s.strip()

def from_etree(elem: ET.Element) -> Element:
    """Convert an ElementTree element into the reader's tree.

    Leaf elements always get one Text child (possibly empty). Elements with
    element children only keep non-blank text runs, each as its own Text node.
    """
    kids = list(elem)
    children: List[Node] = []
    if not kids:
        children.append(Text(elem.text or ""))
    else:
        if not _is_blank(elem.text):
            children.append(Text(elem.text))
        for k in kids:
            children.append(from_etree(k))
            if not _is_blank(k.tail):
                children.append(Text(k.tail))
    return Element(elem.tag, dict(elem.attrib), tuple(children))

def parse_xml(text: str | bytes) -> Element:
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        raise FeedParseError(f"feed is not well-formed XML: {e}") from e
    return from_etree(root)


# --------------------------------- fetch --------------------------------------

def _is_remote(source: str) -> bool:
    return urlsplit(source).scheme.lower() in ("http", "https")

def _local_path(source: str) -> str:
    u = urlsplit(source)
    if u.scheme.lower() == "file":
        return url2pathname(u.path)
    return os.path.expanduser(source)

def fetch_feed(source: str, timeout: float | None = None,
               headers: Dict[str, str] | None = None) -> bytes:
    """Raw feed bytes from an http(s) URL or a local path / file:// URL."""
    source = (source or "").strip()
    if not source:
        raise FeedFetchError("no feed URL given")

    if _is_remote(source):
        try:
            r = requests.get(
                source, timeout=timeout or DEFAULT_TIMEOUT,
                headers={**DEFAULT_HEADERS, **(headers or {})},
                allow_redirects=True,
            )
            r.raise_for_status()
        except RequestException as e:
            raise FeedFetchError(f"could not fetch {source}: {e}") from e
        return r.content

    path = _local_path(source)
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FeedFetchError(f"could not read {path}: {e}") from e

def load_feed(source: str, timeout: float | None = None,
              headers: Dict[str, str] | None = None) -> Element:
    return parse_xml(fetch_feed(source, timeout=timeout, headers=headers))
