from jinja2 import Template
from typing import List

from rss_reader.exceptions import ContractError
from rss_reader.feed import items_of
from rss_reader.tree import Element, child_text, find_first_child_by_tag, text_of

# Extracted feed text goes in verbatim: no autoescape, by contract with the
# caller. A feed can therefore inject markup into the page.

HEADER_TMPL = [Template(l) for l in """<html>
<head>
<title>{{ page_title }}</title>
</head>
<body>
<h1><a href="{{ link }}">{{ title }}</a></h1>
<p>{{ description }}</p>
<table border="1">
<tr>
<th>Date</th>
<th>Source</th>
<th>News</th>
</tr>""".split("\n")]

ROW_TMPL = [Template(l) for l in """<tr>
<td>{{ date }}</td>
<td>{{ source }}</td>
<td><a href="{{ link }}">{{ news }}</a></td>
</tr>""".split("\n")]

FOOTER_LINES = ["</table>", "</body>", "</html>"]

EMPTY_TITLE = "Empty Title"
NO_DATE = "No Date Available"
NO_SOURCE = "No Source Available"
NO_TITLE = "No Title Available"


def _lines(templates: List[Template], **values) -> List[str]:
    # one output line per template line, even when feed text holds newlines
    return [t.render(**values) for t in templates]


def _expect(node: Element, tag: str) -> None:
    if node is None or not node.is_element or node.label != tag:
        raise ContractError(f"expected a <{tag}> element")


# ---------------------------------- header ------------------------------------

def render_header(channel: Element) -> List[str]:
    _expect(channel, "channel")
    title = child_text(channel, "title")
    link = child_text(channel, "link")
    description = child_text(channel, "description")
    return _lines(HEADER_TMPL, page_title=title or EMPTY_TITLE, title=title,
                  link=link, description=description)


# ----------------------------------- rows -------------------------------------

def _source_cell(item: Element) -> str:
    idx = find_first_child_by_tag(item, "source")
    if idx is None:
        return NO_SOURCE
    source = item.child(idx)
    name = text_of(source)
    if not name:
        return NO_SOURCE
    return f'<a href="{source.attribute("url")}">{name}</a>'


def _news_text(item: Element) -> str:
    title = child_text(item, "title")
    if title:
        return title
    # description is optional in RSS 2.0 once a title exists; treat absent as empty
    idx = find_first_child_by_tag(item, "description")
    description = text_of(item.child(idx)) if idx is not None else ""
    return description or NO_TITLE


def render_item(item: Element) -> List[str]:
    _expect(item, "item")
    date = child_text(item, "pubDate") or NO_DATE
    source = _source_cell(item)
    news = _news_text(item)
    link = child_text(item, "link")
    return _lines(ROW_TMPL, date=date, source=source, news=news, link=link)


# ---------------------------------- footer ------------------------------------

def render_footer() -> List[str]:
    return list(FOOTER_LINES)


# ---------------------------------- document ----------------------------------

def render(channel: Element) -> List[str]:
    lines = render_header(channel)
    for item in items_of(channel):
        lines.extend(render_item(item))
    lines.extend(render_footer())
    return lines

