import sys, argparse
from typing import Callable, Dict, List
from dotenv import load_dotenv

from rss_reader import config
from rss_reader.exceptions import (
    ConfigError, FeedFetchError, FeedParseError, InvalidFeedError, MissingElementError,
    RssReaderError,
)
from rss_reader.feed import channel_of, items_of, require_rss2
from rss_reader.format.html import render
from rss_reader.ingest.xml_tree import load_feed
from rss_reader.sinks import LineWriter
from rss_reader.tree import Element

URL_PROMPT = "Enter the URL of an RSS 2.0 news feed: "
OUTPUT_PROMPT = "Enter the name of the output file including the .html extension: "

# Anything that should send the user back to the URL prompt
FEED_ERRORS = (InvalidFeedError, FeedParseError, FeedFetchError, MissingElementError)


# --------------------------------- logging ------------------------------------

def _debug(enabled: bool, msg: str) -> None:
    # stderr, so `--output -` leaves stdout as pure HTML
    if enabled:
        print(msg, file=sys.stderr)

def _error(msg: str) -> None:
    print(f"error: {msg}", file=sys.stderr)


# --------------------------------- ingest -------------------------------------

def open_feed(url: str, timeout: float, headers: Dict[str, str], debug: bool = False) -> Element:
    _debug(debug, f"[fetch] {url} (timeout={timeout}s)")
    root = require_rss2(load_feed(url, timeout=timeout, headers=headers))
    channel = channel_of(root)
    _debug(debug, f"[fetch] channel ok, items={len(items_of(channel))}")
    return channel

def prompt_feed(ask: Callable[[str], str], timeout: float, headers: Dict[str, str],
                debug: bool = False) -> Element:
    """Keep asking for a URL until one loads as RSS 2.0."""
    while True:
        url = ask(URL_PROMPT).strip()
        try:
            return open_feed(url, timeout, headers, debug=debug)
        except FEED_ERRORS as e:
            _error(str(e))


# --------------------------------- output -------------------------------------

def write_html(channel: Element, output: str, debug: bool = False) -> int:
    # render before opening so a broken feed never leaves a half-written file
    lines = render(channel)
    _debug(debug, f"[render] lines={len(lines)}")
    with LineWriter(None if output == "-" else output) as out:
        for line in lines:
            out.write_line(line)
        _debug(debug, f"[write] {out.name}")
    return len(lines)


# --------------------------------- batch --------------------------------------

def run_batch(path: str | None, timeout: float, headers: Dict[str, str], debug: bool = False) -> int:
    feeds = config.load_feeds(path)
    _debug(debug, f"[config] feeds= {[f['name'] for f in feeds]}")
    failed: List[str] = []
    for f in feeds:
        try:
            channel = open_feed(f["url"], timeout, headers, debug=debug)
            write_html(channel, f["output"], debug=debug)
            print(f"Wrote {f['name']} to: {f['output']}")
        except (RssReaderError, OSError) as e:
            _error(f"skipped {f['name']} ({f['url']}): {e}")
            failed.append(f["name"])
    return 1 if failed else 0


# --------------------------------- CLI args -----------------------------------

def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Convert an RSS 2.0 feed into an HTML table of news items")
    p.add_argument("--url", type=str, default=None, help="Feed URL or local file (prompted if omitted)")
    p.add_argument("--output", type=str, default=None, help="Output .html file, '-' for stdout (prompted if omitted)")
    p.add_argument("--batch", nargs="?", const="", default=None, metavar="FEEDS_YML",
                   help="Render every feed listed in a YAML file (default: RSS_FEEDS_PATH or feeds.yml)")
    p.add_argument("--timeout", type=float, default=None, help="Override RSS_FETCH_TIMEOUT")
    p.add_argument("--debug", action="store_true", help="Verbose debug logging to stderr")
    return p.parse_args(argv)


# ----------------------------------- main -------------------------------------

def main(argv=None, ask: Callable[[str], str] = input) -> int:
    load_dotenv()
    args = _parse_args(argv)
    debug = args.debug or config.debug_enabled()

    try:
        timeout = args.timeout or config.fetch_timeout()
        headers = config.user_agent_headers()

        if args.batch is not None:
            return run_batch(args.batch or None, timeout, headers, debug=debug)

        if args.url is None:
            channel = prompt_feed(ask, timeout, headers, debug=debug)
        else:
            channel = open_feed(args.url, timeout, headers, debug=debug)

        output = args.output if args.output is not None else ask(OUTPUT_PROMPT).strip()
        if not output:
            raise ConfigError("no output file given")
        write_html(channel, output, debug=debug)
    except RssReaderError as e:
        _error(str(e))
        return 1
    except OSError as e:
        _error(f"could not write output: {e}")
        return 1
    except (EOFError, KeyboardInterrupt):
        # stdin closed or Ctrl-C at a prompt
        _error("aborted, no feed rendered")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())


# Local examples:
# python -m rss_reader.main --url https://feeds.bbci.co.uk/news/rss.xml --output bbc.html
# python -m rss_reader.main --url feed.xml --output - --debug
# python -m rss_reader.main --batch feeds.yml
