# Error taxonomy for the reader. Recoverable absences (empty or optional
# fields) never raise: the renderer substitutes fallback text instead.


class RssReaderError(Exception):
    """Base class for everything this package raises on purpose."""


class ContractError(RssReaderError):
    """A documented precondition was violated (wrong node kind or tag)."""


class MissingElementError(ContractError):
    """A child element the renderer relies on is not there."""

    def __init__(self, parent_tag: str, tag: str):
        self.parent_tag = parent_tag
        self.tag = tag
        super().__init__(f"<{parent_tag}> has no <{tag}> child")


class InvalidFeedError(RssReaderError):
    """Root is not <rss version="2.0">."""

    def __init__(self, message: str = "not a valid RSS 2.0 feed"):
        super().__init__(message)


class FeedParseError(RssReaderError):
    pass


class FeedFetchError(RssReaderError):
    pass


class ConfigError(RssReaderError):
    pass
