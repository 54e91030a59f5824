"""Tests for environment and feed-list configuration."""

import pytest

from rss_reader import config
from rss_reader.exceptions import ConfigError


class TestEnv:

    def test_defaults(self, monkeypatch):
        for k in ("RSS_FETCH_TIMEOUT", "RSS_USER_AGENT", "RSS_FEEDS_PATH", "DEBUG"):
            monkeypatch.delenv(k, raising=False)
        assert config.fetch_timeout() == 12
        assert config.user_agent_headers() == {}
        assert config.feeds_path() == "feeds.yml"
        assert config.debug_enabled() is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("RSS_FETCH_TIMEOUT", "2.5")
        monkeypatch.setenv("RSS_USER_AGENT", "reader/1.0")
        monkeypatch.setenv("DEBUG", "1")
        assert config.fetch_timeout() == 2.5
        assert config.user_agent_headers() == {"User-Agent": "reader/1.0"}
        assert config.debug_enabled() is True

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("RSS_FETCH_TIMEOUT", "soon")
        with pytest.raises(ConfigError):
            config.fetch_timeout()


class TestLoadFeeds:

    def test_loads_list(self, tmp_path):
        path = tmp_path / "feeds.yml"
        path.write_text(
            "- name: One\n  url: http://one/rss\n  output: one.html\n"
            "- url: http://two/rss\n  output: two.html\n",
            encoding="utf-8",
        )
        feeds = config.load_feeds(str(path))
        assert [f["name"] for f in feeds] == ["One", "http://two/rss"]
        assert feeds[1]["output"] == "two.html"

    def test_env_path(self, tmp_path, monkeypatch):
        path = tmp_path / "list.yml"
        path.write_text("- {url: u, output: o}\n", encoding="utf-8")
        monkeypatch.setenv("RSS_FEEDS_PATH", str(path))
        assert config.load_feeds()[0]["url"] == "u"

    def test_empty_file_is_empty_list(self, tmp_path):
        path = tmp_path / "feeds.yml"
        path.write_text("", encoding="utf-8")
        assert config.load_feeds(str(path)) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            config.load_feeds(str(tmp_path / "none.yml"))

    @pytest.mark.parametrize("body", [
        "url: http://x\n",
        "- name: no output\n  url: http://x\n",
        "- just a string\n",
        "- [unclosed\n",
    ])
    def test_invalid(self, tmp_path, body):
        path = tmp_path / "feeds.yml"
        path.write_text(body, encoding="utf-8")
        with pytest.raises(ConfigError):
            config.load_feeds(str(path))
