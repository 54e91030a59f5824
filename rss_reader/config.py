import os, yaml
from typing import Dict, List

from rss_reader.exceptions import ConfigError

# Configuration via environment variables (.env is loaded by the CLI)

def fetch_timeout() -> float:
    raw = os.getenv("RSS_FETCH_TIMEOUT", "12")
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"RSS_FETCH_TIMEOUT must be a number, got {raw!r}")

def user_agent_headers() -> Dict[str, str]:
    ua = os.getenv("RSS_USER_AGENT")
    return {"User-Agent": ua} if ua else {}

def feeds_path() -> str:
    return os.getenv("RSS_FEEDS_PATH", "feeds.yml")

def debug_enabled() -> bool:
    return bool(os.getenv("DEBUG"))


def load_feeds(path: str | None = None) -> List[Dict]:
    path = path or feeds_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            feeds = yaml.safe_load(f) or []
    except FileNotFoundError:
        raise ConfigError(f"feed list not found: {path}")
    except yaml.YAMLError as e:
        raise ConfigError(f"feed list {path} is not valid YAML: {e}") from e

    if not isinstance(feeds, list):
        raise ConfigError(f"feed list {path} must be a YAML list")
    for i, f in enumerate(feeds):
        if not isinstance(f, dict) or not f.get("url") or not f.get("output"):
            raise ConfigError(f"feed #{i + 1} in {path} needs both 'url' and 'output'")
        f.setdefault("name", f["url"])
    return feeds
