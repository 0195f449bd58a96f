"""Gitmoji catalogue with a once-a-day refresh from gitmoji.dev."""

import json
import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import List, Optional

import requests
from pydantic import BaseModel, Field, ValidationError

from ...engine.loader import DEFAULTS_PATH

logger = logging.getLogger(__name__)

GITMOJI_URL = "https://gitmoji.dev/api/gitmojis"
BUNDLED_PATH = DEFAULTS_PATH.parent / "gitmojis.json"
DEFAULT_CACHE_PATH = Path.home() / ".cache" / "commit-composer" / "gitmojis.json"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
REFRESH_INTERVAL = timedelta(days=1)


class Gitmoji(BaseModel):
    emoji: str
    entity: Optional[str] = None
    code: str
    description: str
    name: str
    semver: Optional[str] = None


class GitmojiCache(BaseModel):
    gitmojis: List[Gitmoji] = Field(default_factory=list)
    last_time: str = Field("1970-01-01 00:00:00", alias="lastTime")


class GitmojiCatalog:
    """
    Gitmoji list backed by a JSON cache file.

    The cache falls back to the copy bundled with the package. When
    ``update`` is enabled and the cache is more than a day old, the list is
    fetched again and written back to ``cache_path``.
    """

    def __init__(self, cache_path: Optional[Path] = None, update: bool = False):
        self.cache_path = Path(cache_path) if cache_path else DEFAULT_CACHE_PATH
        self.update = update
        self._cache: Optional[GitmojiCache] = None

    def _load(self) -> GitmojiCache:
        path = self.cache_path if self.cache_path.exists() else BUNDLED_PATH
        with open(path, 'r', encoding='utf-8') as f:
            return GitmojiCache(**json.load(f))

    @property
    def cache(self) -> GitmojiCache:
        if self._cache is None:
            self._cache = self._load()
        return self._cache

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now()
        try:
            last_time = datetime.strptime(self.cache.last_time, TIME_FORMAT)
        except ValueError:
            return True
        return last_time + REFRESH_INTERVAL < now

    def refresh(self, now: Optional[datetime] = None) -> bool:
        """Fetch the latest catalogue when the cache is stale.

        Failures are logged and the cached list is kept.

        Returns:
            True if the cache was replaced
        """
        if not self.update or not self.is_stale(now):
            return False
        try:
            response = requests.get(GITMOJI_URL, timeout=10)
            response.raise_for_status()
            fresh = GitmojiCache(
                gitmojis=response.json()['gitmojis'],
                lastTime=(now or datetime.now()).strftime(TIME_FORMAT),
            )
        except (requests.RequestException, ValueError, KeyError, ValidationError) as e:
            logger.error(f"Failed to fetch gitmojis: {e}")
            logger.info("Using the local gitmoji cache")
            return False

        self._cache = fresh
        self._save()
        return True

    def _save(self) -> None:
        self.cache_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.cache_path, 'w', encoding='utf-8') as f:
            f.write(json.dumps(self.cache.model_dump(by_alias=True), ensure_ascii=False, indent=2))
            f.write("\n")

    def gitmojis(self) -> List[Gitmoji]:
        self.refresh()
        return list(self.cache.gitmojis)
