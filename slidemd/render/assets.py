"""Syntax-highlighter assets fetched from a CDN and cached on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol, Tuple

import requests

from ..errors import AssetFetchError
from ..logging_utils import ASSET_CACHE_HIT, ASSET_DOWNLOADED, log_event

PRISM_VERSION = "1.30.0"
PRISM_CDN = f"https://cdnjs.cloudflare.com/ajax/libs/prism/{PRISM_VERSION}"
PRISM_THEME = "prism-okaidia"
REQUEST_TIMEOUT_SECONDS = 30


class AssetProvider(Protocol):
    def fetch(self, url: str, cache_key: str) -> str:
        ...


def highlighter_css() -> Tuple[str, str]:
    return f"{PRISM_CDN}/themes/{PRISM_THEME}.min.css", f"{PRISM_THEME}.min.css"


def highlighter_scripts(languages: Iterable[str]) -> List[Tuple[str, str]]:
    """(url, cache_key) pairs for the Prism core plus one component per language."""
    scripts = [(f"{PRISM_CDN}/prism.min.js", "prism-core.min.js")]
    for language in languages:
        scripts.append(
            (f"{PRISM_CDN}/components/prism-{language}.min.js", f"prism-{language}.min.js")
        )
    return scripts


class AssetCache:
    """Fetches text assets, keeping a copy of each under cache_dir."""

    def __init__(self, cache_dir: Path, log_path: Optional[Path] = None) -> None:
        self.cache_dir = Path(cache_dir)
        self.log_path = log_path

    def fetch(self, url: str, cache_key: str) -> str:
        cache_file = self.cache_dir / cache_key
        if cache_file.exists():
            log_event(self.log_path, ASSET_CACHE_HIT, {"cache_key": cache_key})
            return cache_file.read_text(encoding="utf-8")

        print(f"Downloading {cache_key} from CDN...")
        try:
            response = requests.get(url, timeout=REQUEST_TIMEOUT_SECONDS)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise AssetFetchError(
                f"Failed to download asset {cache_key}: {exc}",
                {"url": url, "cache_key": cache_key},
            ) from exc

        content = response.text
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        cache_file.write_text(content, encoding="utf-8")
        log_event(self.log_path, ASSET_DOWNLOADED, {"url": url, "cache_key": cache_key})
        return content


class StaticAssets:
    """In-memory provider keyed by cache_key. Missing keys resolve to empty text."""

    def __init__(self, contents: Optional[Dict[str, str]] = None) -> None:
        self.contents = dict(contents or {})
        self.requested: List[str] = []

    def fetch(self, url: str, cache_key: str) -> str:
        self.requested.append(cache_key)
        return self.contents.get(cache_key, "")
