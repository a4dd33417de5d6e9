"""Runtime configuration loader."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .models.config import Config

CACHE_DIR_NAME = ".slide-cache"
DEFAULT_HIGHLIGHT_LANGUAGES = ("clojure",)


def _require_file(path: Path, label: str) -> None:
    if not path.is_file():
        raise FileNotFoundError(f"Missing {label}: {path}")


def load_config(
    input_path: Path,
    output_path: Optional[Path] = None,
    cache_dir: Optional[Path] = None,
    log_path: Optional[Path] = None,
    render_map_path: Optional[Path] = None,
    highlight_languages: Optional[Sequence[str]] = None,
) -> Config:
    """Load configuration with canonical defaults and validate paths."""
    source = Path(input_path).resolve()
    _require_file(source, "input document")
    base_dir = source.parent

    return Config(
        input_path=str(source),
        base_dir=str(base_dir),
        output_path=str(Path(output_path) if output_path else source.with_suffix(".html")),
        cache_dir=str(Path(cache_dir) if cache_dir else base_dir / CACHE_DIR_NAME),
        log_path=str(log_path) if log_path else None,
        render_map_path=str(render_map_path) if render_map_path else None,
        highlight_languages=list(highlight_languages or DEFAULT_HIGHLIGHT_LANGUAGES),
    )
