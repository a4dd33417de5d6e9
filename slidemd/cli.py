"""CLI entry point for slidemd."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from .compiler import load_presentation
from .config import load_config
from .errors import SlideMarkdownError
from .logging_utils import PARSE_DONE, RENDER_DONE, VALIDATE_DONE, log_event, log_failure
from .models.config import Config
from .render.assets import AssetCache, StaticAssets
from .render.renderer import Renderer


def _optional_path(value: Optional[str]) -> Optional[Path]:
    return Path(value) if value else None


def _report_failure(error: SlideMarkdownError, log_path: Optional[Path]) -> int:
    print(f"ERROR: {error.message}")
    if error.context:
        print(f"Data: {error.context}")
    log_failure(log_path, error)
    return 1


def _load(args: argparse.Namespace) -> Optional[Config]:
    try:
        return load_config(
            Path(args.input),
            output_path=_optional_path(getattr(args, "output", None)),
            cache_dir=_optional_path(getattr(args, "cache_dir", None)),
            log_path=_optional_path(args.log_path),
            render_map_path=_optional_path(getattr(args, "render_map", None)),
            highlight_languages=getattr(args, "highlight", None),
        )
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}")
        return None


def cmd_check(args: argparse.Namespace) -> int:
    """Parse and validate a document without rendering."""
    config = _load(args)
    if config is None:
        return 1
    log_path = _optional_path(config.log_path)

    print(f"Parsing {args.input}...")
    text = Path(config.input_path).read_text(encoding="utf-8")
    try:
        presentation = load_presentation(text)
    except SlideMarkdownError as exc:
        return _report_failure(exc, log_path)

    log_event(log_path, VALIDATE_DONE, {
        "input_path": config.input_path,
        "slide_count": len(presentation.slides),
        "template_count": len(presentation.templates),
    })
    print(
        f"Validation passed: {len(presentation.slides)} slide(s), "
        f"{len(presentation.templates)} template(s)."
    )
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Convert a .smd document to a self-contained HTML presentation."""
    config = _load(args)
    if config is None:
        return 1
    log_path = _optional_path(config.log_path)

    print(f"Parsing {args.input}...")
    text = Path(config.input_path).read_text(encoding="utf-8")
    try:
        presentation = load_presentation(text)
        log_event(log_path, PARSE_DONE, {
            "input_path": config.input_path,
            "slide_count": len(presentation.slides),
            "template_count": len(presentation.templates),
        })

        if args.offline:
            assets = StaticAssets()
        else:
            assets = AssetCache(Path(config.cache_dir), log_path=log_path)
        renderer = Renderer(assets, highlight_languages=config.highlight_languages)

        print("Generating HTML...")
        output_path = Path(config.output_path)
        render_map = renderer.render(presentation, Path(config.base_dir), output_path)
    except SlideMarkdownError as exc:
        return _report_failure(exc, log_path)

    if config.render_map_path:
        render_map_path = Path(config.render_map_path)
        render_map_path.parent.mkdir(parents=True, exist_ok=True)
        render_map_path.write_text(render_map.to_json(), encoding="utf-8")

    log_event(log_path, RENDER_DONE, {
        "output_path": str(output_path),
        "slides_rendered": len(render_map.entries),
    })
    print(f"Success! Wrote presentation to {output_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="slidemd - Slide Markdown to HTML presentations")
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_cmd = subparsers.add_parser("build", help="Convert a .smd file to HTML")
    build_cmd.add_argument("input", type=str, help="Path to the .smd document")
    build_cmd.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output HTML path (default: input with .html suffix)",
    )
    build_cmd.add_argument(
        "--cache-dir", type=str, default=None,
        help="Highlighter asset cache (default: .slide-cache next to the input)",
    )
    build_cmd.add_argument("--log-path", type=str, default=None, help="Append JSONL run events here")
    build_cmd.add_argument("--render-map", type=str, default=None, help="Write the RenderMap JSON here")
    build_cmd.add_argument(
        "--highlight", type=str, nargs="+", default=None,
        help="Prism language components to embed (default: clojure)",
    )
    build_cmd.add_argument(
        "--offline", action="store_true",
        help="Skip CDN assets; the output has no syntax highlighting",
    )
    build_cmd.set_defaults(func=cmd_build)

    check_cmd = subparsers.add_parser("check", help="Parse and validate a .smd file")
    check_cmd.add_argument("input", type=str, help="Path to the .smd document")
    check_cmd.add_argument("--log-path", type=str, default=None, help="Append JSONL run events here")
    check_cmd.set_defaults(func=cmd_check)

    return parser


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
