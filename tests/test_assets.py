"""Asset cache tests. The network is never touched."""

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import requests

from slidemd.errors import AssetFetchError
from slidemd.render.assets import AssetCache, StaticAssets, highlighter_css, highlighter_scripts


class TestAssetUrls(unittest.TestCase):
    def test_scripts_include_core_and_languages(self) -> None:
        scripts = highlighter_scripts(["clojure", "python"])
        keys = [key for _, key in scripts]
        self.assertEqual(keys, ["prism-core.min.js", "prism-clojure.min.js", "prism-python.min.js"])
        self.assertTrue(scripts[2][0].endswith("/components/prism-python.min.js"))

    def test_css(self) -> None:
        url, key = highlighter_css()
        self.assertTrue(url.endswith("/themes/prism-okaidia.min.css"))
        self.assertEqual(key, "prism-okaidia.min.css")


class TestAssetCache(unittest.TestCase):
    def test_cache_hit_skips_network(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            cache_dir = Path(temp_dir) / "cache"
            cache_dir.mkdir()
            (cache_dir / "prism-core.min.js").write_text("/* cached */", encoding="utf-8")
            log_path = Path(temp_dir) / "run_log.jsonl"
            cache = AssetCache(cache_dir, log_path=log_path)
            with mock.patch("slidemd.render.assets.requests.get") as get:
                content = cache.fetch("https://example.invalid/prism.js", "prism-core.min.js")
                get.assert_not_called()
            self.assertEqual(content, "/* cached */")
            events = [json.loads(line) for line in log_path.read_text().splitlines()]
            self.assertEqual(events[0]["event_type"], "ASSET_CACHE_HIT")

    def test_download_writes_cache(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            cache_dir = Path(temp_dir) / "cache"
            response = mock.Mock(text="body{}")
            with mock.patch("slidemd.render.assets.requests.get", return_value=response) as get:
                content = AssetCache(cache_dir).fetch("https://example.invalid/a.css", "a.css")
                get.assert_called_once()
            self.assertEqual(content, "body{}")
            self.assertEqual((cache_dir / "a.css").read_text(encoding="utf-8"), "body{}")

    def test_network_failure(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with mock.patch(
                "slidemd.render.assets.requests.get",
                side_effect=requests.ConnectionError("offline"),
            ):
                with self.assertRaises(AssetFetchError) as ctx:
                    AssetCache(Path(temp_dir)).fetch("https://example.invalid/a.js", "a.js")
            self.assertEqual(ctx.exception.context["cache_key"], "a.js")
            self.assertFalse((Path(temp_dir) / "a.js").exists())


class TestStaticAssets(unittest.TestCase):
    def test_returns_known_and_records_requests(self) -> None:
        assets = StaticAssets({"a.js": "alert(1)"})
        self.assertEqual(assets.fetch("u", "a.js"), "alert(1)")
        self.assertEqual(assets.fetch("u", "b.js"), "")
        self.assertEqual(assets.requested, ["a.js", "b.js"])


if __name__ == "__main__":
    unittest.main()
