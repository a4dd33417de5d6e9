"""Media embedding tests."""

import base64
import tempfile
import unittest
from pathlib import Path

from slidemd.errors import MediaNotFoundError
from slidemd.render.media import embed_file, extract_image_path, guess_mime_type


class TestMedia(unittest.TestCase):
    def test_guess_mime_type(self) -> None:
        self.assertEqual(guess_mime_type("a/b/photo.JPG"), "image/jpeg")
        self.assertEqual(guess_mime_type("clip.webm"), "video/webm")
        self.assertEqual(guess_mime_type("icon.svg"), "image/svg+xml")
        self.assertEqual(guess_mime_type("archive.zip"), "application/octet-stream")
        self.assertEqual(guess_mime_type("no_extension"), "application/octet-stream")

    def test_extract_image_path_from_markup(self) -> None:
        self.assertEqual(extract_image_path("![Logo](img/logo.png)"), "img/logo.png")

    def test_extract_image_path_bare(self) -> None:
        self.assertEqual(extract_image_path("img/logo.png"), "img/logo.png")

    def test_embed_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            base_dir = Path(temp_dir)
            (base_dir / "img").mkdir()
            (base_dir / "img" / "dot.png").write_bytes(b"\x89PNG fake")
            media = embed_file(base_dir, "img/dot.png")
            self.assertEqual(media.mime_type, "image/png")
            self.assertEqual(base64.b64decode(media.data), b"\x89PNG fake")
            self.assertTrue(media.data_uri.startswith("data:image/png;base64,"))

    def test_embed_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(MediaNotFoundError) as ctx:
                embed_file(Path(temp_dir), "missing.mp4")
            self.assertEqual(ctx.exception.context["path"], "missing.mp4")
            self.assertIn("missing.mp4", ctx.exception.message)


if __name__ == "__main__":
    unittest.main()
