import tempfile
import unittest
from pathlib import Path

from server.static_files import guess_content_type, resolve_static_file


def _write(path: Path, content: str = "x") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class ResolveStaticFileTests(unittest.TestCase):
    def test_returns_asset_beside_index(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            ui_root = Path(temp_dir)
            icon = _write(ui_root / "icons" / "ic_focus.svg", "<svg/>")

            self.assertEqual(icon.resolve(), resolve_static_file(ui_root, "/icons/ic_focus.svg"))

    def test_rejects_paths_escaping_the_root(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            root = Path(temp_dir)
            ui_root = root / "ui"
            ui_root.mkdir()
            _write(root / "config.toml")

            self.assertIsNone(resolve_static_file(ui_root, "/../config.toml"))

    def test_rejects_dotfiles(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            ui_root = Path(temp_dir)
            _write(ui_root / ".env")
            _write(ui_root / ".cache" / "app.js")

            self.assertIsNone(resolve_static_file(ui_root, "/.env"))
            self.assertIsNone(resolve_static_file(ui_root, "/.cache/app.js"))

    def test_rejects_root_directories_and_missing_files(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            ui_root = Path(temp_dir)
            (ui_root / "icons").mkdir()

            self.assertIsNone(resolve_static_file(ui_root, "/"))
            self.assertIsNone(resolve_static_file(ui_root, ""))
            self.assertIsNone(resolve_static_file(ui_root, "/icons"))
            self.assertIsNone(resolve_static_file(ui_root, "/missing.js"))


class GuessContentTypeTests(unittest.TestCase):
    def test_text_assets_get_utf8_charset(self) -> None:
        self.assertEqual("text/css; charset=utf-8", guess_content_type(Path("styles.css")))
        self.assertEqual("image/svg+xml; charset=utf-8", guess_content_type(Path("ic_break.svg")))
        js_type = guess_content_type(Path("app.js"))
        self.assertTrue(js_type.endswith("; charset=utf-8"))
        self.assertIn("javascript", js_type)

    def test_binary_assets_keep_plain_type(self) -> None:
        self.assertEqual("image/png", guess_content_type(Path("ic_focus.png")))

    def test_unknown_extensions_fall_back_to_octet_stream(self) -> None:
        self.assertEqual(
            "application/octet-stream",
            guess_content_type(Path("chime.unknownbinaryextension")),
        )


if __name__ == "__main__":
    unittest.main()
