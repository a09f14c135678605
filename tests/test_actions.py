import sys
import tempfile
from pathlib import Path
import unittest

_project_root = Path(__file__).resolve().parent.parent
_project_root_str = str(_project_root)
if _project_root_str not in sys.path:
    sys.path.insert(0, _project_root_str)

from utils.actions import copy_to_clipboard, write_download, DOWNLOAD_FILENAME, DOWNLOAD_MIME_TYPE


class FakeClipboard:
    def __init__(self):
        self._text = ""

    def setText(self, text):
        self._text = text

    def text(self):
        return self._text


class DeniedClipboard(FakeClipboard):
    def setText(self, text):
        raise PermissionError("clipboard write denied")


class IgnoringClipboard(FakeClipboard):
    def setText(self, text):
        pass


class TestCopyToClipboard(unittest.TestCase):
    def test_copies_verbatim(self):
        clipboard = FakeClipboard()
        text = "const a = 1;\r\n\ttrailing  "
        self.assertTrue(copy_to_clipboard(clipboard, text))
        self.assertEqual(clipboard.text(), text)

    def test_failure_is_reported_not_raised(self):
        with self.assertLogs(level='ERROR'):
            self.assertFalse(copy_to_clipboard(DeniedClipboard(), "x"))

    def test_rejected_write_is_failure(self):
        with self.assertLogs(level='ERROR'):
            self.assertFalse(copy_to_clipboard(IgnoringClipboard(), "x"))


class TestWriteDownload(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_directory_target_uses_default_name(self):
        target = write_download(self.tmpdir, "let x = 5;")
        self.assertEqual(target.name, "code.js")
        self.assertEqual(target.read_text(encoding='utf-8'), "let x = 5;")

    def test_content_written_verbatim(self):
        text = "a\r\nb\né"
        target = write_download(self.tmpdir / "out.js", text)
        self.assertEqual(target.read_bytes(), text.encode('utf-8'))

    def test_missing_directory_raises(self):
        with self.assertRaises(OSError):
            write_download(self.tmpdir / "missing" / "code.js", "x")

    def test_download_constants(self):
        self.assertEqual(DOWNLOAD_FILENAME, "code.js")
        self.assertEqual(DOWNLOAD_MIME_TYPE, "text/javascript")


if __name__ == '__main__':
    unittest.main()
