import logging
from pathlib import Path

DOWNLOAD_FILENAME = "code.js"
DOWNLOAD_MIME_TYPE = "text/javascript"
DEFAULT_ENCODING = 'utf-8'


def copy_to_clipboard(clipboard, text: str) -> bool:
    """
    Puts the text on the clipboard. Failures are logged and reported as
    False, never raised, so the caller only has to show a notice.

    `clipboard` is anything with setText()/text(), normally
    QApplication.clipboard().
    """
    try:
        clipboard.setText(text)
        copied = clipboard.text()
    except Exception as e:
        logging.error(f"Failed to copy code: {e}")
        return False
    if copied != text:
        logging.error("Failed to copy code: clipboard did not accept the text")
        return False
    logging.info(f"Copied {len(text)} characters to clipboard")
    return True


def write_download(path, text: str) -> Path:
    """Writes the text verbatim. A directory target gets the default file name."""
    target = Path(path)
    if target.is_dir():
        target = target / DOWNLOAD_FILENAME
    logging.info(f"Saving '{target}' with encoding '{DEFAULT_ENCODING}'")
    with open(target, 'w', encoding=DEFAULT_ENCODING, newline='') as f:
        f.write(text)
    return target
