"""Text file helpers for generated project files.

Generated files always use CRLF line endings and are written as UTF-8
without a byte-order mark.
"""

import re
from pathlib import Path

_BARE_LF = re.compile(r"(?<!\r)\n")


def normalize_line_endings(text: str) -> str:
    """Convert every bare LF to CRLF, leaving existing CRLF untouched."""
    return _BARE_LF.sub("\r\n", text)


def write_text_crlf(path: Path, text: str) -> None:
    """Write text with CRLF line endings, UTF-8 without BOM.

    Args:
        path: Destination file
        text: Content to write
    """
    path.write_bytes(normalize_line_endings(text).encode("utf-8"))


def normalize_file(path: Path) -> str:
    """Rewrite an existing file with CRLF line endings and no BOM.

    A missing file is created empty.

    Args:
        path: File to normalize

    Returns:
        The normalized content
    """
    raw = path.read_bytes() if path.exists() else b""
    # utf-8-sig drops a leading BOM if the source had one
    text = normalize_line_endings(raw.decode("utf-8-sig", errors="replace"))
    path.write_bytes(text.encode("utf-8"))
    return text


__all__ = [
    "normalize_line_endings",
    "write_text_crlf",
    "normalize_file",
]
