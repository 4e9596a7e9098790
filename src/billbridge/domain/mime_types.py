"""Platform file-type tags accepted for upload, and their MIME types."""

from __future__ import annotations

from typing import Optional

SUPPORTED_MIME_TYPES: dict[str, str] = {
    # Documents
    "PDF": "application/pdf",
    "PLAINTEXT": "text/plain",
    "CSV": "text/csv",
    "XMLDOC": "application/xml",
    # Images
    "PNGIMAGE": "image/png",
    "JPGIMAGE": "image/jpeg",
    "GIFIMAGE": "image/gif",
    "TIFFIMAGE": "image/tiff",
    "BMPIMAGE": "image/bmp",
    # Microsoft Office
    "WORD": "application/msword",
    "EXCEL": "application/vnd.ms-excel",
    # Archives (zip only; gzip is rejected downstream)
    "ZIP": "application/zip",
}

# JSON, MP3, HTMLDOC, JAVASCRIPT and STYLESHEET cannot be read back as text
# by the source platform, GZIP is refused by the accounting API.
UNSUPPORTED_FILE_TYPES = frozenset({"GZIP", "JSON", "MP3", "HTMLDOC", "JAVASCRIPT", "STYLESHEET"})


def resolve_mime_type(file_type: str) -> Optional[str]:
    """Return the MIME type for a platform tag, or None if uploads are not supported."""
    return SUPPORTED_MIME_TYPES.get(file_type)
