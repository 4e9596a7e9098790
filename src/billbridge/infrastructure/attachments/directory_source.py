"""Attachment source backed by a local directory tree.

Layout: ``<root>/<record_id>/<file>``. Each regular file directly inside a
record directory is one attachment; its id is the path relative to root.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from billbridge.application.codec import encode_base64
from billbridge.domain.entities.attachment import DiscoveredAttachment, LoadedAttachment

# File extension -> platform file-type tag
EXTENSION_FILE_TYPES: dict[str, str] = {
    ".pdf": "PDF",
    ".txt": "PLAINTEXT",
    ".csv": "CSV",
    ".xml": "XMLDOC",
    ".png": "PNGIMAGE",
    ".jpg": "JPGIMAGE",
    ".jpeg": "JPGIMAGE",
    ".gif": "GIFIMAGE",
    ".tif": "TIFFIMAGE",
    ".tiff": "TIFFIMAGE",
    ".bmp": "BMPIMAGE",
    ".doc": "WORD",
    ".xls": "EXCEL",
    ".zip": "ZIP",
    ".gz": "GZIP",
    ".json": "JSON",
    ".mp3": "MP3",
    ".html": "HTMLDOC",
    ".htm": "HTMLDOC",
    ".js": "JAVASCRIPT",
    ".css": "STYLESHEET",
}


def file_type_for(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix in EXTENSION_FILE_TYPES:
        return EXTENSION_FILE_TYPES[suffix]
    return suffix.lstrip(".").upper() or "UNKNOWN"


class DirectoryAttachmentSource:
    def __init__(self, root: Path | str) -> None:
        self.root = Path(root)

    def _resolve(self, relative: str) -> Path:
        path = (self.root / relative).resolve()
        if not path.is_relative_to(self.root.resolve()):
            raise ValueError(f"Attachment path escapes root: {relative}")
        return path

    def discover(self, record_id: str) -> list[DiscoveredAttachment]:
        record_dir = self._resolve(record_id)
        if not record_dir.is_dir():
            raise FileNotFoundError(f"No attachments directory for record {record_id}: {record_dir}")

        found = [
            DiscoveredAttachment(
                attachment_id=str(path.relative_to(self.root.resolve())),
                file_type=file_type_for(path),
                name=path.name,
            )
            for path in sorted(record_dir.iterdir())
            if path.is_file()
        ]
        logger.debug(f"Discovered {len(found)} files in {record_dir}")
        return found

    def load(self, attachment_id: str) -> LoadedAttachment:
        path = self._resolve(attachment_id)
        return LoadedAttachment(
            name=path.name,
            base64_content=encode_base64(path.read_bytes()),
            file_type=file_type_for(path),
        )
