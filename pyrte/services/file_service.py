from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from pyrte.domain.interfaces import IFileService
from pyrte.utils.constants import TEXT_ENCODING


class FileService(IFileService):
    """
    Byte-exact text I/O in TEXT_ENCODING.

    Reads skip newline translation, so a document comes back with the line
    endings it was stored with. Writes go through QSaveFile: the target is
    replaced only once the new bytes are fully on disk.
    """

    def read_text(self, path: Path) -> str:
        return path.read_bytes().decode(TEXT_ENCODING)

    def write_text_atomic(self, path: Path, text: str) -> None:
        payload = text.encode(TEXT_ENCODING)
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open {path} for writing: {sf.errorString()}")
        if sf.write(payload) != len(payload):
            sf.cancelWriting()
            raise OSError(f"Short write to {path}: {sf.errorString()}")
        if not sf.commit():
            raise OSError(f"Could not replace {path}: {sf.errorString()}")
