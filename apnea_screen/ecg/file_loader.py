from pathlib import Path

from apnea_screen.ecg.exceptions import FileReadError
from apnea_screen.ecg.models import UploadedFile


class FileLoader:
    """Reads a user-selected ECG file into an UploadedFile."""

    def load(self, path: Path) -> UploadedFile:
        """Read the file's bytes, keeping its original name for the upload.

        Raises:
            FileReadError: if the path does not exist, is not a regular file,
                or cannot be read.
        """
        if not path.exists():
            raise FileReadError(f"File not found: {path}")
        if not path.is_file():
            raise FileReadError(f"Not a regular file: {path}")
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Cannot read {path}: {exc}") from exc
        return UploadedFile(name=path.name, content=content)
