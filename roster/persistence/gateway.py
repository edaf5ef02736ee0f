import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import List, Sequence, Union

from ..codec import decode, encode
from ..errors import RowFormatError, StartupIOError
from ..store import RecordStore

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


# ==============================================
# PersistenceGateway
# ==============================================
#
# PURPOSE:
#   Read the employee file into rows at startup and write the
#   full record set back after every change.
#
# WHAT IS PERSISTED:
#   The whole store, every time. There is no per-record write
#   and no backup copy. The file is opened, read/written and
#   closed inside each call; no handle or lock is held between
#   calls, so two processes on one file overwrite each other.
#
# ATOMIC SAVE:
#   With atomic=True the text goes to a temporary file in the
#   same directory which then replaces the target with
#   os.replace(). An existing target's permission bits
#   are copied onto the temporary file first. With atomic=False the target is truncated
#   and rewritten in place.
#
class PersistenceGateway:
    """
    Loads and saves the employee file.

    File:
    - data/employees.csv  → id,firstName,lastName,email,hourlyWage
    """

    def __init__(self, file_path: PathLike, atomic: bool = True):
        """
        Args:
            file_path: Path of the employee file, relative to the
                working directory unless absolute
            atomic: Replace the file atomically on save
        """
        self.file_path = Path(file_path)
        self.atomic = atomic

#   LOADING:
#   - load_from(path) -> rows
#   - load_store(store) -> None   (configured path)
#
    def load_from(self, path: PathLike) -> List[List[str]]:
        """
        Read a file and decode it into rows.

        Raises:
            StartupIOError: if the file is missing, unreadable or not UTF-8
        """
        path = Path(path)
        try:
            # newline="" hands "\r\n" to the codec untranslated
            with open(path, "r", encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StartupIOError(f"cannot read employee file {path}: {e}") from e

        rows = decode(text)
        logger.info("Read %d rows from %s", len(rows), path)
        return rows

    def load_store(self, store: RecordStore) -> None:
        """
        Populate the store from the configured file.

        Raises:
            StartupIOError: if the file cannot be read or a row is malformed
        """
        rows = self.load_from(self.file_path)
        try:
            store.load(rows)
        except RowFormatError as e:
            raise StartupIOError(f"malformed employee file {self.file_path}: {e}") from e

#   SAVING:
#   - save_to(path, rows) -> None
#   - save_store(store) -> None   (configured path)
#
    def save_to(self, path: PathLike, rows: Sequence[Sequence[str]]) -> None:
        """
        Encode rows and overwrite the file with them.

        Raises:
            RaggedRowError: if the rows are not rectangular
            OSError: if the file cannot be written
        """
        path = Path(path)
        text = encode(rows)

        if self.atomic:
            self._replace_atomically(path, text)
        else:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(text)

        logger.info("Saved %d rows to %s", len(rows), path)

    def save_store(self, store: RecordStore) -> None:
        """Flush the whole store to the configured file."""
        self.save_to(self.file_path, store.to_rows())

    def _replace_atomically(self, path: Path, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp creates the file 0600; keep the target's mode
            if path.exists():
                shutil.copymode(path, tmp_name)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
