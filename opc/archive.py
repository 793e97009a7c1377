"""
Read-only access to the parts of an OPC (zip) package.
"""

from __future__ import annotations

import io
import logging
import os
import zipfile
from typing import IO, Dict, List, Optional, Union

from errors import PartNotFoundError, XlsxError

logger = logging.getLogger(__name__)

Source = Union[str, "os.PathLike[str]", bytes, IO[bytes]]


class Archive:
    """
    Thin wrapper over :class:`zipfile.ZipFile`.

    Part names are matched case-insensitively and without a leading ``/``;
    some producers disagree with their own relationship targets on case.
    """

    def __init__(self, source: Source) -> None:
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        try:
            self._zip = zipfile.ZipFile(source)
        except zipfile.BadZipFile as exc:
            raise XlsxError(f"not a zip package: {exc}") from exc
        self._names: Dict[str, str] = {
            name.lower(): name for name in self._zip.namelist() if not name.endswith("/")
        }

    def __enter__(self) -> "Archive":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._zip.close()

    # ------------------------------------------------------------------

    @staticmethod
    def _key(path: str) -> str:
        return path.lstrip("/").lower()

    def names(self) -> List[str]:
        return list(self._names.values())

    def has_part(self, path: str) -> bool:
        return self._key(path) in self._names

    def read(self, path: str) -> bytes:
        name = self._names.get(self._key(path))
        if name is None:
            raise PartNotFoundError(path)
        logger.debug("Reading part %s", name)
        return self._zip.read(name)

    def read_optional(self, path: Optional[str]) -> Optional[bytes]:
        if path is None or not self.has_part(path):
            return None
        return self.read(path)

    def open(self, path: str) -> IO[bytes]:
        """Stream a part instead of buffering it."""
        name = self._names.get(self._key(path))
        if name is None:
            raise PartNotFoundError(path)
        return self._zip.open(name)
