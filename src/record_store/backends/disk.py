"""Local disk backend: one file per record under a root directory."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from record_store.backends.base import Publisher, Resolver
from record_store.errors import NotFoundError, PublishFailedError, ResolveFailedError
from record_store.models import PublishRequest

logger = logging.getLogger(__name__)

_SUFFIX = ".record"


class FileSystemBackend(Publisher, Resolver):
    """Publisher and resolver over a local directory.

    Records are stored raw under ``<root>/<encoded key>.record``. Writes go
    through a temporary file and ``os.replace`` so readers never see a
    partially written record.
    """

    def __init__(self, root: str | os.PathLike) -> None:
        self._root = Path(root)
        self._root.mkdir(parents=True, exist_ok=True)

    def _path(self, encoded_key: str) -> Path:
        return self._root / f"{encoded_key}{_SUFFIX}"

    def publish(self, request: PublishRequest) -> None:
        target = self._path(request.key)
        try:
            fd, tmp = tempfile.mkstemp(dir=self._root, prefix=".", suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(request.record_bytes)
                os.replace(tmp, target)
            except BaseException:
                os.unlink(tmp)
                raise
        except OSError as exc:
            logger.error("Writing record %s failed: %s", target, exc)
            raise PublishFailedError(f"Writing record '{request.key}' failed: {exc}") from exc
        logger.info("Stored record %s", target)

    def resolve(self, encoded_key: str) -> bytes:
        path = self._path(encoded_key)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            logger.warning("No record file %s", path)
            raise NotFoundError(f"No record for key '{encoded_key}'") from exc
        except OSError as exc:
            logger.error("Reading record %s failed: %s", path, exc)
            raise ResolveFailedError(f"Reading record '{encoded_key}' failed: {exc}") from exc
