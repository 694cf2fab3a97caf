"""Compiled catalog snapshots.

A snapshot is the flat key -> translated string mapping produced by parsing
one catalog, stored as JSON under ``<directory>/<locale>/<domain>.json`` so
the next load can skip the source parser. A snapshot is only used when it is
strictly newer than its source file.

Catalogs compiled with uncleaned keys are stored as ``<domain>.raw.json``; the
two key formats never share a file.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from filelock import FileLock

from i18ncache.core.exceptions import ConfigurationError, SerializationError
from i18ncache.core.logging import get_module_logger

logger = get_module_logger()

SNAPSHOT_EXTENSION = "json"
RAW_KEYS_SUFFIX = "raw"


class SnapshotStore:
    """Reads and writes compiled catalog snapshots.

    Writes hold an exclusive lock on ``<snapshot>.lock`` and replace the
    snapshot atomically. Readers never lock; a reader racing a writer on a
    filesystem without atomic replace may see an undecodable file, which
    read() reports as None.

    Attributes:
        directory: Root directory of the snapshots.
        lock_timeout: Seconds to wait for the write lock (-1 waits forever).
    """

    def __init__(self, directory: Union[str, Path], lock_timeout: float = -1):
        self.directory = Path(directory)
        self.lock_timeout = lock_timeout

        if not self.directory.is_dir():
            raise ConfigurationError(
                f"Snapshot directory does not exist: {self.directory}"
            )

        logger.info("initialized_snapshot_store", directory=str(self.directory))

    def path(self, locale: str, domain: str, raw_keys: bool = False) -> Path:
        """Location of the snapshot for a locale and domain.

        Args:
            locale: Active locale.
            domain: Domain name.
            raw_keys: True for catalogs compiled without key cleaning.
        """
        name = f"{domain}.{RAW_KEYS_SUFFIX}" if raw_keys else domain
        return self.directory / locale / f"{name}.{SNAPSHOT_EXTENSION}"

    def modified_time(self, locale: str, domain: str, raw_keys: bool = False) -> Optional[int]:
        """Snapshot modification time in nanoseconds, or None if absent."""
        try:
            return self.path(locale, domain, raw_keys).stat().st_mtime_ns
        except FileNotFoundError:
            return None

    def read(
        self, locale: str, domain: str, raw_keys: bool = False
    ) -> Optional[Dict[str, str]]:
        """Load a snapshot.

        Args:
            locale: Active locale.
            domain: Domain name.
            raw_keys: True for catalogs compiled without key cleaning.

        Returns:
            The key -> string mapping, or None if the snapshot is missing or
            cannot be decoded.
        """
        path = self.path(locale, domain, raw_keys)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("snapshot_unreadable", file=str(path), error=str(e))
            return None

        if not isinstance(data, dict):
            logger.warning("invalid_snapshot_format", file=str(path), expected="dict")
            return None

        return data

    def write(
        self,
        locale: str,
        domain: str,
        data: Mapping[str, str],
        raw_keys: bool = False,
    ) -> Path:
        """Persist a snapshot under an exclusive lock.

        Args:
            locale: Active locale.
            domain: Domain name.
            data: Key -> translated string mapping.
            raw_keys: True for catalogs compiled without key cleaning.

        Returns:
            Path of the written snapshot.

        Raises:
            SerializationError: If the mapping cannot be encoded.
        """
        try:
            payload = json.dumps(dict(data), ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            logger.error(
                "snapshot_serialization_error",
                locale=locale,
                domain=domain,
                error=str(e),
            )
            raise SerializationError(
                f"Cannot encode catalog {domain} for locale {locale}: {e}"
            ) from e

        path = self.path(locale, domain, raw_keys)
        path.parent.mkdir(parents=True, exist_ok=True)

        with FileLock(f"{path}.lock", timeout=self.lock_timeout):
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as f:
                    f.write(payload)
                os.replace(tmp_name, path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise

        logger.info(
            "catalog_snapshot_written",
            file=str(path),
            entry_count=len(data),
        )
        return path
