"""Catalog source readers.

Defines the contract for turning one catalog source file into translation
entries and provides the gettext PO implementation backed by polib.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

import polib

from i18ncache.core.logging import get_module_logger
from i18ncache.i18n.models import TranslationEntry

logger = get_module_logger()


class CatalogSourceReader(ABC):
    """Abstract base for catalog source readers.

    Attributes:
        extension: File extension of the source files, without the dot.
    """

    extension: str = ""

    def filename(self, locale: str) -> str:
        """Name of the source file for a locale (e.g. ``es.po``)."""
        return f"{locale}.{self.extension}"

    @abstractmethod
    def read(self, path: Union[str, Path]) -> List[TranslationEntry]:
        """Read every entry of a catalog source file.

        Args:
            path: Path to the source file.

        Returns:
            Entries in file order.

        Raises:
            ValueError: If the file cannot be parsed.
        """
        pass


class POCatalogReader(CatalogSourceReader):
    """Reader for gettext ``.po`` files.

    Obsolete (``#~``) and fuzzy entries are dropped, as msgfmt does; the
    header is exposed by polib as metadata and never appears as an entry.
    Plural forms missing from the file are read as empty strings so every
    form keeps its index.
    """

    extension = "po"

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: Union[str, Path]) -> List[TranslationEntry]:
        # polib parses any string that is not an existing path as PO content
        if not Path(path).is_file():
            raise ValueError(f"Catalog file not found: {path}")

        try:
            po = polib.pofile(str(path), encoding=self.encoding)
        except (IOError, UnicodeDecodeError) as e:
            logger.error("po_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        entries = []
        fuzzy = 0
        for po_entry in po:
            if po_entry.obsolete:
                continue
            if po_entry.fuzzy:
                fuzzy += 1
                continue
            entries.append(self._to_entry(po_entry))

        logger.debug(
            "po_file_read",
            file=str(path),
            entry_count=len(entries),
            fuzzy_skipped=fuzzy,
        )
        return entries

    @staticmethod
    def _to_entry(po_entry: polib.POEntry) -> TranslationEntry:
        if po_entry.msgid_plural:
            forms = {int(index): text for index, text in po_entry.msgstr_plural.items()}
            size = max(forms) + 1 if forms else 1
            translations = [forms.get(index, "") for index in range(size)]
        else:
            translations = [po_entry.msgstr]

        return TranslationEntry(
            msgid=po_entry.msgid,
            translations=translations,
            msgid_plural=po_entry.msgid_plural or None,
            context=po_entry.msgctxt or None,
        )
