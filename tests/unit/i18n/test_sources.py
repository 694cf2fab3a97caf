"""Tests for i18ncache.i18n.sources module."""

import pytest

from i18ncache.i18n.models import TranslationEntry
from i18ncache.i18n.sources import CatalogSourceReader, POCatalogReader
from tests.factories.i18n import DOMAIN1_ES, DOMAIN2_RU, write_po_file

pytestmark = pytest.mark.unit


class TestCatalogSourceReader:
    """Tests for the reader contract."""

    def test_abstract(self):
        with pytest.raises(TypeError):
            CatalogSourceReader()  # type: ignore[abstract]

    def test_filename_uses_extension(self):
        class TextReader(CatalogSourceReader):
            extension = "txt"

            def read(self, path):
                return []

        assert TextReader().filename("es_MX") == "es_MX.txt"


class TestPOCatalogReader:
    """Tests for POCatalogReader."""

    @pytest.fixture
    def reader(self):
        return POCatalogReader()

    def test_filename(self, reader):
        assert reader.filename("es") == "es.po"

    def test_read_entries(self, reader, tmp_path):
        """Entries keep file order, context and plural forms."""
        path = write_po_file(tmp_path / "es.po", DOMAIN1_ES)
        entries = reader.read(path)

        assert [e.msgid for e in entries] == [
            "Yes",
            "Welcome",
            "Welcome",
            "item",
            "1 item",
            "Untranslated",
        ]
        assert entries[0] == TranslationEntry("Yes", ["Si"])
        assert entries[1].context == "Welcome panel"
        assert entries[4] == TranslationEntry(
            "1 item", ["1 artículo", "%d artículos"], msgid_plural="%d items"
        )
        assert entries[5].translations == [""]

    def test_empty_context_is_none(self, reader, tmp_path):
        """An empty msgctxt is the same as no context."""
        path = write_po_file(tmp_path / "es.po", DOMAIN1_ES)
        assert reader.read(path)[0].context is None

    def test_three_plural_forms_ordered(self, reader, tmp_path):
        path = write_po_file(tmp_path / "ru.po", DOMAIN2_RU)
        entry = reader.read(path)[1]
        assert entry.translations == ["%d файл", "%d файла", "%d файлов"]

    def test_escaped_newlines(self, reader, tmp_path):
        path = write_po_file(tmp_path / "es.po", 'msgid "a\\nb"\nmsgstr "c\\nd"\n')
        assert reader.read(path) == [TranslationEntry("a\nb", ["c\nd"])]

    def test_obsolete_entries_dropped(self, reader, tmp_path):
        body = 'msgid "Kept"\nmsgstr "Guardado"\n\n#~ msgid "Old"\n#~ msgstr "Viejo"\n'
        path = write_po_file(tmp_path / "es.po", body)
        assert [e.msgid for e in reader.read(path)] == ["Kept"]

    def test_fuzzy_entries_dropped(self, reader, tmp_path):
        """Translations flagged for review are not served."""
        body = (
            'msgid "Kept"\nmsgstr "Guardado"\n\n'
            '#, fuzzy\nmsgid "Guess"\nmsgstr "Adivinanza"\n\n'
            '#, fuzzy, python-format\nmsgid "%d left"\nmsgid_plural "%d left"\n'
            'msgstr[0] "queda %d"\nmsgstr[1] "quedan %d"\n'
        )
        path = write_po_file(tmp_path / "es.po", body)
        assert [e.msgid for e in reader.read(path)] == ["Kept"]

    def test_plural_gaps_keep_form_index(self, reader, tmp_path):
        """A missing msgstr[n] does not shift later forms down."""
        body = (
            'msgid "%d file"\nmsgid_plural "%d files"\n'
            'msgstr[0] "%d файл"\nmsgstr[2] "%d файлов"\n'
        )
        path = write_po_file(tmp_path / "ru.po", body)
        assert reader.read(path)[0].translations == ["%d файл", "", "%d файлов"]

    def test_missing_file(self, reader, tmp_path):
        with pytest.raises(ValueError):
            reader.read(tmp_path / "absent.po")

    def test_wrong_encoding(self, tmp_path):
        """Undecodable bytes are reported as a parse failure."""
        path = tmp_path / "es.po"
        path.write_bytes(b'msgid "Yes"\nmsgstr "S\xff"\n')
        with pytest.raises(ValueError):
            POCatalogReader(encoding="utf-8").read(path)
