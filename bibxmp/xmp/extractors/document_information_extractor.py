"""
Extractor for the PDF document-information dictionary.

This is the legacy, non-XML metadata block of a PDF (``/Title``, ``/Author``,
``/Subject``, ``/Keywords``). Bibliography managers additionally store custom
``/bibtex/<field>`` keys in it, including ``/bibtex/entrytype``.
"""

from typing import Any, Mapping, Optional

from bibxmp.model.bib_entry import BibEntry
from bibxmp.xmp.extractors.base_extractor import BaseBibExtractor

BIBTEX_PREFIX = "/bibtex/"
ENTRY_TYPE_KEY = BIBTEX_PREFIX + "entrytype"

STANDARD_FIELDS = {
    "/Author": "author",
    "/Title": "title",
    "/Subject": "abstract",
    "/Keywords": "keywords",
}


class DocumentInformationExtractor(BaseBibExtractor):
    """Maps a document-information dictionary to a BibEntry."""

    def __init__(self, info: Optional[Mapping[str, Any]], entry: Optional[BibEntry] = None, debug: bool = False):
        super().__init__(entry, debug)
        self.info = info

    def extract_bib_entry(self) -> Optional[BibEntry]:
        if not self.info:
            return None

        values = {key: self._as_text(value) for key, value in self.info.items()}
        self._map_fields(values, STANDARD_FIELDS)

        for key, value in values.items():
            if not key.startswith(BIBTEX_PREFIX):
                continue
            if key == ENTRY_TYPE_KEY:
                self.entry.set_type(value)
            else:
                self.entry.set_field(key[len(BIBTEX_PREFIX):], value)

        return self._finalize_entry()

    @staticmethod
    def _as_text(value: Any) -> Optional[str]:
        # raw dictionary values may still be indirect references
        if value is None:
            return None
        if hasattr(value, "get_object"):
            value = value.get_object()
        return str(value)
