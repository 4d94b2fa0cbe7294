"""
Dublin Core extractor.

Maps the Dublin Core properties of one parsed XMP packet to a BibEntry:

- contributor -> editor, creator -> author, publisher -> publisher
  (joined with " and ")
- date -> year / month / day, honouring the precision of the first date
- description -> abstract, rights -> rights, title -> title
  (x-default language, else the first one)
- identifier -> doi, source -> source, coverage -> coverage
- language -> language (comma separated)
- relation "bibtexkey/<key>" -> citation key
- subject -> keywords (joined with the configured keyword separator)
- type -> entry type
"""

import re
from typing import Dict, List, Optional

from pypdf.xmp import XmpInformation

from bibxmp.config import XmpPreferences
from bibxmp.model.bib_entry import BibEntry
from bibxmp.xmp.extractors.base_extractor import BaseBibExtractor

DC_NAMESPACE = "http://purl.org/dc/elements/1.1/"
RDF_NAMESPACE = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"

BIBTEX_KEY_RELATION = "bibtexkey/"
DEFAULT_LANGUAGE = "x-default"

DATE_PATTERN = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?(?:[T\s].*)?$")
MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]


class DublinCoreExtractor(BaseBibExtractor):
    """Maps the Dublin Core schema of an XMP packet to a BibEntry."""

    def __init__(self, xmp: XmpInformation, preferences: Optional[XmpPreferences] = None,
                 entry: Optional[BibEntry] = None, debug: bool = False):
        super().__init__(entry, debug)
        self.xmp = xmp
        self.preferences = preferences or XmpPreferences()

    def extract_bib_entry(self) -> Optional[BibEntry]:
        self.entry.set_field("editor", self._join(self.xmp.dc_contributor, " and "))
        self.entry.set_field("author", self._join(self.xmp.dc_creator, " and "))
        self._extract_date()
        self.entry.set_field("abstract", self._pick_language(self.xmp.dc_description))
        self.entry.set_field("doi", self.xmp.dc_identifier)
        self.entry.set_field("language", self._join(self.xmp.dc_language, ","))
        self.entry.set_field("publisher", self._join(self.xmp.dc_publisher, " and "))
        self._extract_relations()
        self.entry.set_field("rights", self._pick_language(self.xmp.dc_rights))
        self.entry.set_field("source", self.xmp.dc_source)
        self.entry.set_field("keywords", self._join(self.xmp.dc_subject, self.preferences.keyword_separator))
        self.entry.set_field("title", self._pick_language(self.xmp.dc_title))
        self.entry.set_field("coverage", self.xmp.dc_coverage)

        types = self.xmp.dc_type
        if types:
            self.entry.set_type(types[0])

        return self._finalize_entry()

    def _extract_date(self) -> None:
        dates = self._raw_sequence("date")
        if not dates:
            return

        match = DATE_PATTERN.match(dates[0])
        if match is None:
            self.logger.debug(f"Ignoring unparseable dc:date {dates[0]!r}")
            return

        year, month, day = match.groups()
        self.entry.set_field("year", year)
        if month and 1 <= int(month) <= 12:
            self.entry.set_field("month", MONTHS[int(month) - 1])
            if day and 1 <= int(day) <= 31:
                self.entry.set_field("day", str(int(day)))

    def _extract_relations(self) -> None:
        for relation in self.xmp.dc_relation or []:
            if relation.startswith(BIBTEX_KEY_RELATION):
                self.entry.set_citation_key(relation[len(BIBTEX_KEY_RELATION):])

    def _raw_sequence(self, name: str) -> List[str]:
        """Raw text of the rdf:li items (or the plain value) of a Dublin Core property."""
        values = []
        for element in self.xmp.get_element("", DC_NAMESPACE, name):
            if element.nodeType == element.ATTRIBUTE_NODE:
                # abbreviated form: dc:date="2010" on the description itself
                if element.nodeValue.strip():
                    values.append(element.nodeValue.strip())
                continue
            items = element.getElementsByTagNameNS(RDF_NAMESPACE, "li")
            nodes = items if len(items) else [element]
            for node in nodes:
                text = "".join(child.data for child in node.childNodes if child.nodeType == child.TEXT_NODE).strip()
                if text:
                    values.append(text)
        return values

    @staticmethod
    def _pick_language(values: Optional[Dict[str, str]]) -> Optional[str]:
        if not values:
            return None
        if values.get(DEFAULT_LANGUAGE):
            return values[DEFAULT_LANGUAGE]
        return next(iter(values.values()), None)
