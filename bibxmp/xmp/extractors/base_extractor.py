from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional

from bibxmp.logging import get_logger
from bibxmp.model.bib_entry import BibEntry


class BaseBibExtractor(ABC):
    """
    Abstract base class for extractors turning a metadata source into a BibEntry.
    """

    def __init__(self, entry: Optional[BibEntry] = None, debug: bool = False):
        """
        Initialize the base extractor.

        Args:
            entry: Entry to fill; a fresh one is created when omitted
            debug: Enable debug logging of the extracted entry
        """
        self.entry = entry if entry is not None else BibEntry()
        self.debug = debug
        self.logger = get_logger(self.__class__.__name__)

    @abstractmethod
    def extract_bib_entry(self) -> Optional[BibEntry]:
        """
        Extract a bibliographic entry from the metadata source.

        Returns:
            The filled entry, or None if the source carried no usable field
        """
        pass

    def _map_fields(self, source: Dict[str, Optional[str]], field_mapping: Dict[str, str]) -> None:
        """
        Copy values from `source` into the entry.

        Args:
            source: Raw metadata values keyed by source name
            field_mapping: Mapping of source_key -> entry field name
        """
        for source_key, target_field in field_mapping.items():
            if source_key in source:
                self.entry.set_field(target_field, source[source_key])

    @staticmethod
    def _join(values: Optional[Iterable[str]], separator: str) -> Optional[str]:
        """Join the non-blank values, or return None if there are none."""
        if not values:
            return None
        cleaned = [value.strip() for value in values if value and value.strip()]
        return separator.join(cleaned) if cleaned else None

    def _finalize_entry(self) -> Optional[BibEntry]:
        if self.entry.is_empty():
            return None

        if self.debug:
            self.logger.debug(f"Extracted entry: {self.entry.to_dict()}")

        return self.entry
