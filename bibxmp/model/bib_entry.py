"""Bibliographic entry record produced by the XMP reader."""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field

DEFAULT_TYPE = "misc"


@dataclass
class BibEntry:
    """
    A single bibliographic record: an entry type, an optional citation key and
    a flat mapping from field name to string value.

    Field names are stored lower-cased. Blank values are never stored, so an
    entry that only ever received empty values stays empty.
    """

    entry_type: str = DEFAULT_TYPE
    citation_key: Optional[str] = None
    fields: Dict[str, str] = field(default_factory=dict)

    def set_field(self, name: str, value: Optional[str]) -> None:
        """Set a field, ignoring missing or blank values."""
        if value is None:
            return
        value = str(value).strip()
        if not value:
            return
        self.fields[name.lower()] = value

    def get_field(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a field value with optional default."""
        return self.fields.get(name.lower(), default)

    def has_field(self, name: str) -> bool:
        return name.lower() in self.fields

    def set_type(self, entry_type: Optional[str]) -> None:
        if entry_type and entry_type.strip():
            self.entry_type = entry_type.strip().lower()

    def set_citation_key(self, key: Optional[str]) -> None:
        if key and key.strip():
            self.citation_key = key.strip()

    @property
    def field_names(self) -> List[str]:
        return sorted(self.fields)

    def is_empty(self) -> bool:
        """Check if the entry carries neither fields nor a citation key."""
        return not self.fields and not self.citation_key

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entry_type": self.entry_type,
            "citation_key": self.citation_key,
            "fields": self.fields.copy(),
        }

    def to_bibtex(self) -> str:
        """Render the entry as a BibTeX block."""
        lines = [f"@{self.entry_type}{{{self.citation_key or ''},"]
        for name in self.field_names:
            lines.append(f"  {name} = {{{self.fields[name]}}},")
        lines.append("}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return f"BibEntry({self.entry_type}, {self.citation_key or '<no key>'}, {len(self.fields)} fields)"
