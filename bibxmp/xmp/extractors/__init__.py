"""
Field-mapping adapters turning PDF metadata sources into BibEntry records.

Extractor Classes:
- BaseBibExtractor: Abstract base class with shared helpers
- DublinCoreExtractor: Dublin Core schema of one parsed XMP packet
- DocumentInformationExtractor: PDF document-information dictionary (fallback)
"""

from bibxmp.xmp.extractors.base_extractor import BaseBibExtractor
from bibxmp.xmp.extractors.document_information_extractor import DocumentInformationExtractor
from bibxmp.xmp.extractors.dublin_core_extractor import DublinCoreExtractor

__all__ = ["BaseBibExtractor", "DocumentInformationExtractor", "DublinCoreExtractor"]
