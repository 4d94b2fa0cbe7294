"""Read bibliographic entries from the XMP metadata of PDF files."""

from bibxmp.model.bib_entry import BibEntry
from bibxmp.xmp.reader import read_raw_xmp, read_xmp

__version__ = "0.1.0"

__all__ = ["BibEntry", "read_raw_xmp", "read_xmp", "__version__"]
