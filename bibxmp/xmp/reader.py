"""
Read bibliographic entries from the XMP metadata of PDF files.

Only Dublin Core is supported as metadata format. When the XMP stream yields
no entry, the PDF document-information dictionary is used instead.

Read failures are never translated: a missing file raises FileNotFoundError,
a malformed one raises pypdf.errors.PdfReadError, and an encrypted one that
cannot be opened with the given password raises
pypdf.errors.FileNotDecryptedError, so callers can ask for a password, remove
a lock, or give up.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Union

from pypdf import PasswordType, PdfReader
from pypdf.errors import FileNotDecryptedError, PdfReadError
from pypdf.generic import NullObject, StreamObject
from pypdf.xmp import XmpInformation

from bibxmp.config import XmpPreferences
from bibxmp.logging import get_logger
from bibxmp.model.bib_entry import BibEntry
from bibxmp.xmp.extractors import DocumentInformationExtractor, DublinCoreExtractor
from bibxmp.xmp.shared import clear_about_uris, parse_xmp_metadata, split_description_sections

logger = get_logger(__name__)

PathLike = Union[str, Path]


@contextmanager
def load_with_automatic_decryption(path: PathLike, password: str = "") -> Iterator[PdfReader]:
    """
    Open a PDF, decrypting it with `password` (empty by default) if needed.

    The underlying file is closed when the context exits, whatever happens.
    """
    path = Path(path)
    with open(path, "rb") as stream:
        reader = PdfReader(stream)
        if reader.is_encrypted:
            logger.debug(f"Decrypting {path.name}")
            if reader.decrypt(password) == PasswordType.NOT_DECRYPTED:
                raise FileNotDecryptedError(f"Could not decrypt {path} with the given password")
        yield reader


def read_raw_xmp(path: PathLike, password: str = "") -> Optional[List[XmpInformation]]:
    """
    Read the XMP packets of a PDF, one per rdf:Description section.

    Returns:
        Parsed packets in document order, or None if the PDF has no XMP stream
    """
    with load_with_automatic_decryption(path, password) as reader:
        return _get_xmp_metadata(reader)


def read_xmp(path: PathLike, preferences: Optional[XmpPreferences] = None, debug: bool = False) -> List[BibEntry]:
    """
    Read the bibliographic entries stored in a PDF.

    Args:
        path: PDF file to read
        preferences: XMP preferences (keyword separator, default password)
        debug: Log every extracted entry

    Returns:
        Entries found in the PDF; empty if it carries no usable metadata
    """
    preferences = preferences or XmpPreferences()
    result = []

    with load_with_automatic_decryption(path, preferences.default_password) as reader:
        xmp_list = _get_xmp_metadata(reader)

        for xmp in xmp_list or []:
            entry = DublinCoreExtractor(xmp, preferences, debug=debug).extract_bib_entry()
            if entry is not None:
                result.append(entry)

        if not result:
            # no XMP metadata found, search for non XMP metadata
            logger.debug(f"No Dublin Core entry in {Path(path).name}, falling back to document information")
            entry = DocumentInformationExtractor(reader.metadata, debug=debug).extract_bib_entry()
            if entry is not None:
                result.append(entry)

    for entry in result:
        logger.debug(f"Read {entry} from {Path(path).name}")
    logger.info(f"Found {len(result)} entries in {Path(path).name}")
    return result


def _get_xmp_metadata(reader: PdfReader) -> Optional[List[XmpInformation]]:
    """
    Parse the catalog's metadata stream as one packet per description section.

    pypdf merges the Dublin Core values of all descriptions of a packet, so the
    raw text is split first and every section is parsed on its own.
    """
    catalog = reader.trailer["/Root"]
    metadata = catalog.get("/Metadata")
    if metadata is not None:
        metadata = metadata.get_object()
    if metadata is None or isinstance(metadata, NullObject):
        # a null entry is the same as an absent one
        return None
    if not isinstance(metadata, StreamObject):
        raise PdfReadError(f"/Metadata is a {type(metadata).__name__}, expected a stream")

    xmp = metadata.get_data().decode("utf-8", errors="replace")

    packets = split_description_sections(xmp)
    logger.debug(f"XMP stream holds {len(packets)} description sections")
    return [parse_xmp_metadata(clear_about_uris(packet)) for packet in packets]
