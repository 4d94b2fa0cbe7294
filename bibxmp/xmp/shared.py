"""
Helpers shared by the XMP reader: raw packet splitting and packet parsing.

pypdf's XmpInformation looks up every Dublin Core property across all
``rdf:Description`` sections of a packet, so when a producer concatenates one
description per bibliographic record the values of all records get merged.
``split_description_sections`` cuts such a packet into one standalone packet
per description so that each can be parsed on its own.
"""

import re
from typing import List, Union

from pypdf.errors import PdfReadError
from pypdf.generic import DecodedStreamObject, NameObject
from pypdf.xmp import XmpInformation

START_TAG = "<rdf:Description"
END_TAG = "</rdf:Description>"

SELF_CLOSED_DESCRIPTION = re.compile(r"<rdf:Description\b[^>]*/>")
ABOUT_ATTRIBUTE = re.compile(r"""(<rdf:Description\b[^>]*?\srdf:about=)(["'])(.*?)\2""")


def parse_xmp_metadata(data: Union[bytes, str]) -> XmpInformation:
    """
    Parse an XMP packet.

    Raises:
        pypdf.errors.PdfReadError: if the packet is not well-formed XML or has no rdf:RDF element
    """
    if isinstance(data, str):
        data = data.encode("utf-8")

    stream = DecodedStreamObject()
    stream.set_data(data)
    stream[NameObject("/Type")] = NameObject("/Metadata")
    stream[NameObject("/Subtype")] = NameObject("/XML")
    try:
        return XmpInformation(stream)
    except IndexError as e:
        # pypdf indexes the first rdf:RDF element without checking it exists
        raise PdfReadError("XMP packet has no rdf:RDF element") from e


def split_description_sections(xmp: str) -> List[str]:
    """
    Split a packet into one packet per ``rdf:Description`` section.

    Every returned packet keeps the original header (everything before the
    first description) and footer (everything after the last one). Self-closed
    descriptions after the last closing tag become sections of their own.
    A packet without any description is returned unchanged.
    """
    start_index = xmp.find(START_TAG)
    if start_index < 0:
        return [xmp]

    last_end_index = xmp.rfind(END_TAG)
    end_index = last_end_index + len(END_TAG) if last_end_index > start_index else start_index

    header = xmp[:start_index]
    footer = xmp[end_index:]

    sections = []
    for description in xmp[start_index:end_index].split(END_TAG):
        # the middle part ends with END_TAG, which leaves an empty trailing piece
        if description.strip():
            sections.append(description + END_TAG)

    # otherwise they would be repeated in every packet
    sections.extend(SELF_CLOSED_DESCRIPTION.findall(footer))
    footer = SELF_CLOSED_DESCRIPTION.sub("", footer)

    if not sections:
        return [xmp]
    return [header + section + footer for section in sections]


def clear_about_uris(xmp: str) -> str:
    """
    Blank the ``rdf:about`` value of every description of a packet.

    pypdf only reads descriptions about the empty URI, while producers such as
    Acrobat write ``rdf:about="uuid:..."``.
    """
    return ABOUT_ATTRIBUTE.sub(r"\1\2\2", xmp)
