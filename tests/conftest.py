"""Pytest configuration and fixtures for bibxmp tests."""

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, NameObject, PdfObject

from bibxmp.config import XmpPreferences

XMP_HEADER = (
    '<?xpacket begin="\ufeff" id="W5M0MpCehiHzreSzNTczkc9d"?>\n'
    '<x:xmpmeta xmlns:x="adobe:ns:meta/">\n'
    '  <rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#">\n'
)
XMP_FOOTER = (
    '  </rdf:RDF>\n'
    '</x:xmpmeta>\n'
    '<?xpacket end="w"?>'
)


def _container(kind: str, values: Iterable[str]) -> str:
    items = "".join(f"<rdf:li>{value}</rdf:li>" for value in values)
    return f"<rdf:{kind}>{items}</rdf:{kind}>"


def dublin_core_description(
    title: Optional[str] = None,
    creators: Iterable[str] = (),
    contributors: Iterable[str] = (),
    subjects: Iterable[str] = (),
    publishers: Iterable[str] = (),
    languages: Iterable[str] = (),
    relations: Iterable[str] = (),
    types: Iterable[str] = (),
    dates: Iterable[str] = (),
    description: Optional[str] = None,
    rights: Optional[str] = None,
    identifier: Optional[str] = None,
    source: Optional[str] = None,
    coverage: Optional[str] = None,
) -> str:
    """Build one rdf:Description section holding Dublin Core properties."""
    parts = []
    if title is not None:
        parts.append(f'<dc:title><rdf:Alt><rdf:li xml:lang="x-default">{title}</rdf:li></rdf:Alt></dc:title>')
    if description is not None:
        parts.append(f'<dc:description><rdf:Alt><rdf:li xml:lang="x-default">{description}</rdf:li></rdf:Alt></dc:description>')
    if rights is not None:
        parts.append(f'<dc:rights><rdf:Alt><rdf:li xml:lang="en">{rights}</rdf:li></rdf:Alt></dc:rights>')
    for name, kind, values in (
        ("creator", "Seq", creators),
        ("contributor", "Bag", contributors),
        ("subject", "Bag", subjects),
        ("publisher", "Bag", publishers),
        ("language", "Bag", languages),
        ("relation", "Bag", relations),
        ("type", "Bag", types),
        ("date", "Seq", dates),
    ):
        values = list(values)
        if values:
            parts.append(f"<dc:{name}>{_container(kind, values)}</dc:{name}>")
    for name, value in (("identifier", identifier), ("source", source), ("coverage", coverage)):
        if value is not None:
            parts.append(f"<dc:{name}>{value}</dc:{name}>")

    body = "\n      ".join(parts)
    return (
        '    <rdf:Description rdf:about="" xmlns:dc="http://purl.org/dc/elements/1.1/">\n'
        f"      {body}\n"
        "    </rdf:Description>\n"
    )


def xmp_packet(*descriptions: str) -> str:
    return XMP_HEADER + "".join(descriptions) + XMP_FOOTER


def write_pdf(path: Path, info: Optional[dict] = None, xmp: Optional[str] = None, metadata: Optional[PdfObject] = None,
              user_password: Optional[str] = None) -> Path:
    """Write a one-page PDF with optional document information, XMP stream and encryption.

    `metadata` stores an arbitrary object as the catalog's /Metadata instead of an XMP stream.
    """
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)

    if info:
        writer.add_metadata(info)

    if xmp is not None:
        stream = DecodedStreamObject()
        stream.set_data(xmp.encode("utf-8"))
        stream[NameObject("/Type")] = NameObject("/Metadata")
        stream[NameObject("/Subtype")] = NameObject("/XML")
        writer._root_object[NameObject("/Metadata")] = writer._add_object(stream)

    if metadata is not None:
        writer._root_object[NameObject("/Metadata")] = writer._add_object(metadata)

    if user_password is not None:
        writer.encrypt(user_password=user_password, owner_password="owner", algorithm="RC4-128")

    with open(path, "wb") as f:
        writer.write(f)
    return path


@pytest.fixture
def build_description() -> Callable[..., str]:
    return dublin_core_description


@pytest.fixture
def build_xmp() -> Callable[..., str]:
    return xmp_packet


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing PDFs into the test's temporary directory."""

    def _make_pdf(name: str = "document.pdf", **kwargs) -> Path:
        return write_pdf(tmp_path / name, **kwargs)

    return _make_pdf


@pytest.fixture
def preferences() -> XmpPreferences:
    return XmpPreferences(keyword_separator=", ")
