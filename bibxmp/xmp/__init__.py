"""
XMP metadata reading.

Module Structure:
- reader.py: open a PDF and read entries from its XMP stream (or document information)
- shared.py: split a packet into one packet per rdf:Description and parse it
- extractors/: Dublin Core and document-information field mapping

Usage:
    from bibxmp.xmp.reader import read_xmp

    entries = read_xmp("paper.pdf")
"""
