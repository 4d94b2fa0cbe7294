"""Tests for the BibEntry record."""

from bibxmp.model.bib_entry import BibEntry


def test_new_entry_is_empty():
    entry = BibEntry()

    assert entry.is_empty()
    assert entry.entry_type == "misc"
    assert entry.citation_key is None


def test_set_field_normalises_name_and_value():
    entry = BibEntry()
    entry.set_field("Title", "  Spaced Title  ")

    assert entry.get_field("title") == "Spaced Title"
    assert entry.get_field("TITLE") == "Spaced Title"
    assert entry.field_names == ["title"]


def test_blank_values_are_ignored():
    entry = BibEntry()
    entry.set_field("title", None)
    entry.set_field("author", "")
    entry.set_field("year", "   ")

    assert entry.is_empty()
    assert entry.get_field("title", "default") == "default"


def test_citation_key_alone_makes_entry_non_empty():
    entry = BibEntry()
    entry.set_citation_key("key2020")

    assert not entry.is_empty()


def test_set_type_lowercases_and_ignores_blank():
    entry = BibEntry()
    entry.set_type("Article")
    entry.set_type("  ")

    assert entry.entry_type == "article"


def test_to_dict_is_a_copy():
    entry = BibEntry(entry_type="book", citation_key="k", fields={"title": "T"})

    data = entry.to_dict()
    data["fields"]["title"] = "changed"

    assert data["entry_type"] == "book"
    assert data["citation_key"] == "k"
    assert entry.get_field("title") == "T"


def test_to_bibtex():
    entry = BibEntry(entry_type="article", citation_key="smith2017")
    entry.set_field("title", "A Title")
    entry.set_field("author", "Alice Smith")

    assert entry.to_bibtex() == (
        "@article{smith2017,\n"
        "  author = {Alice Smith},\n"
        "  title = {A Title},\n"
        "}"
    )


def test_to_bibtex_without_key():
    entry = BibEntry(fields={"title": "Untitled"})

    assert entry.to_bibtex().startswith("@misc{,")


def test_str_summarises_entry():
    entry = BibEntry(entry_type="article", fields={"title": "T", "year": "2020"})

    assert str(entry) == "BibEntry(article, <no key>, 2 fields)"
    entry.set_citation_key("key2020")
    assert str(entry) == "BibEntry(article, key2020, 2 fields)"
