from __future__ import annotations

import json

import pytest

from seedpack.domain.parsers import (
    ContentType,
    ParserRegistry,
    content_type_for,
    default_parsers,
    parse_document,
    parse_table,
    passthrough,
)


def test_parse_table_maps_header_to_values() -> None:
    assert parse_table("a,b\n1,2") == [{"a": "1", "b": "2"}]


def test_parse_table_trims_cells_and_accepts_crlf() -> None:
    content = " vendor , amount \r\n TechCorp , 1200 \r\nDataSys,50\r\n"

    assert parse_table(content) == [
        {"vendor": "TechCorp", "amount": "1200"},
        {"vendor": "DataSys", "amount": "50"},
    ]


def test_parse_table_pads_short_rows_and_drops_surplus_cells() -> None:
    rows = parse_table("a,b,c\n1\n1,2,3,4")

    assert rows == [{"a": "1", "b": "", "c": ""}, {"a": "1", "b": "2", "c": "3"}]


@pytest.mark.parametrize("content", ["", "   \n  ", "a,b"])
def test_parse_table_without_data_rows_is_empty(content: str) -> None:
    assert parse_table(content) == []


def test_parse_table_custom_delimiter() -> None:
    assert parse_table("a;b\nx;y", delimiter=";") == [{"a": "x", "b": "y"}]


def test_parse_table_does_not_honour_quotes() -> None:
    rows = parse_table('name,city\n"Doe, Jane",Berlin')

    assert rows == [{"name": '"Doe', "city": 'Jane"'}]


def test_parse_document_rejects_invalid_json() -> None:
    assert parse_document('{"items": [1, 2]}') == {"items": [1, 2]}
    with pytest.raises(json.JSONDecodeError):
        parse_document("not json")


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("invoices.csv", ContentType.TABLE),
        ("TICKETS.JSON", ContentType.DOCUMENT),
        ("sitemap.xml", ContentType.MARKUP),
        ("transcript.txt", ContentType.TEXT),
        ("README.md", ContentType.TEXT),
        ("no_suffix", ContentType.TEXT),
    ],
)
def test_content_type_for(filename: str, expected: ContentType) -> None:
    assert content_type_for(filename) is expected


def test_default_parsers_select_by_filename() -> None:
    parsers = default_parsers()

    assert parsers.for_filename("invoices.csv") is parse_table
    assert parsers.for_filename("zendesk_tickets.json") is parse_document
    assert parsers.for_filename("sitemap.xml") is passthrough
    assert parsers.for_filename("transcript.txt") is passthrough


def test_parser_registry_accepts_new_formats() -> None:
    parsers = ParserRegistry()
    parsers.register("tsv", lambda content: parse_table(content, delimiter="\t"))

    parser = parsers.get("tsv")

    assert parser is not None
    assert parser("a\tb\n1\t2") == [{"a": "1", "b": "2"}]
    assert parsers.get("csv") is None
    assert parsers.for_filename("invoices.csv") is None
