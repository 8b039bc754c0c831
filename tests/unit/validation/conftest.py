"""Pytest configuration and fixtures for validation tests."""

import pytest


@pytest.fixture
def valid_csv() -> str:
    """Small CSV with a header and three consistent rows."""
    return "id,title,status\n1,First,open\n2,Second,closed\n3,Third,open\n"


@pytest.fixture
def quoted_csv() -> str:
    """CSV whose data row contains a quoted comma."""
    return 'name,note\nAna,"hello, world"\nBob,plain'


@pytest.fixture
def csv_with_column_mismatch() -> str:
    """CSV with two rows that disagree with the header."""
    return "a,b,c\n1,2\n4,5,6\n7,8,9,10"


@pytest.fixture
def valid_json() -> str:
    return '{"title": "Sample", "keywords": ["a", "b"], "count": 2, "draft": false}'


@pytest.fixture
def valid_yaml() -> str:
    return "title: Sample\nkeywords:\n  - a\n  - b\nnested:\n  count: 2\n"


@pytest.fixture
def valid_xml() -> str:
    return '<?xml version="1.0"?>\n<root><item id="1">one</item><item id="2"/></root>'


@pytest.fixture
def xml_with_doctype() -> str:
    """XML that declares an internal entity (billion-laughs style)."""
    return (
        '<?xml version="1.0"?>\n'
        '<!DOCTYPE lolz [<!ENTITY lol "lol">]>\n'
        "<lolz>&lol;</lolz>"
    )
