"""Tests for collecting field issues across a catalog."""

from dataclasses import asdict

from conftest import SERIAL_X, catalog_xml

from serial_catalog.core.errors import FieldFormatError
from serial_catalog.core.validators import FieldValidator, collect_issues
from serial_catalog.sources.catalog_xml import parse_catalog


def test_issue_copies_error_location() -> None:
    error = FieldFormatError("missing year", path="series[2]", field="year")

    issue = FieldValidator().issue(error)

    assert asdict(issue) == {
        "validator": "fields",
        "message": "missing year",
        "path": "series[2]",
        "field": "year",
    }


def test_collect_issues_reports_bad_season_and_its_episodes() -> None:
    bad = SERIAL_X.replace('type="season" number="1"', 'type="season" number=""')
    bad = bad.replace('number="1" src=', 'number="one" src=')
    document = parse_catalog(catalog_xml(bad))

    issues = collect_issues(document)

    assert [(issue.path, issue.field) for issue in issues] == [
        ("series[0]/season[0]", "number"),
        ("series[0]/season[0]/episode[0]", "number"),
    ]
    assert issues[1].message == "invalid number 'one': expected an integer"
