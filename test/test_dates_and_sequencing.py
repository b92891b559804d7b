from datetime import date

import pytest

from bizdash.domain.dates import format_date, looks_like_timestamp, parse_timestamp
from bizdash.domain.errors import ParseError
from bizdash.domain.models import Sale
from bizdash.domain.schema import get_schema
from bizdash.services.sequencing import RequestSequencer


@pytest.mark.parametrize("value, expected", [
    ("2024-01-01T00:00:00.000Z", "1/1/2024"),
    ("2024-12-31T23:30:00+05:30", "12/31/2024"),
    ("Mon Jan 01 2024 00:00:00 GMT+0000 (Coordinated Universal Time)", "1/1/2024"),
    ("Fri Mar 15 2024 18:45:00 GMT+0530 (India Standard Time)", "3/15/2024"),
    ("Mon, 01 Jan 2024 00:00:00 GMT", "1/1/2024"),
    ("Sun, 31 Mar 2024 23:59:59 GMT", "3/31/2024"),
    (date(2024, 7, 4), "7/4/2024"),
])
def test_format_date_handles_backend_timestamp_shapes(value, expected):
    assert format_date(value) == expected


def test_unparseable_values_fall_back_to_text():
    assert parse_timestamp("GMT soon") is None
    assert format_date("GMT soon") == "GMT soon"
    assert format_date(None) == ""


def test_marker_detection_is_textual():
    assert looks_like_timestamp("Mon Jan 01 2024 00:00:00 GMT+0000")
    assert not looks_like_timestamp(150)


def test_short_rows_decode_with_missing_fields():
    sale = Sale.from_row(["S1", "P1"])
    assert sale.amount == 0.0
    assert sale.timestamp is None


def test_non_numeric_amount_is_a_parse_error():
    with pytest.raises(ParseError, match="amount"):
        Sale.from_row(["S1", "P1", "Pen", 1, 2, "lots", 0, None])


def test_schema_lookup():
    assert get_schema("sales").sheet_name == "Sales"
    assert get_schema("sales").column_count == 8
    with pytest.raises(KeyError):
        get_schema("invoices")


def test_sequencer_discards_older_tickets_per_key():
    seq = RequestSequencer()
    first = seq.issue("products")
    second = seq.issue("products")
    other = seq.issue("sales")

    assert seq.try_apply("products", second)
    assert not seq.try_apply("products", first)
    assert seq.try_apply("sales", other)
    assert second > first


def test_utc_string_form_parses_as_utc():
    dt = parse_timestamp("Mon, 01 Jan 2024 00:00:00 GMT")
    assert dt is not None
    assert dt.utcoffset().total_seconds() == 0
