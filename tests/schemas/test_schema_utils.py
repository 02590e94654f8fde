"""Tests for frame cleaning, coercion and row validation."""

import pandas as pd

from gtfs_store.schemas.schema_registry import get_table_info
from gtfs_store.schemas.common.schema_utils import (
    clean_and_validate_dataframe,
    coerce_columns_by_type,
    normalize_blank_values,
)


def _raw(rows, columns):
    return pd.DataFrame(rows, columns=columns, dtype=str)


def test_normalize_blank_values_strips_and_nulls():
    df = normalize_blank_values(_raw([[" S1 ", ""], ["S2", "  "]], [" stop_id", "stop_name"]))

    assert list(df.columns) == ["stop_id", "stop_name"]
    assert df["stop_id"].tolist() == ["S1", "S2"]
    assert df["stop_name"].isna().all(), "blank cells should become null"


def test_coerce_reports_bad_values():
    df = pd.DataFrame({"t": ["25:00:00", "bad", None], "n": ["1", "1.5", "x"]}, dtype=object)

    coerced, failures = coerce_columns_by_type(df, {"t": "time", "n": "integer"})

    assert coerced["t"].iloc[0] == 90000
    bad = {(f["index"], f["column"]) for f in failures}
    assert bad == {(1, "t"), (1, "n"), (2, "n")}, f"unexpected failures: {bad}"


def test_clean_and_validate_drops_malformed_rows():
    """Bad values and missing required values drop the row and produce a warning."""
    info = get_table_info("routes")
    raw = _raw(
        [
            ["A1", "AG", "3", "extra"],
            ["B2", "AG", "bus", "extra"],
            ["", "AG", "3", "extra"],
            ["D4", "AG", "-1", "extra"],
        ],
        ["route_id", "agency_id", "route_type", "unknown_column"],
    )

    df, warnings = clean_and_validate_dataframe(raw, info, "demo")

    assert df["route_id"].tolist() == ["A1"]
    assert "unknown_column" not in df.columns
    assert df["agency_key"].tolist() == ["demo"]

    lines = sorted(w.line for w in warnings)
    assert lines == [3, 4, 5], f"CSV lines of dropped rows, got {lines}"
    by_line = {w.line: w for w in warnings}
    assert by_line[3].column == "route_type" and by_line[3].value == "bus"
    assert by_line[4].column == "route_id"
    assert all(w.table == "routes" for w in warnings)


def test_clean_and_validate_empty_table_keeps_columns():
    info = get_table_info("calendar_dates")
    df, warnings = clean_and_validate_dataframe(pd.DataFrame(), info, "demo")

    assert df.empty
    assert warnings == []
    assert {"service_id", "date", "exception_type"} <= set(df.columns)


def test_coerce_rejects_integers_outside_int64():
    df = pd.DataFrame({"n": ["7", "100000000000000000000", "-9223372036854775809", "1e400"]}, dtype=object)

    coerced, failures = coerce_columns_by_type(df, {"n": "integer"})

    assert coerced["n"].iloc[0] == 7
    assert coerced["n"].iloc[1:].isna().all()
    assert sorted(f["index"] for f in failures) == [1, 2, 3], "oversized values are coercion failures"
    assert all(f["reason"] == "is not a valid integer" for f in failures)
