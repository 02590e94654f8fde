"""
Schema Utilities
================

Utility functions for working with pandera schemas and DataFrames: aligning
raw CSV frames to a table schema, coercing GTFS text encodings to stored
types, and validating rows while collecting the ones that must be dropped.
"""

import importlib
from typing import Any, Dict, List, Tuple

import numpy as np
import pandas as pd
from pandera.errors import SchemaErrors

from gtfs_store.common.errors import MalformedRowError
from gtfs_store.common.gtfs_types import parse_gtfs_time
from gtfs_store.common.logging_utils import logger
from gtfs_store.schemas.common.columns import DATE, FLOAT, INTEGER, TIME

# Header occupies line 1 of a GTFS file, so row index 0 is line 2
FIRST_DATA_LINE = 2

_INT64_LIMIT = 2 ** 63

_REASONS = {
    "not_nullable": "is required but empty",
    "isin": "is not an allowed value",
    "greater_than_or_equal_to": "is below the allowed minimum",
    "less_than_or_equal_to": "is above the allowed maximum",
    "in_range": "is out of range",
}


def _get_schema_attribute(schema_class, attribute_name, default=None):
    """
    Get an attribute from the schema module.

    Args:
        schema_class: Pandera DataFrameModel class
        attribute_name: Name of the attribute to get
        default: Default value if attribute not found

    Returns:
        Attribute value or default
    """
    try:
        module = importlib.import_module(schema_class.__module__)
        if hasattr(module, attribute_name):
            return getattr(module, attribute_name)
    except ImportError:
        logger.warning(f"Could not import schema module {schema_class.__module__}")

    return default


def normalize_blank_values(df: pd.DataFrame) -> pd.DataFrame:
    """
    Strip surrounding whitespace from every cell and header, and turn empty cells into None.

    Args:
        df: DataFrame read with every column as text

    Returns:
        Object-typed DataFrame where missing values are None
    """
    result_df = df.astype(object)
    result_df.columns = [str(col).strip() for col in result_df.columns]

    for col in result_df.columns:
        stripped = result_df[col].map(lambda v: v.strip() if isinstance(v, str) else v)
        blank = stripped.map(lambda v: v is None or v == "" or (isinstance(v, float) and np.isnan(v))).astype(bool)
        stripped[blank] = None
        result_df[col] = stripped

    return result_df


def add_missing_schema_fields(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Add fields that are defined in the schema but missing from the DataFrame.
    Missing fields are filled with None and typed later by the coercion step.

    Args:
        df: Input DataFrame
        schema_class: Pandera DataFrameModel class

    Returns:
        DataFrame with missing schema fields added
    """
    result_df = df.copy()
    schema_instance = schema_class.to_schema()

    added_fields = []
    for field_name in schema_instance.columns.keys():
        if field_name not in result_df.columns:
            result_df[field_name] = pd.Series([None] * len(result_df), index=result_df.index, dtype=object)
            added_fields.append(field_name)

    if added_fields:
        logger.debug(f"Added {len(added_fields)} missing schema fields: {added_fields} for schema {schema_class.__name__}")

    return result_df


def drop_extra_columns_not_in_schema(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Drop columns from the DataFrame that don't appear in the schema.
    Only keeps columns that are defined in the schema.

    Args:
        df: Input DataFrame
        schema_class: Pandera DataFrameModel class

    Returns:
        DataFrame with only columns that exist in the schema
    """
    schema_columns = set(schema_class.to_schema().columns.keys())
    extra_columns = [col for col in df.columns if col not in schema_columns]

    if not extra_columns:
        return df

    logger.info(f"Dropped {len(extra_columns)} extra columns not in schema {schema_class.__name__}: {extra_columns}")
    return df.drop(columns=extra_columns)


def order_columns_by_schema(df: pd.DataFrame, schema_class) -> pd.DataFrame:
    """
    Order DataFrame columns to match the order they appear in the schema.

    Args:
        df: Input DataFrame
        schema_class: Pandera DataFrameModel class

    Returns:
        DataFrame with columns ordered according to schema field order
    """
    schema_columns = list(schema_class.to_schema().columns.keys())
    ordered_columns = [col for col in schema_columns if col in df.columns]
    return df[ordered_columns]


def _coerce_time(ser: pd.Series) -> Tuple[pd.Series, pd.Series]:
    values = []
    bad = []
    for value in ser:
        try:
            values.append(parse_gtfs_time(value))
            bad.append(False)
        except ValueError:
            values.append(None)
            bad.append(True)
    return pd.Series(values, index=ser.index, dtype="Int64"), pd.Series(bad, index=ser.index, dtype=bool)


def _coerce_integer(ser: pd.Series) -> Tuple[pd.Series, pd.Series]:
    numeric = pd.to_numeric(ser, errors="coerce")
    # Values with a fractional part are rejected rather than truncated, and so are
    # values the nullable Int64 column cannot hold
    whole = (numeric % 1) == 0
    in_range = numeric.abs().lt(_INT64_LIMIT)
    numeric = numeric.where(numeric.isna() | (whole & in_range))
    bad = ser.notna() & numeric.isna()
    return numeric.astype("Int64"), bad


def _coerce_float(ser: pd.Series) -> Tuple[pd.Series, pd.Series]:
    numeric = pd.to_numeric(ser, errors="coerce").astype("float64")
    bad = ser.notna() & numeric.isna()
    return numeric, bad


def _coerce_date(ser: pd.Series) -> Tuple[pd.Series, pd.Series]:
    well_formed = ser.map(lambda v: isinstance(v, str) and len(v) == 8 and v.isdigit()).astype(bool)
    parsed = pd.to_datetime(ser.where(well_formed), format="%Y%m%d", errors="coerce")
    bad = ser.notna() & parsed.isna()
    return parsed.astype("datetime64[ns]"), bad


def _coerce_string(ser: pd.Series) -> Tuple[pd.Series, pd.Series]:
    return ser.astype(object), pd.Series(False, index=ser.index, dtype=bool)


_COERCERS = {
    TIME: (_coerce_time, "is not a valid GTFS time (H:MM:SS)"),
    INTEGER: (_coerce_integer, "is not a valid integer"),
    FLOAT: (_coerce_float, "is not a valid number"),
    DATE: (_coerce_date, "is not a valid GTFS date (YYYYMMDD)"),
}


def coerce_columns_by_type(df: pd.DataFrame, column_types: Dict[str, str]) -> Tuple[pd.DataFrame, List[Dict[str, Any]]]:
    """
    Convert text columns to their stored representation.

    Args:
        df: DataFrame of text values (None for empty cells)
        column_types: Mapping of column name to semantic type

    Returns:
        Tuple of the coerced DataFrame and a list of failures, one per
        cell whose non-empty value could not be converted
    """
    result_df = df.copy()
    failures: List[Dict[str, Any]] = []

    for col_name, col_type in column_types.items():
        if col_name not in result_df.columns:
            continue

        raw = result_df[col_name]
        coercer, reason = _COERCERS.get(col_type, (_coerce_string, ""))
        coerced, bad = coercer(raw)

        for index in raw.index[bad.to_numpy()]:
            failures.append({"index": index, "column": col_name, "value": raw.loc[index], "reason": reason})

        result_df[col_name] = coerced

    return result_df, failures


def validate_with_schema(df: pd.DataFrame, schema_class) -> Tuple[pd.DataFrame, List[Dict[str, Any]]]:
    """
    Validate with pandera, dropping rows that fail row-level checks.

    Args:
        df: Coerced DataFrame
        schema_class: Pandera DataFrameModel class

    Returns:
        Tuple of the validated DataFrame and the failures that caused rows to be dropped

    Raises:
        SchemaErrors: If a failure is not attributable to a row
    """
    schema = schema_class.to_schema()

    try:
        return schema.validate(df, lazy=True), []
    except SchemaErrors as exc:
        cases = exc.failure_cases
        if cases["index"].isna().any():
            logger.error(f"Schema {schema_class.__name__} failed outside row checks: {exc}")
            raise

        failures = [
            {
                "index": case["index"],
                "column": case["column"],
                "value": None if pd.isna(case["failure_case"]) else case["failure_case"],
                "reason": _REASONS.get(str(case["check"]).split("(")[0], f"failed check {case['check']}"),
            }
            for case in cases.to_dict("records")
        ]
        bad_index = sorted({f["index"] for f in failures})
        return schema.validate(df.drop(index=bad_index)), failures


def clean_and_validate_dataframe(df: pd.DataFrame, table_info, agency_key: str) -> Tuple[pd.DataFrame, List[MalformedRowError]]:
    """
    Clean and validate a raw GTFS table read as text.

    Args:
        df: Raw DataFrame, one text column per CSV header, index = data row number
        table_info: Descriptor of the target table
        agency_key: Agency dataset the rows are imported into

    Returns:
        Tuple of the validated DataFrame (schema column order) and the
        warnings for every dropped row
    """
    schema_class = table_info.schema_class

    # 1. Normalize blanks and align columns with the schema
    df = normalize_blank_values(df)
    df = drop_extra_columns_not_in_schema(df.drop(columns=["agency_key"], errors="ignore"), schema_class)
    df = add_missing_schema_fields(df, schema_class)
    df["agency_key"] = agency_key
    df = order_columns_by_schema(df, schema_class)

    # 2. Convert GTFS encodings to stored types
    column_types = {spec.name: spec.type for spec in table_info.columns}
    df, failures = coerce_columns_by_type(df, column_types)
    if failures:
        df = df.drop(index=sorted({f["index"] for f in failures}))

    # 3. Pandera row checks (required values, enumerations, ranges)
    df, check_failures = validate_with_schema(df, schema_class)
    failures.extend(check_failures)

    warnings = [
        MalformedRowError(
            table=table_info.name,
            line=int(f["index"]) + FIRST_DATA_LINE,
            column=f["column"],
            value=f["value"],
            reason=f["reason"],
        )
        for f in sorted(failures, key=lambda f: (int(f["index"]), str(f["column"])))
    ]

    if warnings:
        logger.warning(
            "Dropped malformed rows: table=%s rows=%d",
            table_info.name,
            len({w.line for w in warnings}),
        )

    return df, warnings


__all__ = [
    "FIRST_DATA_LINE",
    "add_missing_schema_fields",
    "clean_and_validate_dataframe",
    "coerce_columns_by_type",
    "drop_extra_columns_not_in_schema",
    "normalize_blank_values",
    "order_columns_by_schema",
    "validate_with_schema",
]
