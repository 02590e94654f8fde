"""
Translations Table Schema
========================

Schema for the translations GTFS Schedule table.
"""

import pandera.pandas as pa
from pandera.typing import Series
from gtfs_store.schemas.common.columns import AgencyKeyMixin


class Translations(AgencyKeyMixin, pa.DataFrameModel):
    """
    Pandera DataFrameModel for translations data.
    """

    table_name:				Series[str]				= pa.Field(nullable=False, description="Table containing the field to be translated")
    field_name:				Series[str]				= pa.Field(nullable=False, description="Name of the field to be translated")
    language:				Series[str]				= pa.Field(nullable=False, description="Language of translation")
    translation:			Series[str]				= pa.Field(nullable=False, description="Translated value")
    record_id:				Series[str]				= pa.Field(nullable=True,  description="Record that corresponds to the field to be translated")
    record_sub_id:			Series[str]				= pa.Field(nullable=True,  description="Helps the record that contains the field to be translated")
    field_value:			Series[str]				= pa.Field(nullable=True,  description="Value to translate instead of a record reference")

    class Config:
        strict = False  # Extra CSV columns are dropped before validation
        coerce = True   # Attempt to coerce data types


# Store table configuration
Translations._description = "Translations of customer-facing dataset values"

__all__ = [
    'Translations'
]
