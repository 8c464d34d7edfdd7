"""
Export of the assembled training and testing tables.

This module provides functionality for:
- Building labeled tables from an assembled feature matrix
- Making parameter names valid and unique column headers
- Writing the tables as CSV files or an Excel workbook
"""

from .exporter import (
    ExportFormat,
    TESTING_SHEET,
    TRAINING_SHEET,
    build_tables,
    export_tables,
)
from .naming import (
    csv_output_paths,
    excel_output_path,
    make_unique_names,
    make_valid_name,
    table_column_names,
)

__all__ = [
    "ExportFormat",
    "TESTING_SHEET",
    "TRAINING_SHEET",
    "build_tables",
    "export_tables",
    "csv_output_paths",
    "excel_output_path",
    "make_unique_names",
    "make_valid_name",
    "table_column_names",
]
