"""
Utility library for the NR parameter export.

This module provides the data model, errors and helpers shared by the
matrix builder and the exporter.
"""

from .logger import setup_logger, set_package_level
from .guards import find_duplicates
from .pandas import pandas
from .exceptions import (
    NRParsError,
    UnsupportedInputError,
    DuplicateMediaNameError,
    ParameterNotFoundError,
    UnknownMediaError,
    MediaCoverageError,
    UnsupportedExportFormatError,
)
from .models import (
    MediaItem,
    MediaDataset,
    ParameterCollection,
    AssembledMatrix,
    SplitMatrices,
    read_structured_file,
)

__all__ = [
    "find_duplicates",
    "pandas",
    "setup_logger",
    "set_package_level",
    "read_structured_file",
    # models
    "MediaItem",
    "MediaDataset",
    "ParameterCollection",
    "AssembledMatrix",
    "SplitMatrices",
    # exceptions
    "NRParsError",
    "UnsupportedInputError",
    "DuplicateMediaNameError",
    "ParameterNotFoundError",
    "UnknownMediaError",
    "MediaCoverageError",
    "UnsupportedExportFormatError",
]
