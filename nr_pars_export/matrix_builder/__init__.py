"""
Feature Matrix Assembly Component for NR quality-assessment models.

This module provides functionality for:
- Indexing the media of a dataset in a canonical order
- Resolving requested parameters across parameter collections (first match wins)
- Aligning each parameter row to the canonical media order
- Assembling the feature matrix and splitting it into training and verification sets
"""

from .aligner import align_row, canonical_permutation
from .assembler import MatrixAssembler, export_nr_pars
from .config import ExportConfig, LogLevel
from .media_index import MediaIndex
from .resolver import find_shadowed_parameters, requested_parameters, resolve_parameter

__all__ = [
    "MediaIndex",
    "MatrixAssembler",
    "export_nr_pars",
    "align_row",
    "canonical_permutation",
    "resolve_parameter",
    "requested_parameters",
    "find_shadowed_parameters",
    "ExportConfig",
    "LogLevel",
]
