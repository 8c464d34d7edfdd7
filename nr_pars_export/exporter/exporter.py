from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from nr_pars_export.lib import (
    AssembledMatrix,
    UnsupportedExportFormatError,
    pandas,
    setup_logger,
)

from .naming import (
    MEDIA_FILE_COLUMN,
    MEDIA_NAME_COLUMN,
    MOS_COLUMN,
    csv_output_paths,
    excel_output_path,
    table_column_names,
)

logger = setup_logger(__name__)

TRAINING_SHEET = "Training Data"
TESTING_SHEET = "Testing Data"


class ExportFormat(str, Enum):
    """Output formats for the exported tables."""

    CSV = "csv"
    EXCEL = "excel"
    NONE = "none"

    @classmethod
    def parse(cls, value: Union["ExportFormat", str]) -> "ExportFormat":
        """Convert a format name, rejecting anything outside the known formats."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnsupportedExportFormatError(value, [f.value for f in cls]) from e


def build_tables(
    assembled: AssembledMatrix, is_training: np.ndarray
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """
    Build the training and testing tables.

    Both tables have the columns MediaName, MediaFile, mos and then one
    column per requested parameter, in request order, with headers made
    valid and unique.
    """
    is_training = np.asarray(is_training, dtype=bool)
    columns = table_column_names(assembled.parameter_names)

    table_data = {
        MEDIA_NAME_COLUMN: assembled.media_name,
        MEDIA_FILE_COLUMN: assembled.media_file,
        MOS_COLUMN: assembled.y,
    }
    for i, column in enumerate(columns[len(table_data) :]):
        table_data[column] = assembled.X[:, i]

    table = pd.DataFrame(table_data, columns=columns)

    training_table = table.loc[is_training].reset_index(drop=True)
    testing_table = table.loc[~is_training].reset_index(drop=True)
    return training_table, testing_table


def export_tables(
    training_table: pd.DataFrame,
    testing_table: pd.DataFrame,
    fname: Optional[Union[str, Path]],
    export_format: Union[ExportFormat, str],
) -> List[Path]:
    """
    Write the tables in the requested format and return the files written.

    csv writes train_<fname> and test_<fname>; excel writes one workbook with
    a "Training Data" and a "Testing Data" sheet; none writes nothing.
    """
    export_format = ExportFormat.parse(export_format)

    if export_format == ExportFormat.NONE:
        logger.debug("Export format is 'none', no files written")
        return []

    if fname is None or not str(fname).strip():
        raise ValueError(f"A file name is required for the '{export_format.value}' format")

    if export_format == ExportFormat.CSV:
        train_path, test_path = csv_output_paths(fname)
        _prepare_output(train_path)
        _prepare_output(test_path)
        pandas.write_csv(training_table, train_path)
        pandas.write_csv(testing_table, test_path)
        logger.info(f"Training data written to {train_path}")
        logger.info(f"Testing data written to {test_path}")
        return [train_path, test_path]

    workbook_path = excel_output_path(fname)
    if workbook_path != Path(fname):
        logger.warning(f"Writing workbook to {workbook_path} instead of {fname}")
    _prepare_output(workbook_path)
    pandas.write_excel(
        {TRAINING_SHEET: training_table, TESTING_SHEET: testing_table}, workbook_path
    )
    logger.info(f"Training and testing data written to {workbook_path}")
    return [workbook_path]


def _prepare_output(path: Path) -> None:
    if path.exists():
        logger.warning(f"Overwriting existing file {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
