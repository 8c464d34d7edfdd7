from pathlib import Path
from typing import Any, Dict, Optional

import pandas as pd


class pandas:
    """
    A wrapper around pandas with type hints.
    """

    @staticmethod
    def read_csv(path: Path, dtype: Optional[Dict[str, Any]] = None) -> pd.DataFrame:
        return pd.read_csv(path, dtype=dtype)  # type: ignore

    @staticmethod
    def write_csv(frame: pd.DataFrame, path: Path) -> None:
        frame.to_csv(path, index=False)  # type: ignore

    @staticmethod
    def write_excel(sheets: Dict[str, pd.DataFrame], path: Path) -> None:
        """Write each frame to its own named sheet of a single workbook."""
        with pd.ExcelWriter(path, engine="openpyxl") as writer:  # type: ignore
            for sheet_name, frame in sheets.items():
                frame.to_excel(writer, sheet_name=sheet_name, index=False)  # type: ignore
