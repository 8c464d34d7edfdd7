from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from nr_pars_export.exporter import ExportFormat


class LogLevel(str, Enum):
    """Verbosity of the export run."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ExportConfig(BaseModel):
    """Configuration for one export run."""

    dataset: str = Field(..., description="Path to the dataset file (CSV/JSON/YAML)")
    parameters: List[str] = Field(
        ...,
        description="Paths to the parameter collection files, in resolution order",
    )
    param_list: List[str] = Field(
        default_factory=list,
        description="Parameters to export, in column order. Empty exports all parameters",
    )
    format: ExportFormat = Field(
        ExportFormat.NONE, description="Export format (csv, excel or none)"
    )
    fname: Optional[str] = Field(
        None,
        description="Output file name, required unless format is 'none'",
        validate_default=True,
    )
    log_level: LogLevel = Field(LogLevel.INFO, description="Logging level")

    @field_validator("parameters")
    @classmethod
    def validate_parameters(cls, v: List[str]) -> List[str]:
        """Validate that at least one parameter collection is given."""
        if not v:
            raise ValueError("at least one parameter collection file must be provided")
        return v

    @field_validator("fname")
    @classmethod
    def validate_fname(cls, v: Optional[str], info: ValidationInfo) -> Optional[str]:
        """Validate that an output file name is given when something is written."""
        export_format = info.data.get("format")
        if export_format not in (None, ExportFormat.NONE) and not v:
            raise ValueError(
                f"fname must be provided when format is '{export_format.value}'"
            )
        return v
