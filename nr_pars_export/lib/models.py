import json
from functools import cached_property
from pathlib import Path
from typing import Any, List, NamedTuple, Union

import numpy as np
import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
)

from nr_pars_export.lib import setup_logger
from nr_pars_export.lib.pandas import pandas

logger = setup_logger(__name__)

TRAINING_CATEGORY = "train"
MEDIA_NAME_COLUMN = "media_name"


def read_structured_file(path: Union[str, Path]) -> Any:
    """Read a YAML or JSON file into plain Python objects."""
    path = Path(path)
    if path.suffix.lower() in [".yaml", ".yml"]:
        with open(path, "r") as f:
            return yaml.safe_load(f)
    elif path.suffix.lower() == ".json":
        with open(path, "r") as f:
            return json.load(f)
    raise ValueError(f"Unsupported file format: {path.suffix}")


class MediaItem(BaseModel):
    """A single media file with its opinion score and split category."""

    name: str
    file: str
    mos: float
    # Older dataset structures store the split label as "category2"
    category: str = Field(validation_alias=AliasChoices("category", "category2"))

    @property
    def is_training(self) -> bool:
        return self.category == TRAINING_CATEGORY


class MediaDataset(BaseModel):
    """An ordered collection of rated media items."""

    name: str = ""
    media: List[MediaItem] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.media)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "MediaDataset":
        """
        Load a dataset from a CSV, JSON or YAML file.

        CSV files hold one media item per row with the columns
        name, file, mos and category. JSON/YAML files hold either a list of
        media items or a mapping with a "media" list and an optional "name".
        """
        path = Path(path)
        if path.suffix.lower() == ".csv":
            frame = pandas.read_csv(
                path,
                dtype={"name": str, "file": str, "category": str, "category2": str},
            )
            payload: Any = {"media": frame.to_dict(orient="records")}
        else:
            payload = read_structured_file(path)
            if isinstance(payload, list):
                payload = {"media": payload}

        dataset = cls.model_validate(payload)
        if not dataset.name:
            dataset.name = path.stem

        logger.info(f"Dataset '{dataset.name}' loaded from {path} ({len(dataset)} media)")
        return dataset


class ParameterCollection(BaseModel):
    """
    One parameter extraction result.

    data is indexed [parameter][media]: row i holds par_name[i] for every
    entry of media_name, in this collection's own media order.
    """

    name: str = ""
    par_name: List[str]
    media_name: List[str]
    data: List[List[float]]

    @field_validator("data")
    @classmethod
    def validate_data_shape(
        cls, v: List[List[float]], info: ValidationInfo
    ) -> List[List[float]]:
        """Validate that data has one row per parameter and one column per media."""
        par_name = info.data.get("par_name")
        media_name = info.data.get("media_name")
        if par_name is not None and len(v) != len(par_name):
            raise ValueError(
                f"data has {len(v)} rows but {len(par_name)} parameter names"
            )
        if media_name is not None:
            for i, row in enumerate(v):
                if len(row) != len(media_name):
                    raise ValueError(
                        f"data row {i} has {len(row)} values but {len(media_name)} media names"
                    )
        return v

    @cached_property
    def matrix(self) -> np.ndarray:
        return np.asarray(self.data, dtype=float).reshape(
            len(self.par_name), len(self.media_name)
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "ParameterCollection":
        """
        Load a parameter collection from a CSV, JSON or YAML file.

        CSV files hold one media per row: a media_name column followed by one
        column per parameter. JSON/YAML files hold the par_name, media_name and
        data fields directly.
        """
        path = Path(path)
        if path.suffix.lower() == ".csv":
            frame = pandas.read_csv(path, dtype={MEDIA_NAME_COLUMN: str})
            if MEDIA_NAME_COLUMN not in frame.columns:
                raise ValueError(f"{path} has no '{MEDIA_NAME_COLUMN}' column")
            par_names = [str(c) for c in frame.columns if c != MEDIA_NAME_COLUMN]
            payload: Any = {
                "par_name": par_names,
                "media_name": frame[MEDIA_NAME_COLUMN].tolist(),
                "data": frame[par_names].to_numpy(dtype=float).T.tolist(),
            }
        else:
            payload = read_structured_file(path)

        collection = cls.model_validate(payload)
        if not collection.name:
            collection.name = path.stem

        logger.info(
            f"Parameter collection '{collection.name}' loaded from {path} "
            f"({len(collection.par_name)} parameters, {len(collection.media_name)} media)"
        )
        return collection


class AssembledMatrix(BaseModel):
    """Feature matrix with its label and metadata vectors, all in canonical media order."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    X: np.ndarray
    y: np.ndarray
    parameter_names: List[str]
    # Collection each column was taken from
    sources: List[str]
    media_name: List[str]
    media_file: List[str]

    @property
    def n_media(self) -> int:
        return int(self.X.shape[0])

    @property
    def n_parameters(self) -> int:
        return int(self.X.shape[1])


class SplitMatrices(NamedTuple):
    """Training and verification partitions of an assembled matrix."""

    Xtrain: np.ndarray
    Xverify: np.ndarray
    ytrain: np.ndarray
    yverify: np.ndarray
