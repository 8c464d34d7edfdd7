from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Union

import numpy as np

from nr_pars_export.lib import (
    DuplicateMediaNameError,
    MediaDataset,
    UnknownMediaError,
    UnsupportedInputError,
    find_duplicates,
    setup_logger,
)

logger = setup_logger(__name__)


class MediaIndex:
    """
    Canonical row order of the media of one dataset.

    Positions are 0-based and follow the dataset's iteration order. The
    label vector, training flags and metadata are parallel to the positions.
    """

    def __init__(
        self,
        names: Sequence[str],
        files: Sequence[str],
        labels: Sequence[float],
        is_training: Sequence[bool],
    ):
        if not len(names) == len(files) == len(labels) == len(is_training):
            raise ValueError("MediaIndex vectors must all have the same length")

        duplicates = find_duplicates(names)
        if duplicates:
            raise DuplicateMediaNameError(duplicates)

        self._names: List[str] = list(names)
        self._files: List[str] = list(files)
        self._positions: Mapping[str, int] = MappingProxyType(
            {name: position for position, name in enumerate(self._names)}
        )

        self._labels = np.array(labels, dtype=float)
        self._labels.flags.writeable = False
        self._is_training = np.array(is_training, dtype=bool)
        self._is_training.flags.writeable = False

    @classmethod
    def build(
        cls, datasets: Union[MediaDataset, Sequence[MediaDataset]]
    ) -> "MediaIndex":
        """Build the index from a dataset (or a sequence holding exactly one)."""
        if isinstance(datasets, MediaDataset):
            dataset = datasets
        else:
            datasets = list(datasets)
            if len(datasets) != 1:
                raise UnsupportedInputError(len(datasets))
            dataset = datasets[0]

        index = cls(
            names=[item.name for item in dataset.media],
            files=[item.file for item in dataset.media],
            labels=[item.mos for item in dataset.media],
            is_training=[item.is_training for item in dataset.media],
        )
        logger.info(
            f"Media index built for dataset '{dataset.name}': {len(index)} media, "
            f"{index.training_count} training, {index.verification_count} verification"
        )
        return index

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._positions

    def position(self, name: str, source: Optional[str] = None) -> int:
        """Canonical position of a media name; source names the caller for errors."""
        try:
            return self._positions[name]
        except KeyError as e:
            raise UnknownMediaError(name, source) from e

    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def files(self) -> List[str]:
        return list(self._files)

    @property
    def labels(self) -> np.ndarray:
        return self._labels

    @property
    def is_training(self) -> np.ndarray:
        return self._is_training

    @property
    def training_count(self) -> int:
        return int(self._is_training.sum())

    @property
    def verification_count(self) -> int:
        return len(self) - self.training_count
