from typing import List, Optional, Sequence


class NRParsError(Exception):
    """Base error for all matrix assembly and export failures."""


class UnsupportedInputError(NRParsError, ValueError):
    """Raised when more than one dataset is supplied."""

    def __init__(self, dataset_count: int):
        self.dataset_count = dataset_count
        super().__init__(
            f"Only one dataset is accepted per export, got {dataset_count}"
        )


class DuplicateMediaNameError(NRParsError, ValueError):
    """Raised when two media items of the dataset share a name."""

    def __init__(self, names: Sequence[str]):
        self.names: List[str] = list(names)
        super().__init__(
            f"Media names must be unique within the dataset, repeated: {self.names}"
        )


class ParameterNotFoundError(NRParsError, KeyError):
    """Raised when a requested parameter is absent from every collection."""

    def __init__(self, parameter: str, searched: Sequence[str] = ()):
        self.parameter = parameter
        self.searched: List[str] = list(searched)
        super().__init__(parameter)

    def __str__(self) -> str:
        return (
            f"Parameter '{self.parameter}' not found in any parameter collection "
            f"(searched: {self.searched})"
        )


class UnknownMediaError(NRParsError, KeyError):
    """Raised when a parameter collection references media absent from the dataset."""

    def __init__(self, media_name: str, collection: Optional[str] = None):
        self.media_name = media_name
        self.collection = collection
        super().__init__(media_name)

    def __str__(self) -> str:
        where = f" referenced by '{self.collection}'" if self.collection else ""
        return f"Media '{self.media_name}'{where} is not part of the dataset"


class MediaCoverageError(NRParsError, ValueError):
    """Raised when a collection does not hold every dataset media exactly once."""

    def __init__(
        self,
        collection: str,
        missing: Sequence[str] = (),
        repeated: Sequence[str] = (),
    ):
        self.collection = collection
        self.missing: List[str] = list(missing)
        self.repeated: List[str] = list(repeated)
        super().__init__(
            f"Parameter collection '{collection}' does not cover the dataset media "
            f"exactly once (missing: {self.missing}, repeated: {self.repeated})"
        )


class UnsupportedExportFormatError(NRParsError, ValueError):
    """Raised when an export format outside the recognised set is requested."""

    def __init__(self, export_format: object, supported: Sequence[str] = ()):
        self.export_format = export_format
        self.supported: List[str] = list(supported)
        super().__init__(
            f"Unsupported export format '{export_format}', expected one of {self.supported}"
        )
