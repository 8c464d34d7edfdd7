from typing import Optional

import numpy as np

from nr_pars_export.lib import (
    MediaCoverageError,
    ParameterCollection,
    UnknownMediaError,
    find_duplicates,
)

from .media_index import MediaIndex


def canonical_permutation(
    collection: ParameterCollection, media_index: MediaIndex
) -> np.ndarray:
    """
    Local media positions of a collection sorted into canonical media order.

    Taking a row's values at these positions gives the row in the order of
    the media index.
    """
    for media_name in collection.media_name:
        if media_name not in media_index:
            raise UnknownMediaError(media_name, collection.name)

    positions = np.array(
        [media_index.position(media_name) for media_name in collection.media_name],
        dtype=int,
    )

    repeated = find_duplicates(collection.media_name)
    if repeated or len(positions) != len(media_index):
        covered = set(collection.media_name)
        missing = [name for name in media_index.names if name not in covered]
        raise MediaCoverageError(collection.name, missing=missing, repeated=repeated)

    return np.argsort(positions, kind="stable")


def align_row(
    collection: ParameterCollection,
    row_index: int,
    media_index: MediaIndex,
    permutation: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    One parameter row of a collection, reordered into canonical media order.

    A permutation already computed with canonical_permutation for the same
    collection and index can be passed in to skip recomputing it.
    """
    if permutation is None:
        permutation = canonical_permutation(collection, media_index)

    row = collection.matrix[row_index]
    return row[permutation]
