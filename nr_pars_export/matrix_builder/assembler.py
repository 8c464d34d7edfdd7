from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import numpy as np
from tqdm import tqdm

from nr_pars_export.exporter import ExportFormat, build_tables, export_tables
from nr_pars_export.lib import (
    AssembledMatrix,
    MediaDataset,
    ParameterCollection,
    SplitMatrices,
    setup_logger,
)

from .aligner import align_row, canonical_permutation
from .media_index import MediaIndex
from .resolver import find_shadowed_parameters, requested_parameters, resolve_parameter

logger = setup_logger(__name__)


class MatrixAssembler:
    """Builds the feature matrix of one dataset from parameter collections."""

    def __init__(self, media_index: MediaIndex, show_progress: bool = False):
        self.media_index = media_index
        self.show_progress = show_progress

    def assemble(
        self,
        collections: Sequence[ParameterCollection],
        parameter_names: Sequence[str],
    ) -> AssembledMatrix:
        """
        Stack the requested parameters as columns, in request order.

        Every collection must reference only media of the index, exactly once.
        Each name is resolved to the first collection providing it and its row
        is reordered into canonical media order. Duplicated names give
        duplicated columns. Any resolution or alignment error aborts the
        whole assembly.
        """
        requested = set(parameter_names)
        for name, owners in find_shadowed_parameters(collections).items():
            if name not in requested:
                continue
            logger.warning(
                f"Parameter '{name}' is defined by {owners}; values are taken from '{owners[0]}'"
            )

        # Every collection is checked against the index, not only the ones
        # that end up supplying a column
        permutations: Dict[int, np.ndarray] = {
            id(collection): canonical_permutation(collection, self.media_index)
            for collection in collections
        }
        columns: List[np.ndarray] = []
        sources: List[str] = []

        for name in tqdm(
            parameter_names,
            desc="Assembling parameters",
            disable=not self.show_progress,
        ):
            collection, row_index = resolve_parameter(name, collections)
            columns.append(
                align_row(
                    collection,
                    row_index,
                    self.media_index,
                    permutation=permutations[id(collection)],
                )
            )
            sources.append(collection.name)

        if columns:
            X = np.column_stack(columns)
        else:
            X = np.empty((len(self.media_index), 0), dtype=float)

        assembled = AssembledMatrix(
            X=X,
            y=self.media_index.labels.copy(),
            parameter_names=list(parameter_names),
            sources=sources,
            media_name=self.media_index.names,
            media_file=self.media_index.files,
        )
        logger.info(
            f"Assembled {assembled.n_parameters} parameters for {assembled.n_media} media"
        )
        return assembled

    def split(self, assembled: AssembledMatrix) -> SplitMatrices:
        """Partition rows into training and verification sets, keeping canonical order."""
        is_training = self.media_index.is_training
        if len(is_training) != assembled.n_media:
            raise ValueError(
                f"Assembled matrix has {assembled.n_media} rows but the media index has {len(is_training)}"
            )

        split = SplitMatrices(
            Xtrain=assembled.X[is_training, :],
            Xverify=assembled.X[~is_training, :],
            ytrain=assembled.y[is_training],
            yverify=assembled.y[~is_training],
        )
        logger.info(
            f"Split into {len(split.ytrain)} training and {len(split.yverify)} verification rows"
        )
        return split


def export_nr_pars(
    datasets: Union[MediaDataset, Sequence[MediaDataset]],
    param_structs: Union[ParameterCollection, Sequence[ParameterCollection]],
    param_list: Optional[Union[str, Sequence[str]]] = None,
    format: Union[ExportFormat, str] = ExportFormat.NONE,
    fname: Optional[Union[str, Path]] = None,
    show_progress: bool = False,
) -> SplitMatrices:
    """
    Export NR parameters and MOS values as training and verification matrices.

    Args:
        datasets: The dataset every parameter collection was computed from.
            Only one dataset is accepted.
        param_structs: One or more parameter collections.
        param_list: Parameter names to export, in column order, or a single
            name. Empty or None exports every parameter of every collection.
        format: "csv", "excel" or "none".
        fname: Output file name. For "csv" the prefixes "train_" and "test_"
            are added to it; ignored for "none".
        show_progress: Show a progress bar while assembling.

    Returns:
        (Xtrain, Xverify, ytrain, yverify), whatever the export format.
    """
    export_format = ExportFormat.parse(format)

    if isinstance(param_structs, ParameterCollection):
        collections: List[ParameterCollection] = [param_structs]
    else:
        collections = list(param_structs)

    media_index = MediaIndex.build(datasets)
    assembler = MatrixAssembler(media_index, show_progress=show_progress)

    parameter_names = requested_parameters(collections, param_list)
    logger.info(
        f"Exporting {len(parameter_names)} parameters from {len(collections)} collections"
    )

    assembled = assembler.assemble(collections, parameter_names)
    split = assembler.split(assembled)

    training_table, testing_table = build_tables(assembled, media_index.is_training)
    export_tables(training_table, testing_table, fname, export_format)

    return split

