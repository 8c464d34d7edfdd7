from typing import Dict, List, Optional, Sequence, Tuple, Union

from nr_pars_export.lib import ParameterCollection, ParameterNotFoundError, setup_logger

logger = setup_logger(__name__)


def resolve_parameter(
    name: str, collections: Sequence[ParameterCollection]
) -> Tuple[ParameterCollection, int]:
    """
    Find the collection and row that supply a parameter.

    Collections are searched in order and the first one whose par_name holds
    the name wins; the first matching row inside it is used. Later
    occurrences are never looked at.
    """
    for collection in collections:
        for row_index, par_name in enumerate(collection.par_name):
            if par_name == name:
                logger.debug(
                    f"Parameter '{name}' resolved to row {row_index} of '{collection.name}'"
                )
                return collection, row_index

    raise ParameterNotFoundError(name, [collection.name for collection in collections])


def requested_parameters(
    collections: Sequence[ParameterCollection],
    param_list: Optional[Union[str, Sequence[str]]] = None,
) -> List[str]:
    """
    The parameter names to export.

    An empty or missing param_list means every parameter of every collection,
    in collection order then row order. Names shared between collections are
    kept, so they produce one column per occurrence. A single string is one
    parameter name.
    """
    if isinstance(param_list, str):
        return [param_list]
    if param_list:
        return list(param_list)

    return [
        par_name for collection in collections for par_name in collection.par_name
    ]


def find_shadowed_parameters(
    collections: Sequence[ParameterCollection],
) -> Dict[str, List[str]]:
    """
    Parameters defined more than once, mapped to every collection defining them.

    The first collection listed is the one resolve_parameter uses.
    """
    providers: Dict[str, List[str]] = {}
    for collection in collections:
        for par_name in collection.par_name:
            providers.setdefault(par_name, []).append(collection.name)

    return {name: owners for name, owners in providers.items() if len(owners) > 1}
