import keyword
import re
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple, Union

MAX_NAME_LENGTH = 63

MEDIA_NAME_COLUMN = "MediaName"
MEDIA_FILE_COLUMN = "MediaFile"
MOS_COLUMN = "mos"
LEADING_COLUMNS = (MEDIA_NAME_COLUMN, MEDIA_FILE_COLUMN, MOS_COLUMN)

EXCEL_SUFFIXES = (".xlsx", ".xlsm")

_INNER_WHITESPACE = re.compile(r"\s+(\S)")
_INVALID_CHARACTERS = re.compile(r"[^A-Za-z0-9_]")


def make_valid_name(name: str) -> str:
    """
    Turn a parameter name into a valid column identifier.

    Whitespace between words is removed and the following letter upper-cased,
    remaining invalid characters become underscores, and an "x" is prefixed
    when the result does not start with a letter or is a keyword.

    >>> make_valid_name("blur level")
    'blurLevel'
    >>> make_valid_name("2nd-pass")
    'x2nd_pass'
    """
    candidate = _INNER_WHITESPACE.sub(lambda m: m.group(1).upper(), name.strip())
    candidate = _INVALID_CHARACTERS.sub("_", candidate)

    if keyword.iskeyword(candidate):
        candidate = "x" + candidate[0].upper() + candidate[1:]
    elif not candidate or not candidate[0].isalpha():
        candidate = "x" + candidate

    return candidate[:MAX_NAME_LENGTH]


def make_unique_names(names: Sequence[str], reserved: Iterable[str] = ()) -> List[str]:
    """Suffix repeated names with _1, _2, ... so no name repeats or hits a reserved one."""
    taken = set(reserved)
    unique: List[str] = []
    for name in names:
        candidate = name
        counter = 0
        while candidate in taken:
            counter += 1
            suffix = f"_{counter}"
            candidate = name[: MAX_NAME_LENGTH - len(suffix)] + suffix
        taken.add(candidate)
        unique.append(candidate)
    return unique


def table_column_names(parameter_names: Sequence[str]) -> List[str]:
    """Headers of an exported table: media name, media file, mos, then the parameters."""
    sanitised = [make_valid_name(name) for name in parameter_names]
    return list(LEADING_COLUMNS) + make_unique_names(sanitised, reserved=LEADING_COLUMNS)


def csv_output_paths(fname: Union[str, Path]) -> Tuple[Path, Path]:
    """Training and testing CSV paths: train_<name> and test_<name> beside fname."""
    path = Path(fname)
    return path.with_name(f"train_{path.name}"), path.with_name(f"test_{path.name}")


def excel_output_path(fname: Union[str, Path]) -> Path:
    """Workbook path, forced to an extension the openpyxl writer accepts."""
    path = Path(fname)
    if path.suffix.lower() in EXCEL_SUFFIXES:
        return path
    return path.with_suffix(".xlsx")
