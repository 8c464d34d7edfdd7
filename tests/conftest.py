import pytest

from nr_pars_export.lib import MediaDataset, MediaItem, ParameterCollection


def make_dataset(*rows, name: str = "example") -> MediaDataset:
    """rows are (name, mos, category) tuples; the file is derived from the name."""
    return MediaDataset(
        name=name,
        media=[
            MediaItem(name=n, file=f"{n}.avi", mos=mos, category=category)
            for n, mos, category in rows
        ],
    )


def make_collection(name: str, par_name, media_name, data) -> ParameterCollection:
    return ParameterCollection(
        name=name, par_name=list(par_name), media_name=list(media_name), data=data
    )


@pytest.fixture
def example_dataset() -> MediaDataset:
    return make_dataset(
        ("m1", 3.0, "train"),
        ("m2", 4.0, "test"),
        ("m3", 2.5, "train"),
        ("m4", 5.0, "test"),
    )


@pytest.fixture
def example_collection() -> ParameterCollection:
    # values listed in the collection's own media order m3, m1, m4, m2
    return make_collection("pars_a", ["p1"], ["m3", "m1", "m4", "m2"], [[9, 1, 7, 3]])
