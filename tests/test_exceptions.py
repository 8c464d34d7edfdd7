import pytest

from nr_pars_export.lib import (
    DuplicateMediaNameError,
    MediaCoverageError,
    NRParsError,
    ParameterNotFoundError,
    UnknownMediaError,
    UnsupportedExportFormatError,
    UnsupportedInputError,
)


def test_exception_inheritance_validation():
    for error in (
        UnsupportedInputError,
        DuplicateMediaNameError,
        MediaCoverageError,
        UnsupportedExportFormatError,
    ):
        assert issubclass(error, NRParsError)
        assert issubclass(error, ValueError)


def test_exception_inheritance_lookup_keyerror():
    assert issubclass(ParameterNotFoundError, KeyError)
    assert issubclass(ParameterNotFoundError, NRParsError)
    assert issubclass(UnknownMediaError, KeyError)
    assert issubclass(UnknownMediaError, NRParsError)


def test_lookup_errors_can_be_raised_and_caught_as_keyerror():
    with pytest.raises(KeyError):
        raise ParameterNotFoundError("blockiness")

    with pytest.raises(KeyError):
        raise UnknownMediaError("clip_01.avi")


def test_messages_name_the_offender():
    assert "blockiness" in str(ParameterNotFoundError("blockiness", ["NR_pars1"]))
    assert "NR_pars1" in str(ParameterNotFoundError("blockiness", ["NR_pars1"]))
    assert "clip_01.avi" in str(UnknownMediaError("clip_01.avi", "NR_pars1"))
    assert "clip_02.avi" in str(MediaCoverageError("NR_pars1", missing=["clip_02.avi"]))
