import pytest

from dispatch import ScanDispatcher, SweepDispatcher, get_dispatcher


def test_lookup_is_case_insensitive():
    assert isinstance(get_dispatcher("SCAN"), ScanDispatcher)
    assert isinstance(get_dispatcher("sweep"), SweepDispatcher)


def test_unknown_dispatcher_lists_choices():
    with pytest.raises(ValueError, match="scan, sweep"):
        get_dispatcher("nearest")
