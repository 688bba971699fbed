"""Tests for state directory lookups."""

import pytest

from brewcast.config.defaults import STATE_CODES
from brewcast.errors import NotFoundError
from brewcast.ingest.state_codes import (
    resolve_state_code,
    state_entries,
    state_name,
    state_names,
)


class TestResolveStateCode:
    @pytest.mark.parametrize("value", ["VA", "va", " va ", "Va\n"])
    def test_code_any_case(self, value: str):
        assert resolve_state_code(value) == "VA"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Virginia", "VA"),
            ("virginia", "VA"),
            ("  NEW YORK ", "NY"),
            ("district of columbia", "DC"),
        ],
    )
    def test_full_name(self, value: str, expected: str):
        assert resolve_state_code(value) == expected

    def test_every_code_round_trips(self):
        for code, name in STATE_CODES.items():
            assert resolve_state_code(code.lower()) == code
            assert resolve_state_code(name.lower()) == code

    @pytest.mark.parametrize("value", ["", "Atlantis", "V A", "XX"])
    def test_unmatched(self, value: str):
        with pytest.raises(NotFoundError):
            resolve_state_code(value)


class TestStateName:
    def test_known(self):
        assert state_name("va") == "Virginia"

    def test_unknown(self):
        with pytest.raises(NotFoundError, match="ZZ"):
            state_name("ZZ")


class TestStateDirectory:
    def test_sorted_by_name(self):
        names = state_names()
        assert names == sorted(names)
        assert len(names) == len(STATE_CODES)

    def test_entries_carry_codes(self):
        entries = {e.name: e.code for e in state_entries()}
        assert entries["Virginia"] == "VA"
        assert entries["Puerto Rico"] == "PR"
