"""Tests for protocol lookup."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepplan import InvalidInput, generate_shift_plan
from sleepplan.protocol import (
    PROTOCOLS,
    ProtocolConfig,
    ShiftProtocol,
    get_protocol,
)


class TestGetProtocol:
    """Tests for get_protocol."""

    def test_default_is_standard(self):
        assert get_protocol().name == "standard"

    def test_standard_constants(self, standard_protocol):
        assert standard_protocol.shift.sleep_duration == 420
        assert standard_protocol.shift.caffeine_buffer == 360
        assert standard_protocol.wake.wake_window == 960
        assert standard_protocol.wake.caffeine_buffer == 600

    def test_env_var_selects_protocol(self, monkeypatch):
        custom = ProtocolConfig(name="nurses", shift=ShiftProtocol(nap_duration=30))
        monkeypatch.setitem(PROTOCOLS, "nurses", custom)
        monkeypatch.setenv("SLEEPPLAN_PROTOCOL", "nurses")

        assert get_protocol() is custom
        # Picked up by derivation without being passed explicitly
        assert generate_shift_plan("08:00", "16:00").anchor_nap.duration_minutes == 30

    def test_explicit_name_beats_env_var(self, monkeypatch):
        monkeypatch.setenv("SLEEPPLAN_PROTOCOL", "nope")
        assert get_protocol("standard").name == "standard"

    def test_unknown_protocol_rejected(self):
        with pytest.raises(InvalidInput, match="Unknown protocol"):
            get_protocol("does-not-exist")

    def test_protocols_are_frozen(self, standard_protocol):
        with pytest.raises(AttributeError):
            standard_protocol.shift.sleep_duration = 600
