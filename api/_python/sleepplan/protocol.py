"""
Offset and duration constants for plan derivation.

Every number the anchor strategies use lives here, grouped per strategy.
An alternate protocol is a new ProtocolConfig; the derivation and
segmentation code never hard-codes minutes.

Scientific basis (heuristic, not medical advice):
- Caffeine half-life ~5-6h: stop 6h before post-shift sleep, 10h before
  a regular bedtime
- 90-minute nap = one full sleep cycle, ending 2h before shift to clear
  sleep inertia
- Bright light after a night shift suppresses melatonin: dim it from
  30 min before shift end until sleep ("vampire mode")
- Late eating blunts sleep quality: fast for the 3h before sleep
"""

import os
from dataclasses import dataclass, field

from .errors import InvalidInput

# Environment variable naming the default protocol
PROTOCOL_ENV_VAR = "SLEEPPLAN_PROTOCOL"
DEFAULT_PROTOCOL = "standard"


@dataclass(frozen=True)
class ShiftProtocol:
    """Constants for plans anchored on a work shift (all in minutes)."""

    nap_duration: int = 90  # One full sleep cycle
    nap_gap_before_shift: int = 120  # Nap ends this long before shift start
    sleep_delay_after_shift: int = 60  # Commute/wind-down before main sleep
    sleep_duration: int = 420  # 7 hours
    caffeine_buffer: int = 360  # Caffeine-free minutes before main sleep
    vampire_lead: int = 30  # Light control starts before shift end
    fasting_duration: int = 180  # Red zone before sleep
    sunglasses_duration: int = 60  # Legacy light-control window after shift
    timeline_lead: int = 480  # Display cycle starts this long before shift start


@dataclass(frozen=True)
class WakeProtocol:
    """Constants for plans anchored on a target wake time (all in minutes)."""

    wake_window: int = 960  # 16 hours awake
    sleep_duration: int = 480  # 8 hours
    light_anchor_duration: int = 60  # Bright light right after waking
    caffeine_delay: int = 90  # Let adenosine clear before the first coffee
    caffeine_buffer: int = 600  # Caffeine-free minutes before sleep
    nadir_offset: int = 360  # Afternoon dip, hours after waking
    nadir_duration: int = 20
    vampire_lead: int = 120  # Dim light before sleep
    green_duration: int = 480  # Complex carbs window from waking
    fasting_duration: int = 180
    timeline_lead: int = 120  # Display cycle starts this long before wake


@dataclass(frozen=True)
class ProtocolConfig:
    """A complete, named set of derivation constants."""

    name: str
    shift: ShiftProtocol = field(default_factory=ShiftProtocol)
    wake: WakeProtocol = field(default_factory=WakeProtocol)


PROTOCOLS: dict[str, ProtocolConfig] = {
    "standard": ProtocolConfig(name="standard"),
}


def get_protocol(name: str | None = None) -> ProtocolConfig:
    """
    Look up a protocol by name.

    Args:
        name: Protocol name; falls back to $SLEEPPLAN_PROTOCOL, then "standard"

    Returns:
        The matching ProtocolConfig

    Raises:
        InvalidInput: If no protocol has that name
    """
    if name is None:
        name = os.environ.get(PROTOCOL_ENV_VAR) or DEFAULT_PROTOCOL

    try:
        return PROTOCOLS[name]
    except KeyError:
        known = ", ".join(sorted(PROTOCOLS))
        raise InvalidInput(f"Unknown protocol: {name!r} (known: {known})") from None
