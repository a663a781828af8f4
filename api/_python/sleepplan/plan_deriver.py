"""
Plan derivation.

Applies the shared offset rules to an anchor strategy's RawWindowSet and
packages the result as an immutable Plan. Pure: the same anchor and
protocol always give an identical Plan, whatever the wall clock says.
"""

import logging

from .anchors import AnchorStrategy, RawWindowSet, ShiftAnchor, WakeAnchor
from .clock_math import minutes_to_hours
from .protocol import ProtocolConfig, get_protocol
from .types import MetabolicZones, Plan, TimeWindow

logger = logging.getLogger(__name__)


def clamped_window(name: str, start: int, end: int) -> TimeWindow:
    """
    Build a window, collapsing it to zero width if end precedes start.

    Happens when a protocol's buffers don't fit in the time available
    (e.g., a caffeine buffer longer than the wake window).
    """
    if end < start:
        logger.debug("Clamping %s window to zero width (%d > %d)", name, start, end)
        end = start
    return TimeWindow(start, end)


def derive_plan(raw: RawWindowSet) -> Plan:
    """
    Turn raw anchor instants into a Plan.

    Args:
        raw: Output of an anchor strategy's raw_windows()

    Returns:
        Plan with every window satisfying end >= start
    """
    sleep_start = raw.sleep_start
    red_start = sleep_start - raw.fasting_duration

    metabolic = MetabolicZones(
        green=clamped_window("metabolic green", raw.green_start, raw.yellow_start),
        yellow=clamped_window("metabolic yellow", raw.yellow_start, red_start),
        red=clamped_window("metabolic red", red_start, sleep_start),
    )

    extras = {
        name: clamped_window(name, start, end)
        for name, (start, end) in raw.extras.items()
    }

    shift = None
    shift_duration_hours = None
    if raw.shift is not None:
        shift = TimeWindow(*raw.shift)
        shift_duration_hours = minutes_to_hours(shift.duration_minutes)

    return Plan(
        strategy=raw.strategy,
        main_sleep=TimeWindow(sleep_start, sleep_start + raw.sleep_duration),
        caffeine_window=clamped_window(
            "caffeine", raw.caffeine_start, sleep_start - raw.caffeine_buffer
        ),
        vampire_mode=clamped_window("vampire mode", raw.vampire_start, sleep_start),
        metabolic=metabolic,
        shift=shift,
        shift_times=raw.shift_times,
        shift_duration_hours=shift_duration_hours,
        anchor_nap=extras.get("anchor_nap"),
        sunglasses=extras.get("sunglasses"),
        wake_time=raw.wake_time,
        light_anchor=extras.get("light_anchor"),
        nadir_dip=extras.get("nadir_dip"),
    )


def generate_plan(
    anchor: AnchorStrategy, protocol: ProtocolConfig | None = None
) -> Plan:
    """
    Generate a plan from any anchor strategy.

    Args:
        anchor: ShiftAnchor or WakeAnchor
        protocol: Derivation constants (defaults to get_protocol())

    Returns:
        Immutable Plan

    Raises:
        InvalidTimeFormat: If an anchor time is malformed
        InvalidInput: If a shift starts and ends at the same time
    """
    if protocol is None:
        protocol = get_protocol()

    plan = derive_plan(anchor.raw_windows(protocol))
    logger.debug(
        "Derived %s plan (protocol=%s): sleep %s-%s, caffeine cutoff %s",
        anchor.kind,
        protocol.name,
        plan.main_sleep.start_time,
        plan.main_sleep.end_time,
        plan.caffeine_cutoff,
    )
    return plan


def generate_shift_plan(
    shift_start: str, shift_end: str, protocol: ProtocolConfig | None = None
) -> Plan:
    """
    Generate a plan around a work shift.

    Args:
        shift_start: "HH:MM" shift start
        shift_end: "HH:MM" shift end (next day if at or before start)
        protocol: Derivation constants (defaults to get_protocol())

    Returns:
        Plan with anchor nap, caffeine window, vampire mode, metabolic
        zones and main sleep
    """
    return generate_plan(ShiftAnchor(shift_start, shift_end), protocol)


def generate_wake_plan(
    wake_time: str,
    shift_start: str | None = None,
    shift_end: str | None = None,
    protocol: ProtocolConfig | None = None,
) -> Plan:
    """
    Generate a plan around a target wake time.

    Args:
        wake_time: "HH:MM" target wake time
        shift_start: Optional shift start, display overlay only
        shift_end: Optional shift end, display overlay only
        protocol: Derivation constants (defaults to get_protocol())

    Returns:
        Plan with light anchor, caffeine window, nadir dip, vampire mode,
        metabolic zones and main sleep
    """
    return generate_plan(WakeAnchor(wake_time, shift_start, shift_end), protocol)
