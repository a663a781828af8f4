"""
Roster-to-Sleep plan generation.

Turns a work shift or a target wake time into advisory sleep, caffeine,
light and feeding windows, and projects them onto a 24-hour display cycle.

Entry points: generate_shift_plan / generate_wake_plan, then
generate_timeline_segments.
"""

from .anchors import AnchorStrategy, RawWindowSet, ShiftAnchor, WakeAnchor
from .clock_math import minutes_to_time, parse_time_to_minutes
from .errors import InvalidInput, InvalidTimeFormat, SleepPlanError
from .plan_deriver import generate_plan, generate_shift_plan, generate_wake_plan
from .protocol import PROTOCOLS, ProtocolConfig, ShiftProtocol, WakeProtocol, get_protocol
from .segmenter import generate_timeline_segments, project_window
from .types import MetabolicZones, Plan, Segment, Timeline, TimeWindow

__all__ = [
    # Clock arithmetic
    "parse_time_to_minutes",
    "minutes_to_time",
    # Types
    "TimeWindow",
    "MetabolicZones",
    "Plan",
    "Segment",
    "Timeline",
    # Anchors
    "AnchorStrategy",
    "ShiftAnchor",
    "WakeAnchor",
    "RawWindowSet",
    # Derivation
    "generate_plan",
    "generate_shift_plan",
    "generate_wake_plan",
    # Segmentation
    "generate_timeline_segments",
    "project_window",
    # Protocols
    "ProtocolConfig",
    "ShiftProtocol",
    "WakeProtocol",
    "PROTOCOLS",
    "get_protocol",
    # Errors
    "SleepPlanError",
    "InvalidTimeFormat",
    "InvalidInput",
]
