"""
Cyclic timeline segmentation.

Projects a plan's windows onto one 24-hour display cycle. Windows can sit
anywhere on the absolute minute line (before the cycle, after it, or
across its far edge); each is shifted by whole days into the cycle, and a
window that runs past the cycle end is split into a tail piece at the end
and a head piece at the start. Split pieces keep the original label and
type and together cover exactly the original duration.
"""

import logging

from .clock_math import MINUTES_PER_DAY, normalize_minutes, parse_time_to_minutes
from .protocol import ProtocolConfig, get_protocol
from .types import (
    SEGMENT_TRACKS,
    Plan,
    Segment,
    SegmentType,
    Timeline,
    TimeWindow,
    TrackName,
)

logger = logging.getLogger(__name__)

CYCLE_LENGTH = MINUTES_PER_DAY

LabelledWindow = tuple[str, SegmentType, TimeWindow]


def track_for_type(segment_type: SegmentType) -> TrackName:
    """Layout track a segment type is drawn on."""
    return SEGMENT_TRACKS[segment_type]


def labelled_windows(plan: Plan) -> list[LabelledWindow]:
    """
    Windows to draw for a plan, in display order.

    The legacy sunglasses window is never drawn; vampire mode covers it.
    """
    metabolic: list[LabelledWindow] = [
        ("Eat Complex Carbs", "metabolic-green", plan.metabolic.green),
        ("Protein/Fats Only", "metabolic-yellow", plan.metabolic.yellow),
        ("FASTING MODE", "metabolic-red", plan.metabolic.red),
    ]
    vampire: LabelledWindow = ("Vampire Mode (Sunglasses)", "vampire-mode", plan.vampire_mode)
    sleep: LabelledWindow = ("Main Sleep", "sleep", plan.main_sleep)
    caffeine: LabelledWindow = ("Caffeine OK", "caffeine", plan.caffeine_window)

    if plan.strategy == "shift":
        return [
            ("Anchor Nap", "nap", plan.anchor_nap),
            ("Shift", "work", plan.shift),
            caffeine,
            *metabolic,
            vampire,
            sleep,
        ]

    windows: list[LabelledWindow] = [
        ("Light Anchor", "light-control", plan.light_anchor),
        caffeine,
        ("Nadir Dip", "nadir", plan.nadir_dip),
        *metabolic,
        vampire,
        sleep,
    ]
    # Shift is an overlay on wake plans, only when one was given
    if plan.shift is not None:
        windows.insert(0, ("Shift", "work", plan.shift))
    return windows


def default_timeline_start(plan: Plan, protocol: ProtocolConfig | None = None) -> int:
    """
    Conventional cycle start for a plan, on the clock face [0, 1440).

    Shift plans start a fixed lead before shift start, wake plans a fixed
    lead before waking.
    """
    if protocol is None:
        protocol = get_protocol()

    if plan.strategy == "shift":
        start = plan.shift.start_minutes - protocol.shift.timeline_lead
    else:
        start = parse_time_to_minutes(plan.wake_time) - protocol.wake.timeline_lead
    return normalize_minutes(start)


def project_window(
    label: str,
    segment_type: SegmentType,
    window: TimeWindow,
    timeline_start: int,
) -> list[Segment]:
    """
    Project one window onto [timeline_start, timeline_start + 1440].

    Args:
        label: Display label carried by every emitted piece
        segment_type: Segment type carried by every emitted piece
        window: Window in absolute minutes
        timeline_start: Cycle start in absolute minutes

    Returns:
        Zero segments (empty window), one, or two (window crosses the cycle
        end). A window a full cycle or longer is clamped to one segment
        covering the whole cycle.
    """
    duration = window.duration_minutes
    if duration == 0:
        return []

    if duration >= CYCLE_LENGTH:
        logger.warning(
            "%s window spans %d minutes, clamping to one full cycle", label, duration
        )
        return [Segment(label, timeline_start, timeline_start + CYCLE_LENGTH, segment_type)]

    s = window.start_minutes - timeline_start
    # Shift by whole cycles so 0 <= s < cycle; e moves with s
    shift = (s // CYCLE_LENGTH) * CYCLE_LENGTH
    s -= shift
    e = s + duration

    if e <= CYCLE_LENGTH:
        return [Segment(label, timeline_start + s, timeline_start + e, segment_type)]

    return [
        Segment(label, timeline_start + s, timeline_start + CYCLE_LENGTH, segment_type),
        Segment(label, timeline_start, timeline_start + (e - CYCLE_LENGTH), segment_type),
    ]


def generate_timeline_segments(
    plan: Plan,
    timeline_start: int | None = None,
    protocol: ProtocolConfig | None = None,
) -> Timeline:
    """
    Project every window of a plan onto one display cycle.

    Args:
        plan: Plan to draw
        timeline_start: Cycle start in minutes, wrapped onto [0, 1440)
            (defaults to the plan's conventional start, see
            default_timeline_start)
        protocol: Protocol whose timeline leads to use for the default start

    Returns:
        Timeline whose segments all lie within [timeline_start, timeline_end]
    """
    if timeline_start is None:
        timeline_start = default_timeline_start(plan, protocol)
    else:
        timeline_start = normalize_minutes(timeline_start)

    segments: list[Segment] = []
    for label, segment_type, window in labelled_windows(plan):
        segments.extend(project_window(label, segment_type, window, timeline_start))

    return Timeline(
        segments=tuple(segments),
        timeline_start=timeline_start,
        timeline_end=timeline_start + CYCLE_LENGTH,
    )
