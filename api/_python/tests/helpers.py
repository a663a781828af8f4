"""
Shared helpers for sleep plan tests.
"""

from sleepplan.types import Segment, Timeline


def segments_labelled(timeline: Timeline, label: str) -> list[Segment]:
    """All segments carrying a label (a split window has two)."""
    return [s for s in timeline.segments if s.label == label]


def covered_minutes(segments: list[Segment]) -> int:
    """Total minutes covered by a list of segments."""
    return sum(s.end_minutes - s.start_minutes for s in segments)


def assert_within_cycle(timeline: Timeline) -> None:
    """Every segment has positive width and lies inside the display cycle."""
    for segment in timeline.segments:
        assert segment.start_minutes >= 0, segment
        assert segment.start_minutes < segment.end_minutes, segment
        assert segment.start_minutes >= timeline.timeline_start, segment
        assert segment.end_minutes <= timeline.timeline_end, segment
