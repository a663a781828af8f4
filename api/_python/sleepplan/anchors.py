"""
Anchor strategies: where a plan's windows hang from.

A strategy turns its anchor clock time(s) into a RawWindowSet, the handful
of instants the shared derivation rules need (when sleep starts, when
caffeine may start, where the metabolic zones change) plus any windows
only that strategy has. Nothing here clamps or formats; that happens once
in plan_deriver.
"""

from dataclasses import dataclass, field

from .clock_math import MINUTES_PER_DAY, parse_time_to_minutes
from .errors import InvalidInput
from .protocol import ProtocolConfig
from .types import StrategyKind


@dataclass(frozen=True)
class RawWindowSet:
    """
    Unclamped anchor instants, in absolute minutes.

    Shared rules applied by the deriver:
    - main sleep = [sleep_start, sleep_start + sleep_duration]
    - caffeine = [caffeine_start, sleep_start - caffeine_buffer]
    - vampire mode = [vampire_start, sleep_start]
    - metabolic green = [green_start, yellow_start]
    - metabolic yellow = [yellow_start, sleep_start - fasting_duration]
    - metabolic red = [sleep_start - fasting_duration, sleep_start]
    """

    strategy: StrategyKind
    sleep_start: int
    sleep_duration: int
    caffeine_start: int
    caffeine_buffer: int
    vampire_start: int
    green_start: int
    yellow_start: int
    fasting_duration: int

    # Strategy-specific windows as (start, end) pairs, may be unordered
    extras: dict[str, tuple[int, int]] = field(default_factory=dict)

    # Anchor inputs carried through to the plan
    wake_time: str | None = None
    shift: tuple[int, int] | None = None
    shift_times: tuple[str, str] | None = None  # Raw "HH:MM" inputs


def normalize_shift(start_time: str, end_time: str) -> tuple[int, int]:
    """
    Parse a shift's clock times into (start, end) minutes.

    A shift whose end is at or before its start ends the next day.

    Raises:
        InvalidTimeFormat: If either time is malformed
        InvalidInput: If start and end are the same clock time
    """
    start = parse_time_to_minutes(start_time)
    end = parse_time_to_minutes(end_time)

    if start == end:
        raise InvalidInput("Shift start and end times cannot be the same.")

    # Handle shifts crossing midnight
    if end <= start:
        end += MINUTES_PER_DAY

    return start, end


@dataclass(frozen=True)
class ShiftAnchor:
    """Plan around a work shift."""

    start: str  # "HH:MM"
    end: str  # "HH:MM", next day if at or before start

    kind: StrategyKind = field(default="shift", init=False)

    def raw_windows(self, protocol: ProtocolConfig) -> RawWindowSet:
        rules = protocol.shift
        shift_start, shift_end = normalize_shift(self.start, self.end)
        shift_duration = shift_end - shift_start

        nap_end = shift_start - rules.nap_gap_before_shift
        nap_start = nap_end - rules.nap_duration
        sleep_start = shift_end + rules.sleep_delay_after_shift
        midpoint = shift_start + shift_duration // 2

        return RawWindowSet(
            strategy="shift",
            sleep_start=sleep_start,
            sleep_duration=rules.sleep_duration,
            caffeine_start=shift_start,
            caffeine_buffer=rules.caffeine_buffer,
            vampire_start=shift_end - rules.vampire_lead,
            green_start=nap_end,  # "Day" starts when the anchor nap ends
            yellow_start=midpoint,
            fasting_duration=rules.fasting_duration,
            extras={
                "anchor_nap": (nap_start, nap_end),
                "sunglasses": (shift_end, shift_end + rules.sunglasses_duration),
            },
            shift=(shift_start, shift_end),
            shift_times=(self.start, self.end),
        )


@dataclass(frozen=True)
class WakeAnchor:
    """
    Plan around a target wake time.

    shift_start/shift_end are display-only: when both are given the shift
    is overlaid on the timeline, but no window is derived from it.
    """

    wake_time: str  # "HH:MM"
    shift_start: str | None = None
    shift_end: str | None = None

    kind: StrategyKind = field(default="wake", init=False)

    def raw_windows(self, protocol: ProtocolConfig) -> RawWindowSet:
        rules = protocol.wake
        wake = parse_time_to_minutes(self.wake_time)
        sleep_start = wake + rules.wake_window

        shift = None
        shift_times = None
        if self.shift_start and self.shift_end:
            shift = normalize_shift(self.shift_start, self.shift_end)
            shift_times = (self.shift_start, self.shift_end)

        return RawWindowSet(
            strategy="wake",
            sleep_start=sleep_start,
            sleep_duration=rules.sleep_duration,
            caffeine_start=wake + rules.caffeine_delay,
            caffeine_buffer=rules.caffeine_buffer,
            vampire_start=sleep_start - rules.vampire_lead,
            green_start=wake,
            yellow_start=wake + rules.green_duration,
            fasting_duration=rules.fasting_duration,
            extras={
                "light_anchor": (wake, wake + rules.light_anchor_duration),
                "nadir_dip": (
                    wake + rules.nadir_offset,
                    wake + rules.nadir_offset + rules.nadir_duration,
                ),
            },
            wake_time=self.wake_time,
            shift=shift,
            shift_times=shift_times,
        )


AnchorStrategy = ShiftAnchor | WakeAnchor
