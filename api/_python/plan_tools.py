"""
Tool implementations for sleep plan generation.

Provides two tools:
1. get_shift_plan - Plan anchored on a work shift
2. get_wake_plan - Plan anchored on a target wake time

Both validate their arguments, build the plan and its display timeline,
and return JSON-ready dicts. Used by the serverless endpoint and the
regenerate_plan.py script.
"""

import logging
import os
from typing import Any

from sleepplan import (
    InvalidInput,
    InvalidTimeFormat,
    ProtocolConfig,
    generate_shift_plan,
    generate_timeline_segments,
    generate_wake_plan,
    get_protocol,
)
from sleepplan.clock_math import format_time_12h, parse_time_to_minutes
from sleepplan.types import Plan

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "SLEEPPLAN_LOG_LEVEL"

TOOL_NAMES = ("get_shift_plan", "get_wake_plan")


def configure_logging() -> None:
    """Send logs to stderr at $SLEEPPLAN_LOG_LEVEL (default WARNING)."""
    level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_time(t: Any) -> bool:
    """Validate time format like '07:00' (same rule the planner parses with)."""
    try:
        parse_time_to_minutes(t)
    except InvalidTimeFormat:
        return False
    return True


def validate_protocol(arguments: dict[str, Any]) -> str | None:
    """Protocol names are optional strings; anything else is rejected."""
    protocol = arguments.get("protocol")
    if protocol is None or isinstance(protocol, str):
        return None
    return f"Invalid protocol: {protocol!r}"


def _field(arguments: dict[str, Any], key: str) -> str:
    value = arguments.get(key)
    if value is None:
        return ""
    return value.strip() if isinstance(value, str) else str(value)


def validate_arguments(tool_name: str, arguments: dict[str, Any]) -> str | None:
    """Validate tool arguments, return a user-facing error message or None if valid."""
    if tool_name == "get_shift_plan":
        shift_start = _field(arguments, "shift_start")
        shift_end = _field(arguments, "shift_end")
        if not shift_start or not shift_end:
            return "Please enter both shift start and end times."
        if not validate_time(shift_start):
            return f"Invalid shift start time format: {shift_start}"
        if not validate_time(shift_end):
            return f"Invalid shift end time format: {shift_end}"
        if shift_start == shift_end:
            return "Shift start and end times cannot be the same."
        return validate_protocol(arguments)

    if tool_name == "get_wake_plan":
        wake_time = _field(arguments, "wake_time")
        if not wake_time:
            return "Please enter a wake time."
        if not validate_time(wake_time):
            return f"Invalid wake time format: {wake_time}"
        for field in ("shift_start", "shift_end"):
            value = _field(arguments, field)
            if value and not validate_time(value):
                return f"Invalid {field.replace('_', ' ')} time format: {value}"
        return validate_protocol(arguments)

    return f"Unknown tool: {tool_name}"


def summarize_plan(plan: Plan) -> str:
    """One-line, human-readable summary of the key times."""
    cutoff = format_time_12h(plan.caffeine_window.end_minutes)
    sleep_start = format_time_12h(plan.main_sleep.start_minutes)
    if plan.strategy == "shift":
        sleep_end = format_time_12h(plan.main_sleep.end_minutes)
        return (
            f"{plan.shift_duration_hours} hour shift: last caffeine {cutoff}, "
            f"sleep {sleep_start} to {sleep_end}."
        )
    wake = format_time_12h(plan.light_anchor.start_minutes)
    return f"Wake {wake}: last caffeine {cutoff}, sleep {sleep_start}."


def _result(
    plan: Plan, protocol: ProtocolConfig, context: dict[str, Any]
) -> dict[str, Any]:
    timeline = generate_timeline_segments(plan, protocol=protocol)
    return {
        "plan": plan.to_dict(),
        "timeline": timeline.to_dict(),
        "summary": summarize_plan(plan),
        "context": {"protocol": protocol.name, **context},
    }


def get_shift_plan(arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Build a shift-anchored plan.

    Args:
        arguments: shift_start, shift_end ("HH:MM"); optional shift_date,
            shift_label (echoed back for display) and protocol name

    Returns:
        Dict with plan, timeline, summary and context
    """
    protocol = get_protocol(arguments.get("protocol") or None)
    plan = generate_shift_plan(
        _field(arguments, "shift_start"), _field(arguments, "shift_end"), protocol
    )
    context = {
        "shift_date": arguments.get("shift_date") or None,
        "shift_label": arguments.get("shift_label") or None,
    }
    return _result(plan, protocol, context)


def get_wake_plan(arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Build a wake-anchored plan.

    Args:
        arguments: wake_time ("HH:MM"); optional shift_start/shift_end
            overlay and protocol name

    Returns:
        Dict with plan, timeline, summary and context
    """
    protocol = get_protocol(arguments.get("protocol") or None)
    plan = generate_wake_plan(
        _field(arguments, "wake_time"),
        shift_start=_field(arguments, "shift_start") or None,
        shift_end=_field(arguments, "shift_end") or None,
        protocol=protocol,
    )
    return _result(plan, protocol, {})


def invoke_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """
    Dispatch a tool call.

    Raises:
        ValueError: Unknown tool
        SleepPlanError: Invalid arguments (message is user-facing)
    """
    if tool_name not in TOOL_NAMES:
        raise ValueError(f"Unknown tool: {tool_name}")

    error = validate_arguments(tool_name, arguments)
    if error:
        logger.info("Rejected %s call: %s", tool_name, error)
        raise InvalidInput(error)

    logger.debug("Invoking %s with %s", tool_name, arguments)

    if tool_name == "get_shift_plan":
        return get_shift_plan(arguments)
    return get_wake_plan(arguments)
