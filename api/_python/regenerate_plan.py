#!/usr/bin/env python3
"""
Regenerate a sleep plan from a JSON request file.

Usage: python3 regenerate_plan.py <request_file.json>

The request file holds {"tool_name": ..., "arguments": {...}}, the same
body the /api/plan/generate endpoint accepts. A bare arguments object is
treated as a shift plan request if it has shift times and no wake time.

Output is the plan result as JSON on stdout; logs go to stderr.
"""

import json
import logging
import sys

# Import plan modules (assumes api/_python is in path or script is run from there)
from plan_tools import configure_logging, invoke_tool
from sleepplan import SleepPlanError

logger = logging.getLogger("regenerate_plan")


def tool_call_from_request(data: dict) -> tuple[str, dict]:
    """Split a request into (tool_name, arguments)."""
    if "tool_name" in data:
        return data["tool_name"], data.get("arguments", {})
    if "wake_time" in data:
        return "get_wake_plan", data
    return "get_shift_plan", data


def main() -> None:
    configure_logging()

    if len(sys.argv) != 2:
        print(json.dumps({"error": "Usage: regenerate_plan.py <request_file.json>"}))
        sys.exit(1)

    request_file = sys.argv[1]

    try:
        with open(request_file) as f:
            data = json.load(f)

        tool_name, arguments = tool_call_from_request(data)
        result = invoke_tool(tool_name, arguments)

        print(json.dumps(result))

    except FileNotFoundError:
        print(json.dumps({"error": f"Request file not found: {request_file}"}))
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(json.dumps({"error": f"Invalid JSON in request file: {e}"}))
        sys.exit(1)
    except SleepPlanError as e:
        print(json.dumps({"error": str(e)}))
        sys.exit(1)
    except Exception as e:
        logger.exception("Plan generation failed for %s", request_file)
        print(json.dumps({"error": f"Plan generation failed: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    main()
