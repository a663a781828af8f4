"""
Tests for the /api/plan/generate serverless function.

The handler is driven without a socket: request body in, raw HTTP response
bytes out.
"""

import importlib.util
import json
import sys
from io import BytesIO
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

ENDPOINT_PATH = Path(__file__).parent.parent.parent / "plan" / "generate.py"

_spec = importlib.util.spec_from_file_location("plan_generate_endpoint", ENDPOINT_PATH)
generate = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(generate)


def post(body: bytes, content_length: int | None = None) -> tuple[int, dict]:
    """Run one POST through the handler, return (status, JSON body)."""
    request = generate.handler.__new__(generate.handler)
    request.rfile = BytesIO(body)
    request.wfile = BytesIO()
    request.headers = {
        "Content-Length": str(len(body) if content_length is None else content_length)
    }
    request.client_address = ("127.0.0.1", 0)
    request.request_version = "HTTP/1.1"
    request.requestline = "POST /api/plan/generate HTTP/1.1"
    request.command = "POST"

    request.do_POST()

    head, _, payload = request.wfile.getvalue().partition(b"\r\n\r\n")
    status = int(head.split(b" ")[1])
    return status, json.loads(payload)


def post_json(data) -> tuple[int, dict]:
    return post(json.dumps(data).encode())


class TestGenerateEndpoint:
    """Status mapping for the plan endpoint."""

    def test_valid_shift_request(self):
        status, data = post_json(
            {
                "tool_name": "get_shift_plan",
                "arguments": {"shift_start": "22:00", "shift_end": "06:00"},
            }
        )

        assert status == 200
        assert data["id"]
        assert data["result"]["plan"]["caffeine_cutoff"] == "01:00"

    def test_invalid_input_is_400_with_message(self):
        status, data = post_json(
            {
                "tool_name": "get_shift_plan",
                "arguments": {"shift_start": "09:00", "shift_end": "09:00"},
            }
        )

        assert status == 400
        assert data == {"error": "Shift start and end times cannot be the same."}

    def test_non_string_protocol_is_400(self):
        status, data = post_json(
            {
                "tool_name": "get_wake_plan",
                "arguments": {"wake_time": "07:00", "protocol": ["x"]},
            }
        )

        assert status == 400
        assert data["error"].startswith("Invalid protocol")

    def test_unknown_tool_is_400(self):
        status, data = post_json({"tool_name": "get_nap_plan", "arguments": {}})
        assert status == 400
        assert data == {"error": "Unknown tool: get_nap_plan"}

    def test_invalid_json_is_400(self):
        status, data = post(b"{not json")
        assert status == 400
        assert data == {"error": "Invalid JSON in request body"}

    def test_body_over_limit_is_413(self):
        status, data = post(b"{}", content_length=generate.MAX_BODY_SIZE + 1)
        assert status == 413
        assert data == {"error": "Request body too large"}
