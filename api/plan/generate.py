"""
Vercel Python Function for sleep plan generation.

This endpoint handles POST requests to /api/plan/generate and returns a
sleep, caffeine and light plan plus its display timeline for the given
shift or wake time.

Request body: {"tool_name": "get_shift_plan" | "get_wake_plan", "arguments": {...}}

Security:
- Body size limited to 64KB to prevent memory exhaustion
"""

from http.server import BaseHTTPRequestHandler
import json
import logging
import sys
from pathlib import Path
from uuid import uuid4

# Add the _python directory to the Python path for importing sleepplan module
sys.path.insert(0, str(Path(__file__).parent.parent / "_python"))

from plan_tools import TOOL_NAMES, configure_logging, invoke_tool
from sleepplan import SleepPlanError

# Security constants
MAX_BODY_SIZE = 64 * 1024  # 64KB max request body

configure_logging()
logger = logging.getLogger("api.plan.generate")


class handler(BaseHTTPRequestHandler):
    """HTTP handler for Vercel Python Functions."""

    def do_POST(self):
        """Handle POST requests for plan generation."""
        try:
            # Check body size before reading (prevent memory exhaustion)
            content_length = int(self.headers.get("Content-Length", 0))
            if content_length > MAX_BODY_SIZE:
                self._send_json_response(413, {"error": "Request body too large"})
                return

            # Read request body
            body = self.rfile.read(content_length)
            data = json.loads(body)

            # Validate request
            if not isinstance(data, dict):
                self._send_json_response(400, {"error": "Request body must be a JSON object"})
                return

            tool_name = data.get("tool_name")
            arguments = data.get("arguments", {})

            if not tool_name:
                self._send_json_response(400, {"error": "Missing tool_name"})
                return

            if tool_name not in TOOL_NAMES:
                self._send_json_response(400, {"error": f"Unknown tool: {tool_name}"})
                return

            if not isinstance(arguments, dict):
                self._send_json_response(400, {"error": "arguments must be an object"})
                return

            # Generate plan
            result = invoke_tool(tool_name, arguments)

            self._send_json_response(200, {"id": str(uuid4()), "result": result})

        except json.JSONDecodeError:
            self._send_json_response(400, {"error": "Invalid JSON in request body"})
        except SleepPlanError as e:
            self._send_json_response(400, {"error": str(e)})
        except Exception:
            logger.exception("Plan generation failed")
            self._send_json_response(
                500,
                {"error": "Something went wrong. Please check your inputs and try again."},
            )

    def _send_json_response(self, status_code: int, data: dict):
        """Send a JSON response with the given status code."""
        self.send_response(status_code)
        self.send_header("Content-Type", "application/json")
        self.send_header("Access-Control-Allow-Origin", "*")
        self.end_headers()
        self.wfile.write(json.dumps(data).encode())

    def do_OPTIONS(self):
        """Handle CORS preflight requests."""
        self.send_response(200)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()
