"""Vercel Serverless Function relaying GET requests to the Sleeper API."""

import json
import sys
from http.server import BaseHTTPRequestHandler
from pathlib import Path
from urllib.parse import parse_qs, urlparse

sys.path.insert(0, str(Path(__file__).parent.parent))

from sleeperdash.relay import relay_request  # noqa: E402


class handler(BaseHTTPRequestHandler):  # noqa: N801
    def do_OPTIONS(self):
        """Handle CORS preflight."""
        self.send_response(200)
        self.send_header('Access-Control-Allow-Origin', '*')
        self.send_header('Access-Control-Allow-Methods', 'GET, OPTIONS')
        self.send_header('Access-Control-Allow-Headers', 'Content-Type')
        self.send_header('Access-Control-Max-Age', '86400')
        self.send_header('Content-Length', '0')
        self.end_headers()

    def do_GET(self):
        """Forward ?endpoint=<path> to https://api.sleeper.app/v1/<path>."""
        query = parse_qs(urlparse(self.path).query)
        status, body = relay_request(query)
        return self._send_json(status, body)

    def _send_json(self, status_code: int, data):
        """Send JSON response with CORS headers."""
        payload = json.dumps(data).encode()
        self.send_response(status_code)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(payload)))
        self.send_header('Access-Control-Allow-Origin', '*')
        self.send_header('Access-Control-Allow-Methods', 'GET, OPTIONS')
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        """Suppress default logging."""
        pass
