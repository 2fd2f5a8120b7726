"""Vercel Serverless Function serving the weekly dashboard view model."""

import json
import sys
from http.server import BaseHTTPRequestHandler
from pathlib import Path
from urllib.parse import parse_qs, urlparse

sys.path.insert(0, str(Path(__file__).parent.parent))

from sleeperdash.config import get_config  # noqa: E402
from sleeperdash.dashboard import build_dashboard  # noqa: E402
from sleeperdash.loader import DataLoader, LoadError, LoadStatus  # noqa: E402

# Survives between invocations while the function instance stays warm
_loader: DataLoader | None = None


def get_loader() -> DataLoader:
    global _loader
    if _loader is None:
        _loader = DataLoader(get_config())
    return _loader


class handler(BaseHTTPRequestHandler):  # noqa: N801
    def do_GET(self):
        """Return the dashboard; ?refresh=1 reloads league data first."""
        query = parse_qs(urlparse(self.path).query)
        loader = get_loader()

        try:
            if loader.status is LoadStatus.IDLE:
                loader.refresh()
            elif query.get('refresh', ['0'])[0] in ('1', 'true'):
                loader.refresh()
        except LoadError:
            # Reported in the view model as the error banner
            pass

        return self._send_json(200, build_dashboard(loader))

    def _send_json(self, status_code: int, data: dict):
        """Send JSON response with CORS headers."""
        payload = json.dumps(data).encode()
        self.send_response(status_code)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(payload)))
        self.send_header('Access-Control-Allow-Origin', '*')
        self.send_header('Cache-Control', 'no-store')
        self.end_headers()
        self.wfile.write(payload)

    def log_message(self, format, *args):
        """Suppress default logging."""
        pass
