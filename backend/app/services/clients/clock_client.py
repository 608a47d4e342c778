# backend/app/services/clients/clock_client.py
import datetime

from backend.app.core.config import Settings
from backend.app.services.clients.http import fetch_text
from backend.app.services.clients.responses import parse_current_date


class ClockClient:
    """
    Asks a time API for today's date. The server's own clock is not
    trusted, so every call goes over the network.
    """

    def __init__(self, settings: Settings):
        self.api_url = settings.clock_api_url
        self.timeout = settings.http_timeout_seconds

    def current_date(self) -> datetime.date:
        return parse_current_date(fetch_text(self.api_url, timeout=self.timeout))
