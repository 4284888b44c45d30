from pathlib import Path

import httpx
import pytest

from zeeschedule.core.backends import HttpBackend


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def schedule_html() -> str:
    return (FIXTURES / "zee_schedule.html").read_text(encoding="utf-8")


@pytest.fixture
def mock_backend(schedule_html):
    """Build an HttpBackend whose requests are answered in-process.

    Returns a factory taking an optional status code and body; every
    request seen is recorded on ``backend.requests``.
    """
    def factory(status_code: int = 200, body: str | None = None) -> HttpBackend:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, text=schedule_html if body is None else body)

        backend = HttpBackend(transport=httpx.MockTransport(handler))
        backend.requests = requests
        return backend

    return factory
