import httpx
import pytest

from zeeschedule.core.backends import BackendError, FetchFailed, HttpBackend, RequestSpec


def test_fetch_returns_body_and_status(mock_backend) -> None:
    backend = mock_backend(body="<html>ok</html>")

    with backend:
        result = backend.fetch(RequestSpec(url="http://example.test/schedule/?sdate=2011-04-25"))

    assert result.ok
    assert result.status_code == 200
    assert result.html == "<html>ok</html>"
    assert result.final_url == "http://example.test/schedule/?sdate=2011-04-25"
    assert result.content_length == len("<html>ok</html>")
    assert len(backend.requests) == 1
    assert backend.requests[0].method == "GET"


def test_fetch_sends_browser_headers(mock_backend) -> None:
    backend = mock_backend()
    backend.fetch(RequestSpec(url="http://example.test/"))

    headers = backend.requests[0].headers
    assert headers["User-Agent"] == backend.user_agent
    assert "text/html" in headers["Accept"]


def test_custom_user_agent_is_used() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["User-Agent"]
        return httpx.Response(200, text="")

    backend = HttpBackend(user_agent="zeeschedule-tests", transport=httpx.MockTransport(handler))
    backend.fetch(RequestSpec(url="http://example.test/"))

    assert seen["ua"] == "zeeschedule-tests"


@pytest.mark.parametrize("status_code", [401, 404, 500, 503])
def test_non_success_status_raises_fetch_failed(mock_backend, status_code) -> None:
    backend = mock_backend(status_code=status_code, body="error")
    url = "http://example.test/schedule/?sdate=2011-04-25"

    with pytest.raises(FetchFailed) as exc_info:
        backend.fetch(RequestSpec(url=url))

    assert exc_info.value.url == url
    assert exc_info.value.status_code == status_code
    assert url in str(exc_info.value)
    # No retries
    assert len(backend.requests) == 1


def test_transport_error_raises_fetch_failed() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    backend = HttpBackend(transport=httpx.MockTransport(handler))
    url = "http://example.test/schedule/"

    with pytest.raises(FetchFailed) as exc_info:
        backend.fetch(RequestSpec(url=url))

    error = exc_info.value
    assert isinstance(error, BackendError)
    assert error.url == url
    assert error.status_code is None
    assert isinstance(error.cause, httpx.ConnectError)


def test_close_is_idempotent(mock_backend) -> None:
    backend = mock_backend()
    backend.fetch(RequestSpec(url="http://example.test/"))

    backend.close()
    backend.close()

    # A closed backend opens a fresh client on the next fetch
    assert backend.fetch(RequestSpec(url="http://example.test/")).ok
