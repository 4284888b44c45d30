import logging
from datetime import date

import pytest

from zeeschedule.core.backends import FetchFailed, HttpBackend
from zeeschedule.core.config import DEFAULT_BASE_URL
from zeeschedule.core.extract import ListingRecord
from zeeschedule.core.schedule import InvalidArgument, ScheduleSession, build_query


def test_session_url_for_explicit_date(mock_backend) -> None:
    session = ScheduleSession(2011, 4, 25, backend=mock_backend())

    assert session.url == "http://www.zeetv.com/schedule/?sdate=2011-04-25"
    assert session.base_url == DEFAULT_BASE_URL


def test_session_defaults_to_today(mock_backend) -> None:
    before = date.today()
    session = ScheduleSession(backend=mock_backend())

    assert session.query.as_date() in (before, date.today())


def test_invalid_date_is_rejected_before_any_request(mock_backend) -> None:
    backend = mock_backend()

    with pytest.raises(InvalidArgument):
        ScheduleSession(2011, 13, 1, backend=backend)
    with pytest.raises(InvalidArgument):
        ScheduleSession(year=2011, backend=backend)

    assert backend.requests == []


def test_get_listings_fetches_the_dated_url(mock_backend) -> None:
    backend = mock_backend()
    session = ScheduleSession(2011, 4, 25, base_url="http://example.test/schedule/", backend=backend)

    listings = session.get_listings()

    assert len(listings) == 5
    assert listings[0] == ListingRecord(
        time="06:00 AM",
        title="Jeannie Aur Juju",
        url="http://www.zeetv.com/shows/jeannie/index.html",
    )
    assert str(backend.requests[0].url) == "http://example.test/schedule/?sdate=2011-04-25"


def test_formatters_share_one_fetch(mock_backend) -> None:
    backend = mock_backend()
    session = ScheduleSession(2011, 4, 25, backend=backend)

    xml = session.as_xml()
    text = session.as_text()
    _ = session.listings

    assert len(backend.requests) == 1
    assert xml.count("<programme>") == 5
    assert text.count("-------------------") == 5


def test_get_listings_always_refetches(mock_backend) -> None:
    backend = mock_backend()
    session = ScheduleSession(2011, 4, 25, backend=backend)

    session.get_listings()
    session.get_listings()

    assert len(backend.requests) == 2


def test_empty_page_gives_empty_outputs(mock_backend, caplog) -> None:
    session = ScheduleSession(2011, 4, 25, backend=mock_backend(body="<html></html>"))

    with caplog.at_level(logging.WARNING, logger="zeeschedule"):
        assert session.listings == []

    assert session.as_xml() == '<?xml version="1.0" encoding="UTF-8"?>\n<programmes>\n</programmes>'
    assert session.as_text() == ""
    assert any("No programmes found" in message for message in caplog.messages)


def test_fetch_failure_carries_url(mock_backend) -> None:
    session = ScheduleSession(2011, 4, 25, backend=mock_backend(status_code=500))

    with pytest.raises(FetchFailed) as exc_info:
        session.as_xml()

    assert exc_info.value.url == session.url


def test_from_query(mock_backend) -> None:
    session = ScheduleSession.from_query(build_query(2011, 4, 5), backend=mock_backend())

    assert session.query.sdate == "2011-04-05"


def test_session_closes_only_its_own_backend(mock_backend) -> None:
    backend = mock_backend()
    with ScheduleSession(2011, 4, 25, backend=backend) as session:
        session.get_listings()
    assert backend._client is not None and not backend._client.is_closed

    with ScheduleSession(2011, 4, 25) as owned:
        assert isinstance(owned.backend, HttpBackend)
    assert owned.backend._client is None


def test_str_is_not_the_text_report(mock_backend) -> None:
    backend = mock_backend()
    session = ScheduleSession(2011, 4, 25, backend=backend)

    assert "Time:" not in str(session)
    assert backend.requests == []
