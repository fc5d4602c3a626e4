from unittest.mock import patch

import pytest
import requests
import responses as responses_lib

from catalog.client import FeedClient
from catalog.exceptions import FetchError

FEED_URL = 'https://feeds.example.com/pim/products.json'


class TestFetch:
    @responses_lib.activate
    def test_returns_response_body_bytes(self):
        responses_lib.add(responses_lib.GET, FEED_URL, body=b'\x89PNG-bytes', status=200)
        client = FeedClient()
        assert client.fetch(FEED_URL) == b'\x89PNG-bytes'

    @responses_lib.activate
    def test_sends_configured_user_agent(self):
        responses_lib.add(responses_lib.GET, FEED_URL, body=b'{}', status=200)
        FeedClient().fetch(FEED_URL)
        assert responses_lib.calls[0].request.headers['User-Agent'] == 'catalog-tests'

    @responses_lib.activate
    def test_passes_configured_timeout_to_session(self, settings):
        settings.FEED_REQUEST_TIMEOUT = 2.5
        responses_lib.add(responses_lib.GET, FEED_URL, body=b'{}', status=200)
        session = requests.Session()

        with patch.object(session, 'get', wraps=session.get) as mock_get:
            FeedClient(session=session).fetch(FEED_URL)

        mock_get.assert_called_once_with(FEED_URL, timeout=2.5)

    @responses_lib.activate
    def test_default_timeout_is_left_to_requests(self, settings):
        settings.FEED_REQUEST_TIMEOUT = None
        responses_lib.add(responses_lib.GET, FEED_URL, body=b'{}', status=200)
        session = requests.Session()

        with patch.object(session, 'get', wraps=session.get) as mock_get:
            FeedClient(session=session).fetch(FEED_URL)

        mock_get.assert_called_once_with(FEED_URL, timeout=None)


class TestFetchErrors:
    @pytest.mark.parametrize('status_code', [404, 429, 500])
    @responses_lib.activate
    def test_http_error_raises_fetch_error_without_retry(self, status_code):
        responses_lib.add(responses_lib.GET, FEED_URL, status=status_code)

        with pytest.raises(FetchError, match=FEED_URL):
            FeedClient().fetch(FEED_URL)

        assert len(responses_lib.calls) == 1

    @responses_lib.activate
    def test_connection_error_raises_fetch_error(self):
        responses_lib.add(
            responses_lib.GET, FEED_URL, body=requests.ConnectionError('connection refused')
        )
        with pytest.raises(FetchError, match='connection refused'):
            FeedClient().fetch(FEED_URL)

    @pytest.mark.parametrize('url', ['', 'not-a-url'])
    def test_invalid_url_raises_fetch_error(self, url):
        with pytest.raises(FetchError):
            FeedClient().fetch(url)
