import os
import pytest
from unittest.mock import MagicMock, patch
from ssqr.cache import store as cache_store
from ssqr.core import config
from ssqr.fetch.base import FetchResult

class TestCache:
    """Unit tests for the snippet cache"""

    def setup_method(self):
        """Use the real fetch path, with the fetcher mocked per test"""
        config.settings.USE_MOCK = False

    def _fetcher(self, result):
        fetcher = MagicMock()
        fetcher.fetch.return_value = result
        return fetcher

    def test_mirror_writes_cache(self):
        """Test that a successful fetch is copied into the cache file"""
        body = "ss://example-config\nmore-stuff"
        fetcher = self._fetcher(FetchResult(path="https://remote.test/ss.html", ok=True, status_code=200, body=body))

        assert cache_store.mirror_remote("https://remote.test/ss.html", fetcher=fetcher) is True
        fetcher.fetch.assert_called_once_with("https://remote.test/ss.html")
        assert cache_store.read_cached() == body

    def test_mirror_failure_keeps_previous_copy(self):
        """Test that a failed fetch leaves the old cache untouched"""
        ok = FetchResult(path="u", ok=True, status_code=200, body="old-line")
        cache_store.mirror_remote("u", fetcher=self._fetcher(ok))

        failed = FetchResult(path="u", ok=False, status_code=503, error="HTTP error 503 for u")
        assert cache_store.mirror_remote("u", fetcher=self._fetcher(failed)) is False
        assert cache_store.read_cached() == "old-line"

    def test_mirror_failure_without_previous_copy(self):
        failed = FetchResult(path="u", ok=False, error="Failed to fetch u")
        assert cache_store.mirror_remote("u", fetcher=self._fetcher(failed)) is False
        assert cache_store.read_cached() is None

    def test_mirror_uses_mock_snippet(self):
        """Test mock mode needs no fetcher"""
        config.settings.USE_MOCK = True
        fetcher = self._fetcher(None)

        assert cache_store.mirror_remote(fetcher=fetcher) is True
        fetcher.fetch.assert_not_called()
        assert 'id="sstextarea"' in cache_store.read_cached()

    def test_mirror_creates_directory(self, tmp_path):
        cache_store.CACHE_PATH = str(tmp_path / "nested" / "dir" / "ss.html")
        ok = FetchResult(path="u", ok=True, status_code=200, body="line")

        assert cache_store.mirror_remote("u", fetcher=self._fetcher(ok)) is True
        assert os.path.exists(cache_store.CACHE_PATH)

    def test_mirror_leaves_no_temp_files(self, tmp_path):
        cache_store.CACHE_PATH = str(tmp_path / "ss.html")
        ok = FetchResult(path="u", ok=True, status_code=200, body="line")

        cache_store.mirror_remote("u", fetcher=self._fetcher(ok))
        cache_store.mirror_remote("u", fetcher=self._fetcher(ok))

        assert os.listdir(tmp_path) == ["ss.html"]

    def test_release(self):
        """Test release removes the cached copy exactly once"""
        ok = FetchResult(path="u", ok=True, status_code=200, body="line")
        cache_store.mirror_remote("u", fetcher=self._fetcher(ok))

        assert cache_store.release() is True
        assert cache_store.read_cached() is None
        assert cache_store.release() is False

    def test_stats(self):
        stats = cache_store.get_stats()
        assert stats["cached"] is False
        assert stats["size_bytes"] == 0
        assert stats["modified_at"] is None

        ok = FetchResult(path="u", ok=True, status_code=200, body="12345")
        cache_store.mirror_remote("u", fetcher=self._fetcher(ok))

        stats = cache_store.get_stats()
        assert stats["cached"] is True
        assert stats["size_bytes"] == 5
        assert stats["modified_at"] is not None
        assert stats["cache_path"] == cache_store.CACHE_PATH

class TestRequestsFetcher:
    """Unit tests for the blocking fetcher behind the mirror"""

    @patch("ssqr.fetch.requests_fetcher.requests.get")
    def test_fetch_ok(self, mock_get):
        from ssqr.fetch.requests_fetcher import RequestsFetcher

        mock_get.return_value = MagicMock(ok=True, status_code=200, text="ss://abc\n", encoding="utf-8")
        result = RequestsFetcher().fetch("https://remote.test/ss.html")

        assert result.ok is True
        assert result.body == "ss://abc\n"
        assert result.status_code == 200

    @patch("ssqr.fetch.requests_fetcher.requests.get")
    def test_fetch_http_error(self, mock_get):
        from ssqr.fetch.requests_fetcher import RequestsFetcher

        mock_get.return_value = MagicMock(ok=False, status_code=404, text="nope")
        result = RequestsFetcher().fetch("https://remote.test/ss.html")

        assert result.ok is False
        assert result.status_code == 404
        assert "404" in result.error

    @patch("ssqr.fetch.requests_fetcher.requests.get")
    def test_fetch_connection_error(self, mock_get):
        import requests
        from ssqr.fetch.requests_fetcher import RequestsFetcher

        mock_get.side_effect = requests.ConnectionError("refused")
        result = RequestsFetcher().fetch("https://remote.test/ss.html")

        assert result.ok is False
        assert result.body is None
        assert "refused" in result.error
