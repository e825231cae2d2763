import requests
from ssqr.core.config import settings
from ssqr.fetch.base import FetchResult

class RequestsFetcher:
    """Blocking fetcher used to copy the remote snippet into the local cache."""

    def fetch(self, url: str, timeout_sec: int = None) -> FetchResult:
        headers = {"User-Agent": settings.USER_AGENT, "Accept": "text/html,text/plain;q=0.9,*/*;q=0.8"}
        try:
            resp = requests.get(url, headers=headers, timeout=timeout_sec or settings.REQUEST_TIMEOUT)
        except requests.RequestException as e:
            return FetchResult(path=url, ok=False, error=f"Failed to fetch {url}: {str(e)}")

        status = int(resp.status_code)
        if not resp.ok:
            return FetchResult(path=url, ok=False, status_code=status, error=f"HTTP error {status} for {url}")

        # The remote page does not always declare its charset
        if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
            resp.encoding = "utf-8"

        return FetchResult(path=url, ok=True, status_code=status, body=resp.text)
