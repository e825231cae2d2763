import httpx
from typing import Optional
from ssqr.core.config import settings
from ssqr.fetch.base import FetchResult

def build_page_client(app=None, base_url: str = "http://localhost/", transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """
    Build the HTTP client used by one page flow.

    Relative paths are resolved against ``base_url``. When ``app`` is given the
    requests are served in-process by that ASGI app instead of going over the network.
    """
    if transport is None and app is not None:
        transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)

    return httpx.AsyncClient(
        base_url=base_url,
        transport=transport,
        timeout=settings.REQUEST_TIMEOUT,
        headers={"User-Agent": settings.USER_AGENT},
        follow_redirects=True,
    )

async def fetch_resource(client: httpx.AsyncClient, path: Optional[str] = None) -> FetchResult:
    """Issue a single GET for the snippet. Never raises; failures come back as ``ok=False``."""
    path = path or settings.RESOURCE_PATH
    try:
        response = await client.get(path)
    except httpx.TimeoutException:
        print(f"FETCH FAILED {path}: timeout")
        return FetchResult(path=path, ok=False, error=f"Timeout while fetching {path}")
    except httpx.HTTPError as e:
        print(f"FETCH FAILED {path}: {e}")
        return FetchResult(path=path, ok=False, error=f"Failed to fetch {path}: {str(e)}")

    if response.status_code != 200:
        print(f"FETCH FAILED {path}: HTTP {response.status_code}")
        return FetchResult(
            path=path,
            ok=False,
            status_code=response.status_code,
            error=f"HTTP error {response.status_code} for {path}",
        )

    return FetchResult(path=path, ok=True, status_code=200, body=response.text)

async def notify_release(client: httpx.AsyncClient, path: Optional[str] = None) -> bool:
    """
    Tell the server the cached snippet may be cleaned up.

    The response body is never read and failures are only logged. The return value
    says whether the server acknowledged the release.
    """
    path = path or settings.RELEASE_PATH
    try:
        response = await client.get(path)
    except httpx.HTTPError as e:
        print(f"RELEASE IGNORED: request to {path} failed: {str(e)}")
        return False

    if response.is_error:
        print(f"RELEASE IGNORED: HTTP {response.status_code} from {path}")
        return False

    print(f"RELEASE SENT to {path}")
    return True
