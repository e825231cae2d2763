import os
import tempfile
from datetime import datetime, timezone
from typing import Optional
from ssqr.core.config import settings
from ssqr.fetch.requests_fetcher import RequestsFetcher

CACHE_PATH = settings.CACHE_PATH

def mirror_remote(url: Optional[str] = None, fetcher: Optional[RequestsFetcher] = None) -> bool:
    """Copy the remote snippet into the local cache file. Keeps the old copy on failure."""
    url = url or settings.SOURCE_URL

    if settings.USE_MOCK:
        body = _mock_snippet()
    else:
        result = (fetcher or RequestsFetcher()).fetch(url)
        if not result.ok:
            print(f"MIRROR FAILED for {url}: {result.error}")
            return False
        body = result.body

    directory = os.path.dirname(CACHE_PATH) or "."
    os.makedirs(directory, exist_ok=True)

    # Unique temp file per write so overlapping mirrors never share one
    with tempfile.NamedTemporaryFile("w", encoding="utf-8", dir=directory, suffix=".tmp", delete=False) as f:
        f.write(body)
    try:
        os.replace(f.name, CACHE_PATH)
    except OSError:
        os.unlink(f.name)
        raise

    print(f"MIRROR OK {url} -> {CACHE_PATH} ({len(body)} chars)")
    return True

def read_cached() -> Optional[str]:
    """Return the cached snippet, or None when nothing is cached"""
    try:
        with open(CACHE_PATH, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return None

def release() -> bool:
    """Delete the cached copy; False when there was nothing to delete"""
    try:
        os.remove(CACHE_PATH)
    except FileNotFoundError:
        return False
    print(f"RELEASED {CACHE_PATH}")
    return True

def get_stats() -> dict:
    """Get cache statistics for debugging"""
    exists = os.path.exists(CACHE_PATH)
    stats = {
        "cached": exists,
        "cache_path": CACHE_PATH,
        "source_url": settings.SOURCE_URL,
        "size_bytes": 0,
        "modified_at": None,
    }
    if exists:
        st = os.stat(CACHE_PATH)
        stats["size_bytes"] = st.st_size
        stats["modified_at"] = datetime.fromtimestamp(st.st_mtime, tz=timezone.utc).isoformat(timespec="seconds")
    return stats

def _mock_snippet() -> str:
    """Mock remote page for running without network access"""
    return """
    <html>
    <body>
        <h1>ss</h1>
        <textarea id="sstextarea">
ss://bW9jay1jaXBoZXI6bW9jay1wYXNzd29yZA@127.0.0.1:8388#mock
ss://bW9jay1jaXBoZXI6c2Vjb25kLXBhc3N3b3Jk@127.0.0.2:8388#backup
</textarea>
    </body>
    </html>
    """
