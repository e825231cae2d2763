import os

class Settings:
    # Remote snippet mirrored into the local cache on every page load
    SOURCE_URL: str = os.getenv("SOURCE_URL", "https://dream.ren/ss.html")
    CACHE_PATH: str = os.getenv("CACHE_PATH", "data/ss.html")

    # Relative paths requested by the page flow
    RESOURCE_PATH: str = os.getenv("RESOURCE_PATH", "ss.html")
    RELEASE_PATH: str = os.getenv("RELEASE_PATH", "res.php")

    # Snippet extraction
    SNIPPET_ELEMENT_ID: str = os.getenv("SNIPPET_ELEMENT_ID", "sstextarea")
    FALLBACK_TEXT: str = os.getenv("FALLBACK_TEXT", "Hello there!")

    # QR widget size in pixels
    QR_WIDTH: int = int(os.getenv("QR_WIDTH", "300"))
    QR_HEIGHT: int = int(os.getenv("QR_HEIGHT", "300"))

    # Development
    USE_MOCK: bool = os.getenv("USE_MOCK", "0").lower() in ("1", "true", "yes")

    # Networking
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")

settings = Settings()
