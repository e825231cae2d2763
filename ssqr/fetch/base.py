from dataclasses import dataclass
from typing import Optional

class FetchError(Exception):
    """Non-200 status or transport failure while fetching the snippet."""

class MalformedResponseError(Exception):
    """Fetched body has no usable first line."""

@dataclass
class FetchResult:
    path: str
    ok: bool
    status_code: Optional[int] = None
    body: Optional[str] = None
    error: Optional[str] = None

    def unwrap(self) -> str:
        if not self.ok or self.body is None:
            raise FetchError(self.error or f"Fetching {self.path} failed")
        return self.body
