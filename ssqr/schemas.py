from pydantic import BaseModel, Field
from typing import List, Optional

class DisplayCode(BaseModel):
    text: str = Field(description="DisplayText encoded in the QR code")
    fallback: bool = Field(description="Whether the fallback literal was used")
    width: int
    height: int
    rotated: bool = Field(description="Rotation toggle state after rendering")
    image: str = Field(description="PNG data URI of the QR code")
    released: bool = Field(default=False, description="Whether the release request went through")
    states: List[str] = Field(default_factory=list)

class CacheStats(BaseModel):
    cached: bool
    cache_path: str
    source_url: str
    size_bytes: int = 0
    modified_at: Optional[str] = None
