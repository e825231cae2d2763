from bs4 import BeautifulSoup
from typing import Optional, Tuple
from ssqr.core.config import settings
from ssqr.fetch.base import FetchError, FetchResult, MalformedResponseError

def first_line(body: str) -> str:
    """
    Return the first line of ``body``.
    Examples: 'foo\\nbar' -> 'foo', 'foo\\r\\nbar' -> 'foo'
    """
    line = body.split("\n")[0]
    if line.endswith("\r"):
        line = line[:-1]

    if not line.strip():
        raise MalformedResponseError("Fetched resource has no first line to display")
    return line

def extract_snippet(body: str, element_id: Optional[str] = None) -> str:
    """
    Pull the snippet out of the fetched body.

    The published page wraps the snippet in an element (a textarea by default);
    when that element is present its text is the snippet, otherwise the whole
    body is treated as plain text.
    """
    element_id = element_id or settings.SNIPPET_ELEMENT_ID
    if "<" not in body:
        return body

    soup = BeautifulSoup(body, "html.parser")
    element = soup.find(id=element_id)
    if element is None:
        return body

    text = element.get_text()
    # Browsers drop the newline that directly follows <textarea> and <pre>
    if element.name in ("textarea", "pre"):
        if text.startswith("\r\n"):
            text = text[2:]
        elif text.startswith("\n"):
            text = text[1:]
    return text

def extract_display_text(result: FetchResult) -> Tuple[str, bool]:
    """
    Choose the DisplayText for one page load.

    Returns ``(text, used_fallback)``. Failed fetches and bodies without a usable
    first line both degrade to the fallback literal.
    """
    try:
        body = result.unwrap()
        return first_line(extract_snippet(body)), False
    except FetchError as e:
        print(f"USING FALLBACK: {e}")
    except MalformedResponseError as e:
        print(f"USING FALLBACK: {e}")

    return settings.FALLBACK_TEXT, True
