import httpx
from dataclasses import dataclass, field
from typing import List
from ssqr.fetch import fetcher
from ssqr.fetch.extract import extract_display_text
from ssqr.render.qr import CodeRenderer

IDLE = "idle"
FETCHING = "fetching"
RENDERING = "rendering"
NOTIFYING = "notifying"
DONE = "done"

@dataclass
class FlowResult:
    display_text: str
    used_fallback: bool
    released: bool = False
    states: List[str] = field(default_factory=lambda: [IDLE])

async def run_page_flow(client: httpx.AsyncClient, renderer: CodeRenderer) -> FlowResult:
    """
    One page load, start to finish.

    1. Fetch the cached snippet (relative path, single request)
    2. Pick the DisplayText: first line of the snippet or the fallback literal
    3. Render it into the renderer's region
    4. Send the release notification, ignoring its outcome

    Every path ends in DONE; nothing here raises for network problems.
    """
    states = [IDLE]

    states.append(FETCHING)
    result = await fetcher.fetch_resource(client)
    display_text, used_fallback = extract_display_text(result)
    print(f"DISPLAY TEXT: {display_text!r} (fallback={used_fallback})")

    states.append(RENDERING)
    renderer.make_code(display_text)

    states.append(NOTIFYING)
    released = await fetcher.notify_release(client)

    states.append(DONE)
    return FlowResult(
        display_text=display_text,
        used_fallback=used_fallback,
        released=released,
        states=states,
    )
