from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse, PlainTextResponse
from ssqr.cache import store as cache_store
from ssqr.fetch.fetcher import build_page_client
from ssqr.render.page import render_page
from ssqr.render.qr import CodeRegion, CodeRenderer
from ssqr.schemas import CacheStats, DisplayCode
from ssqr.services.page_flow import run_page_flow

router = APIRouter()

async def get_page_client(request: Request):
    """HTTP client for one page flow, served in-process by this app"""
    async with build_page_client(app=request.app, base_url=str(request.base_url)) as client:
        yield client

async def _load_page(client):
    # Refresh the local copy first so ss.html serves what the remote publishes now
    await run_in_threadpool(cache_store.mirror_remote)

    region = CodeRegion()
    renderer = CodeRenderer(region)
    flow = await run_page_flow(client, renderer)
    return flow, region

@router.get("/", response_class=HTMLResponse)
async def page(request: Request, client=Depends(get_page_client)):
    """
    The QR code page.

    Mirrors the remote snippet, fetches it back through ss.html, renders its first
    line and pings res.php. Failures never reach the visitor; they get the fallback code.
    """
    flow, region = await _load_page(client)
    return render_page(request, region)

@router.get("/api/code", response_model=DisplayCode)
async def display_code(client=Depends(get_page_client)):
    """Same flow as the page, returned as JSON"""
    flow, region = await _load_page(client)
    return DisplayCode(
        text=flow.display_text,
        fallback=flow.used_fallback,
        width=region.width,
        height=region.height,
        rotated=region.rotated,
        image=region.data_uri,
        released=flow.released,
        states=flow.states,
    )

@router.get("/ss.html", response_class=PlainTextResponse)
async def cached_snippet():
    """Serve the locally cached copy of the remote snippet"""
    body = cache_store.read_cached()
    if body is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Snippet not cached"
        )
    return PlainTextResponse(body)

@router.get("/res.php")
async def release_resources():
    """Release signal: drop the cached copy. Always succeeds."""
    released = cache_store.release()
    return {"released": released}

@router.get("/cache/stats", response_model=CacheStats)
async def cache_statistics():
    """Get cache statistics for debugging"""
    return CacheStats(**cache_store.get_stats())

@router.post("/cache/refresh")
async def refresh_cache():
    """Mirror the remote snippet without rendering"""
    try:
        mirrored = await run_in_threadpool(cache_store.mirror_remote)
    except OSError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to write cache: {str(e)}"
        )
    if not mirrored:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to mirror remote snippet"
        )
    return {"message": "Cache refreshed successfully"}

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "ss QR code page"}
