from fastapi import FastAPI
from contextlib import asynccontextmanager
from ssqr.api.routes import router
from ssqr.cache import store as cache_store
from ssqr.core.config import settings

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Report configuration on startup, drop the cached snippet on shutdown.
    """
    # Startup
    print("Starting ss QR code page...")
    print(f"Mirroring {settings.SOURCE_URL} into {cache_store.CACHE_PATH}")

    yield

    # Shutdown
    print("Shutting down ss QR code page...")
    cache_store.release()

app = FastAPI(
    title="ss QR code page",
    description="Renders the first line of a mirrored snippet as a QR code",
    version="1.0.0",
    lifespan=lifespan
)

# Include routes
app.include_router(router)
