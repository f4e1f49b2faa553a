"""FastAPI web server for steamlookup."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Query
from pydantic import BaseModel

from steamlookup import ProfileLookup, AppConfig, __version__
from steamlookup.core.exporter import to_dict


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str


class IdsResponse(BaseModel):
    """Remembered identifiers, in insertion order."""

    total: int
    ids: list[str]


# Global lookup instance
_lookup: Optional[ProfileLookup] = None


def _get_lookup() -> ProfileLookup:
    if _lookup is None:
        raise RuntimeError("Lookup not initialized; app lifespan has not started")
    return _lookup


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage lookup lifecycle."""
    global _lookup
    _lookup = ProfileLookup(AppConfig())
    await _lookup.__aenter__()
    yield
    await _lookup.__aexit__(None, None, None)
    _lookup = None


app = FastAPI(
    title="steamlookup API",
    description="Steam Community profile lookup API",
    version=__version__,
    lifespan=lifespan,
)


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health status."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now().isoformat(),
    )


@app.get("/api/profiles/{identifier}", tags=["Profiles"])
async def get_profile(
    identifier: str,
    remember: bool = Query(False, description="Remember the identifier if it is new"),
):
    """
    Look up a single profile.

    The response is the snapshot with its `variant` tag. A failed fetch is
    returned as the `fetch_failed` variant, not as an HTTP error.
    """
    outcome = await _get_lookup().lookup(identifier, confirm=lambda _: remember)
    return {"remembered": outcome.remembered, "snapshot": to_dict(outcome.snapshot)}


@app.get("/api/ids", response_model=IdsResponse, tags=["Identifiers"])
async def list_ids(
    prefix: str = Query("", description="Autocomplete prefix"),
    limit: Optional[int] = Query(None, ge=1, le=1000),
):
    """List remembered identifiers matching a prefix."""
    ids = _get_lookup().suggest(prefix, limit)
    return IdsResponse(total=len(ids), ids=ids)


@app.delete("/api/ids", response_model=IdsResponse, tags=["Identifiers"])
async def clear_ids():
    """Forget every remembered identifier."""
    lookup = _get_lookup()
    await lookup.forget_all()
    return IdsResponse(total=0, ids=[])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
