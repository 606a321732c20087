"""FastAPI server exposing outfit listings and suggestions."""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from logic.validation import MAX_PAGE_SIZE, PageRequest, SuggestionResponse, validation_failure
from wardrobe_app.app import WardrobeApp

app = FastAPI(title="Wardrobe Suggestions", version="0.1.0")


@lru_cache
def get_wardrobe_app() -> WardrobeApp:
    """Build the application lazily so importing the module has no side effects."""

    return WardrobeApp()


def get_user_id(x_user_id: Optional[str] = Header(None)) -> str:
    """Caller identity forwarded by the authenticating proxy."""

    if not x_user_id:
        raise HTTPException(status_code=401, detail="Missing X-User-Id header")
    return x_user_id


def get_page_request(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1, le=MAX_PAGE_SIZE),
    user_id: str = Depends(get_user_id),
    wardrobe: WardrobeApp = Depends(get_wardrobe_app),
) -> PageRequest:
    """Paging inputs with the configured default and upper bound applied."""

    config = wardrobe.config
    if size is None:
        size = config.default_page_size
    if size > config.max_page_size:
        raise HTTPException(status_code=422, detail=f"size must be at most {config.max_page_size}")
    return PageRequest(user_id=user_id, page=page, size=size)


@app.exception_handler(ValidationError)
async def validation_error_handler(_: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=422, content=jsonable_encoder(validation_failure("invalid request", exc)))


@app.get("/healthz")
async def healthcheck(wardrobe: WardrobeApp = Depends(get_wardrobe_app)) -> dict:
    """Lightweight readiness check."""

    return {
        "status": "ok",
        "service": "wardrobe-suggestions",
        "environment": wardrobe.config.environment or "local",
    }


@app.get("/outfits")
def list_outfits(
    paging: PageRequest = Depends(get_page_request),
    wardrobe: WardrobeApp = Depends(get_wardrobe_app),
) -> dict:
    """General listing of worn outfits, newest first."""

    return wardrobe.outfits.list_outfits(paging.user_id, page=paging.page, size=paging.size)


@app.get("/outfits/suggest", response_model=SuggestionResponse, response_model_exclude_unset=True)
def suggest_outfits(
    tag_id: Optional[str] = Query(None, alias="tagId"),
    paging: PageRequest = Depends(get_page_request),
    wardrobe: WardrobeApp = Depends(get_wardrobe_app),
) -> dict:
    """Ranked, de-duplicated outfit suggestions."""

    return wardrobe.suggestions.suggest(
        user_id=paging.user_id, page=paging.page, size=paging.size, tag_id=tag_id
    )


@app.get("/outfits/flattened")
def flattened_outfits(
    user_id: str = Depends(get_user_id),
    wardrobe: WardrobeApp = Depends(get_wardrobe_app),
) -> list:
    return wardrobe.outfits.flattened_outfits(user_id)


@app.get("/outfits/by-tag/{tag_id}")
def outfits_by_tag(
    tag_id: str,
    user_id: str = Depends(get_user_id),
    wardrobe: WardrobeApp = Depends(get_wardrobe_app),
) -> list:
    return wardrobe.outfits.outfits_by_tag(user_id, tag_id)


@app.get("/tags")
def list_tags(
    user_id: str = Depends(get_user_id),
    wardrobe: WardrobeApp = Depends(get_wardrobe_app),
) -> list:
    return wardrobe.outfits.list_tags(user_id)


def get_app() -> FastAPI:
    """Expose the FastAPI instance for ASGI servers."""

    return app


if __name__ == "__main__":
    import uvicorn

    config = get_wardrobe_app().config
    uvicorn.run("server.api:app", host=config.host, port=config.port, reload=False)
