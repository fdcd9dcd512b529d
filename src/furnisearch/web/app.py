"""FastAPI application exposing catalog search."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, List, Union

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from furnisearch.catalog import CatalogError, load_catalog
from furnisearch.config import AppConfig
from furnisearch.index.search import MAX_RESULTS, search
from furnisearch.index.suggest import suggest
from furnisearch.models import CatalogItem, ScoredResult

LOGGER = logging.getLogger(__name__)

app = FastAPI(title="furnisearch", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.config = AppConfig()


class SearchPayload(BaseModel):
    query: str = ""
    limit: int = MAX_RESULTS


class ProductOut(BaseModel):
    id: Union[int, str]
    name: str
    category: str
    subcategory: str
    description: str = ""
    image: str | None = None
    is_new: bool = False
    score: float | None = None
    matched_terms: float | None = None


def configure(config: AppConfig) -> None:
    """Replace the configuration used by request handlers."""
    app.state.config = config


def _config() -> AppConfig:
    return app.state.config


async def _load_items(config: AppConfig) -> List[CatalogItem]:
    path = config.resolve_catalog_path(Path.cwd())
    try:
        return await asyncio.to_thread(load_catalog, path)
    except CatalogError as exc:
        LOGGER.error("Unable to load catalog: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def _product(item: CatalogItem) -> ProductOut:
    return ProductOut(
        id=item.id,
        name=item.name,
        category=item.category,
        subcategory=item.subcategory,
        description=item.description,
        image=item.image,
        is_new=item.is_new,
    )


def _serialize(result: ScoredResult, *, debug: bool) -> dict[str, Any]:
    product = _product(result.item)
    if debug:
        product.score = result.score
        product.matched_terms = result.matched_terms
    return product.model_dump(exclude_none=True)


async def _run_search(query: str, limit: int) -> dict[str, Any]:
    config = _config()
    if not query.strip():
        return {"query": query, "count": 0, "results": []}

    limit = max(1, min(limit, config.max_results, MAX_RESULTS))
    items = await _load_items(config)
    results = await asyncio.to_thread(search, query, items, limit=limit)
    return {
        "query": query,
        "count": len(results),
        "results": [_serialize(result, debug=config.debug) for result in results],
    }


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.get("/search")
async def search_get(
    q: str = Query("", description="Query text"), limit: int = MAX_RESULTS
) -> dict[str, Any]:
    return await _run_search(q, limit)


@app.post("/search")
async def search_post(payload: SearchPayload) -> dict[str, Any]:
    return await _run_search(payload.query, payload.limit)


@app.get("/suggest")
async def suggest_terms(q: str = Query("", description="Partial query")) -> dict[str, List[str]]:
    config = _config()
    if len(q) < 2:
        return {"suggestions": []}
    items = await _load_items(config)
    suggestions = await asyncio.to_thread(suggest, q, items, limit=config.max_suggestions)
    return {"suggestions": suggestions}


@app.get("/catalog")
async def list_catalog() -> dict[str, Any]:
    """List the flattened catalog snapshot."""
    items = await _load_items(_config())
    return {
        "count": len(items),
        "products": [_product(item).model_dump(exclude_none=True) for item in items],
    }
