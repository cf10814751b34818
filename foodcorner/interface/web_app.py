"""Mini README: FastAPI-powered screens for the Food Corner ledger.

Structure:
    * create_application - application factory wiring routes and templates.
    * HTML screens - home, utilities summary, income/expense lists, entry
      detail with an editable note, and the add-entry form.
    * JSON API - list, add, detail and annotate entries plus the summary.

Each application instance owns exactly one ``LedgerStore`` which every route
receives through the factory closure. Routes never await between reading and
writing the store, so each add or update completes before the next request
is served. Domain errors are translated into HTTP errors so invalid input is
reported back to the caller instead of being dropped.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable, Dict, Optional

import httpx
from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..configuration import FoodCornerSettings, get_settings
from ..ledger import (
    EntryKind,
    EntryNotFound,
    InvalidAmount,
    LedgerStore,
    format_amount,
    format_entry_line,
    status_line,
)
from ..logging_utils import get_logger
from ..media import ImageLoader

LOGGER = get_logger(__name__)

_KIND_ALIASES = {
    "income": EntryKind.INCOME,
    "incomes": EntryKind.INCOME,
    "expense": EntryKind.EXPENSE,
    "expenses": EntryKind.EXPENSE,
}

# Canonical URL segment and screen title per collection.
_SEGMENTS = {EntryKind.INCOME: "income", EntryKind.EXPENSE: "expenses"}
_TITLES = {EntryKind.INCOME: "Income", EntryKind.EXPENSE: "Expense"}


def _resolve_kind(name: str) -> EntryKind:
    """Map a URL segment onto a collection, 404 for anything else."""

    kind = _KIND_ALIASES.get(name.strip().lower())
    if kind is None:
        raise HTTPException(status_code=404, detail=f"Unknown collection '{name}'")
    return kind


def create_application(
    store: Optional[LedgerStore] = None,
    *,
    settings: Optional[FoodCornerSettings] = None,
    image_client_factory: Optional[Callable[[], httpx.AsyncClient]] = None,
) -> FastAPI:
    """Create the FastAPI application bound to a single ledger store."""

    app = FastAPI(title="Food Corner Ledger", version="0.1.0")
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))
    static_directory = Path(__file__).parent / "static"
    app.mount("/static", StaticFiles(directory=str(static_directory)), name="static")

    ledger = store if store is not None else LedgerStore()
    settings = settings or get_settings()
    make_image_client = image_client_factory or (
        lambda: httpx.AsyncClient(follow_redirects=True)
    )
    app.state.ledger = ledger

    def _collection_payload(kind: EntryKind) -> dict:
        return {
            "kind": kind.value,
            "entries": [entry.as_dict() for entry in ledger.list_entries(kind)],
            "total": f"{ledger.total(kind):.2f}",
        }

    @app.get("/", response_class=HTMLResponse)
    async def home(request: Request) -> HTMLResponse:
        """Render the landing screen with the restaurant name."""

        return templates.TemplateResponse(
            request,
            "home.html",
            {"restaurant_name": settings.restaurant_name},
        )

    @app.get("/utilities", response_class=HTMLResponse)
    async def utilities(request: Request) -> HTMLResponse:
        """Render the summary screen with the coloured profit/loss line."""

        status = status_line(ledger)
        LOGGER.debug("Rendering utilities with status '%s'", status.text)
        return templates.TemplateResponse(
            request,
            "utilities.html",
            {
                "restaurant_name": settings.restaurant_name,
                "status": status,
                "image_urls": settings.image_urls,
            },
        )

    def _render_add_form(
        request: Request,
        kind: EntryKind,
        *,
        values: Optional[Dict[str, str]] = None,
        error: Optional[str] = None,
        status_code: int = 200,
    ) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "add_entry.html",
            {
                "title": _TITLES[kind],
                "collection": _SEGMENTS[kind],
                "values": values or {"name": "", "amount": "", "additional_info": ""},
                "error": error,
            },
            status_code=status_code,
        )

    @app.get("/api/summary")
    async def summary() -> JSONResponse:
        """Return totals, profit/loss figures and the status line."""

        status = status_line(ledger)
        payload = ledger.export_snapshot()["summary"]
        payload.update({"status": status.text, "color": status.color})
        return JSONResponse(payload)

    @app.get("/api/images")
    async def images() -> JSONResponse:
        """Fetch the decorative images concurrently and report each outcome."""

        async with make_image_client() as client:
            loaders = [
                ImageLoader(url, client=client, timeout=settings.image_timeout_seconds)
                for url in settings.image_urls
            ]
            try:
                results = await asyncio.gather(*(loader.wait() for loader in loaders))
            finally:
                for loader in loaders:
                    loader.cancel()
        LOGGER.info("Fetched %s decorative images", len(results))
        return JSONResponse(
            {
                "images": [
                    result.as_dict() if result else {"url": loader.url, "ok": False}
                    for loader, result in zip(loaders, results)
                ]
            }
        )

    @app.get("/api/{collection}")
    async def list_entries(collection: str) -> JSONResponse:
        """Return one collection in insertion order with its total."""

        return JSONResponse(_collection_payload(_resolve_kind(collection)))

    @app.post("/api/{collection}", status_code=201)
    async def add_entry(
        collection: str,
        name: str = Form(""),
        amount: str = Form(""),
        additional_info: str = Form(""),
    ) -> JSONResponse:
        """Append a new entry, surfacing unparseable amounts as 422."""

        kind = _resolve_kind(collection)
        try:
            entry = ledger.add_entry(kind, name, amount, additional_info)
        except InvalidAmount as error:
            raise HTTPException(status_code=422, detail=str(error)) from error
        return JSONResponse(entry.as_dict(), status_code=201)

    @app.get("/api/{collection}/{entry_id}")
    async def entry_detail(collection: str, entry_id: str) -> JSONResponse:
        """Return a single entry for the detail screen."""

        kind = _resolve_kind(collection)
        try:
            entry = ledger.get_entry(kind, entry_id)
        except EntryNotFound as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(entry.as_dict())

    @app.post("/api/{collection}/{entry_id}/info")
    async def update_info(
        collection: str,
        entry_id: str,
        additional_info: str = Form(""),
    ) -> JSONResponse:
        """Save the edited additional info for one entry."""

        kind = _resolve_kind(collection)
        try:
            entry = ledger.update_info(kind, entry_id, additional_info)
        except EntryNotFound as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(entry.as_dict())

    # HTML screens ---------------------------------------------------------
    @app.get("/{collection}", response_class=HTMLResponse)
    async def entry_list(request: Request, collection: str) -> HTMLResponse:
        """Render one collection with its entry lines and total."""

        kind = _resolve_kind(collection)
        entries = ledger.list_entries(kind)
        return templates.TemplateResponse(
            request,
            "entries.html",
            {
                "title": _TITLES[kind],
                "collection": _SEGMENTS[kind],
                "lines": [(entry.entry_id, format_entry_line(entry)) for entry in entries],
                "total": format_amount(ledger.total(kind)),
            },
        )

    @app.get("/{collection}/new", response_class=HTMLResponse)
    async def add_entry_screen(request: Request, collection: str) -> HTMLResponse:
        """Render the empty add-entry form."""

        return _render_add_form(request, _resolve_kind(collection))

    @app.post("/{collection}/new", response_class=HTMLResponse)
    async def submit_entry(
        request: Request,
        collection: str,
        name: str = Form(""),
        amount: str = Form(""),
        additional_info: str = Form(""),
    ) -> Response:
        """Save a new entry, or keep the form open with the error and typed values."""

        kind = _resolve_kind(collection)
        try:
            ledger.add_entry(kind, name, amount, additional_info)
        except InvalidAmount as error:
            return _render_add_form(
                request,
                kind,
                values={"name": name, "amount": amount, "additional_info": additional_info},
                error=str(error),
                status_code=422,
            )
        return RedirectResponse(
            str(request.url_for("entry_list", collection=_SEGMENTS[kind])), status_code=303
        )

    @app.get("/{collection}/{entry_id}", response_class=HTMLResponse)
    async def entry_detail_screen(
        request: Request, collection: str, entry_id: str
    ) -> HTMLResponse:
        """Show name and amount read-only with an editable additional-info field."""

        kind = _resolve_kind(collection)
        try:
            entry = ledger.get_entry(kind, entry_id)
        except EntryNotFound as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return templates.TemplateResponse(
            request,
            "entry_detail.html",
            {
                "title": entry.name,
                "collection": _SEGMENTS[kind],
                "entry": entry,
                "amount": format_amount(entry.amount),
            },
        )

    @app.post("/{collection}/{entry_id}")
    async def save_entry_info(
        request: Request,
        collection: str,
        entry_id: str,
        additional_info: str = Form(""),
    ) -> RedirectResponse:
        """Store the edited info and return to the list screen."""

        kind = _resolve_kind(collection)
        try:
            ledger.update_info(kind, entry_id, additional_info)
        except EntryNotFound as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return RedirectResponse(
            str(request.url_for("entry_list", collection=_SEGMENTS[kind])), status_code=303
        )

    return app
