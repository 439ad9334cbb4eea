"""Mini README: FastAPI-powered inventory and wallet service for Coffer.

Structure:
    * MoneyPayload / ItemPayload - request bodies validated by Pydantic.
    * create_application - application factory wiring routes, templates and
      the request interceptor under the configured context path.

Inventory routes return JSON or render the inventory view. The currency
routes read the wallet, and modify it only through a capability obtained
by presenting the ``key`` header.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Body, FastAPI, Header, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from ..configuration import CofferSettings, get_settings
from ..currency import Money, Wallet
from ..exceptions import InsufficientFunds, Unauthorized, UnsupportedOperation
from ..inventory import InventoryItem, InventoryStore
from ..logging_utils import configure_root_logger, get_logger, level_for_environment
from .interceptors import build_inventory_interceptor

LOGGER = get_logger(__name__)

TEMPLATE_DIRECTORY = Path(__file__).parent / "templates"


class MoneyPayload(BaseModel):
    """Gold, silver and copper amounts submitted to the wallet."""

    gold: int = Field(0, ge=0)
    silver: int = Field(0, ge=0, lt=100)
    copper: int = Field(0, ge=0, lt=100)

    def to_money(self) -> Money:
        return Money(gold=self.gold, silver=self.silver, copper=self.copper)


class ItemPayload(BaseModel):
    """Inventory item submitted for storage."""

    name: str = Field(..., min_length=1)
    rarity: str = Field("common")
    value: int = Field(0, ge=0)

    def to_item(self) -> InventoryItem:
        return InventoryItem(name=self.name, rarity=self.rarity, value=self.value)


def create_application(
    settings: Optional[CofferSettings] = None,
    *,
    inventory: Optional[InventoryStore] = None,
    wallet: Optional[Wallet] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    settings = settings or get_settings()
    configure_root_logger(level_for_environment(settings.environment))

    app = FastAPI(title="Coffer", version="0.1.0")
    templates = Jinja2Templates(directory=str(TEMPLATE_DIRECTORY))

    inventory = inventory if inventory is not None else InventoryStore()
    if wallet is None:
        wallet = Wallet(
            Money(settings.starting_gold, settings.starting_silver, settings.starting_copper),
            secret=settings.wallet_secret,
        )

    app.middleware("http")(build_inventory_interceptor(inventory))
    router = APIRouter()

    def render_view(request: Request, message: str = "", **context: object) -> HTMLResponse:
        return templates.TemplateResponse(
            request,
            "inventory_view.html",
            {
                "message": message,
                "number_of_total_items": inventory.count(),
                **context,
            },
        )

    @router.get("/inventory", response_class=HTMLResponse)
    async def inventory_view(request: Request) -> HTMLResponse:
        """Render the inventory listing."""

        return render_view(request, items=inventory.list_items())

    @router.get("/inventory/items")
    async def list_items() -> JSONResponse:
        """Return every item in insertion order."""

        items = inventory.list_items()
        LOGGER.info("Returning %s inventory items", len(items))
        return JSONResponse([item.as_dict() for item in items])

    @router.post("/inventory/items", response_class=HTMLResponse)
    async def add_item(request: Request, payload: ItemPayload) -> HTMLResponse:
        """Store an item and render a confirmation."""

        try:
            item = inventory.add_item(payload.to_item())
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        return render_view(request, message=f"Added: {item}")

    @router.get("/inventory/items/{index}")
    async def get_item(index: int) -> JSONResponse:
        """Return the item stored at ``index``."""

        try:
            item = inventory.get_item(index)
        except IndexError as error:
            raise HTTPException(status_code=404, detail=str(error)) from error
        return JSONResponse(item.as_dict())

    @router.get("/currency")
    async def total_currency() -> JSONResponse:
        """Report the wallet balance."""

        balance = wallet.get()
        LOGGER.info("Reporting wallet balance %s", balance)
        return JSONResponse(
            {
                "wallet": balance.as_dict(),
                "message": f"Total amount of currency: {balance}",
            }
        )

    @router.post("/currency")
    async def change_currency(
        payload: MoneyPayload = Body(...),
        action: str = Query("add"),
        key: Optional[str] = Header(None),
    ) -> JSONResponse:
        """Add to or subtract from the wallet."""

        try:
            capability = wallet.unlock(key)
        except Unauthorized as error:
            raise HTTPException(status_code=403, detail=str(error)) from error

        try:
            balance = capability.apply(action, payload.to_money())
        except UnsupportedOperation as error:
            raise HTTPException(status_code=400, detail=str(error)) from error
        except InsufficientFunds as error:
            raise HTTPException(status_code=409, detail=str(error)) from error
        return JSONResponse(
            {
                "wallet": balance.as_dict(),
                "message": f"Amount of currency: {balance}",
            }
        )

    app.include_router(router, prefix=settings.context_path)
    LOGGER.debug("Routes mounted under context path '%s'", settings.context_path or "/")
    return app
