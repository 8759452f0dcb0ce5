"""Mini README: FastAPI-powered JSON service over the ledger store.

Structure:
    * create_application - application factory wiring routes to a store.
    * TransactionFields - request body shared by create and edit routes.

Routes validate input with ``interface.validation`` before touching the
store, translate "not found" results into 404 responses and report
``InvalidInput`` as 422 with per-field messages. The store is injected or
built once per application and lives on ``app.state.store``.
"""

from __future__ import annotations

from typing import Optional, Union

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..bootstrap import build_store
from ..configuration import LedgerbookSettings, get_settings
from ..errors import InvalidInput
from ..export import export_filename, render_csv
from ..ledger import LedgerStore, Transaction
from ..logging_utils import get_logger
from .validation import parse_draft, parse_patch

LOGGER = get_logger(__name__)


class TransactionFields(BaseModel):
    """Raw transaction fields as submitted by a client."""

    date: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Union[str, float]] = None
    category: Optional[str] = None
    type: Optional[str] = None


def _serialise(transaction: Transaction) -> dict:
    return transaction.as_dict()


def create_application(
    store: Optional[LedgerStore] = None,
    settings: Optional[LedgerbookSettings] = None,
) -> FastAPI:
    """Create the FastAPI application with routes bound to one store."""

    settings = settings or get_settings()
    app = FastAPI(title="Ledgerbook", version="0.1.0")
    app.state.store = store if store is not None else build_store(settings)
    app.state.settings = settings

    def current_store() -> LedgerStore:
        return app.state.store

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, error: InvalidInput) -> JSONResponse:
        LOGGER.info("Rejected input on %s: %s", request.url.path, error)
        return JSONResponse(
            status_code=422,
            content={"detail": "Invalid transaction fields", "errors": error.field_errors},
        )

    @app.get("/transactions")
    async def list_transactions(search: Optional[str] = None) -> JSONResponse:
        """Return transactions newest first, optionally filtered by a search term."""

        ledger = current_store()
        if search is None or not search.strip():
            transactions = ledger.sorted_by_date_descending()
        else:
            matches = {transaction.id for transaction in ledger.filter(search)}
            transactions = [t for t in ledger.sorted_by_date_descending() if t.id in matches]
        LOGGER.debug("Returning %s transactions (search=%r)", len(transactions), search)
        return JSONResponse({"transactions": [_serialise(t) for t in transactions]})

    @app.post("/transactions", status_code=201)
    async def create_transaction(fields: TransactionFields) -> JSONResponse:
        draft = parse_draft(fields.model_dump())
        transaction = current_store().add(draft)
        return JSONResponse(_serialise(transaction), status_code=201)

    @app.get("/transactions/{transaction_id}")
    async def read_transaction(transaction_id: int) -> JSONResponse:
        transaction = current_store().get(transaction_id)
        if transaction is None:
            raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
        return JSONResponse(_serialise(transaction))

    @app.patch("/transactions/{transaction_id}")
    async def edit_transaction(transaction_id: int, fields: TransactionFields) -> JSONResponse:
        """Apply the supplied fields to an existing transaction."""

        patch = parse_patch(fields.model_dump(exclude_unset=True))
        updated = current_store().update(transaction_id, patch)
        if updated is None:
            raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
        return JSONResponse(_serialise(updated))

    @app.delete("/transactions/{transaction_id}", status_code=204)
    async def delete_transaction(transaction_id: int) -> Response:
        if not current_store().delete(transaction_id):
            raise HTTPException(status_code=404, detail=f"Transaction {transaction_id} not found")
        return Response(status_code=204)

    @app.delete("/transactions", status_code=204)
    async def clear_transactions() -> Response:
        current_store().clear_all()
        return Response(status_code=204)

    @app.get("/summary")
    async def summary() -> JSONResponse:
        ledger = current_store()
        payload = ledger.totals().as_dict()
        payload["count"] = len(ledger)
        payload["currency"] = settings.currency
        return JSONResponse(payload)

    @app.get("/export.csv")
    async def export_csv() -> Response:
        """Download the ledger as CSV with a summary block."""

        ledger = current_store()
        if len(ledger) == 0:
            raise HTTPException(status_code=404, detail="There are no transactions to export")
        document = render_csv(ledger.sorted_by_date_descending(), ledger.totals())
        LOGGER.info("Serving CSV export of %s transactions", len(ledger))
        return Response(
            content=document,
            media_type="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
        )

    return app
