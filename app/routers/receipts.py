"""
Receipt points API endpoints.

POST /receipts/process        score a receipt, return its id
GET  /receipts/{id}/points    points previously awarded to a receipt
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from app.rules import calculate_points
from app.schemas import PointsResponse, ProcessResponse, Receipt
from app.store import ReceiptStore, get_store, new_receipt_id

logger = logging.getLogger(__name__)
router = APIRouter()

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def method_not_allowed(allow: str) -> HTTPException:
    return HTTPException(
        status_code=405, detail="Invalid method", headers={"Allow": allow}
    )


def record_receipt(receipt: Receipt, store: ReceiptStore) -> ProcessResponse:
    """Score ``receipt``, store the points under a fresh id and return the id."""
    receipt_id = new_receipt_id()
    points = calculate_points(receipt)
    store.put(receipt_id, points)
    logger.info(
        "Processed receipt %s: retailer=%r items=%d points=%d",
        receipt_id, receipt.retailer, len(receipt.items), points,
    )
    return ProcessResponse(id=receipt_id)


# ── POST /receipts/process ───────────────────────────────────────────────
# The body is decoded as JSON whatever Content-Type the client sent.
@router.post("/receipts/process", response_model=ProcessResponse)
async def process_receipt(request: Request, store: ReceiptStore = Depends(get_store)):
    body = await request.body()
    try:
        receipt = Receipt.model_validate_json(body)
    except ValidationError as exc:
        logger.warning(
            "Invalid input on %s: %d error(s), first=%s",
            request.url.path, exc.error_count(), exc.errors()[0],
        )
        raise HTTPException(status_code=400, detail="Invalid input")
    return record_receipt(receipt, store)


# ── GET /receipts/{receipt_id}/points ────────────────────────────────────
@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ReceiptStore = Depends(get_store)):
    logger.info("Fetching points: %s", receipt_id)
    points, found = store.get(receipt_id)
    if not found:
        logger.warning("Receipt not found: %s", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt not found")
    return PointsResponse(points=points)


# ── everything else under /receipts/ ─────────────────────────────────────
@router.api_route(
    "/receipts/{rest:path}", methods=ALL_METHODS, include_in_schema=False
)
def unmatched_receipts_path(rest: str, request: Request):
    if rest == "process":
        raise method_not_allowed("POST")
    if request.method != "GET":
        raise method_not_allowed("GET")
    logger.warning("Invalid endpoint: %s", request.url.path)
    raise HTTPException(status_code=404, detail="Invalid endpoint")
