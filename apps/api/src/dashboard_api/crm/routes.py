"""CRM routes: Vapi webhook intake and the dashboard contact feed."""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from relay_core.schemas import WebhookResponse

from dashboard_api.crm.service import UpstreamError

logger = logging.getLogger("relay-crm-routes")

router = APIRouter(tags=["CRM"])


async def _read_json(request: Request):
    """Decode the request body, treating an empty body as ``{}``.

    Raises:
        ValueError: If the body is present but is not valid JSON.
    """
    body = await request.body()
    if not body:
        return {}
    return json.loads(body, parse_constant=_reject_constant)


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


@router.post("/webhook/vapi-call", response_model=WebhookResponse)
async def vapi_call_webhook(request: Request):
    """Receive a Vapi call event and create a GHL contact from it.

    Returns:
    - 200 ``{status: "ok", contactId}`` once forwarded
    - 200 ``{status: "logged", note}`` when GHL is not configured
    - 400 ``{status: "error", message}`` when the body is not valid JSON
    - 500 ``{status: "error", message}`` on upstream failure
    """
    try:
        payload = await _read_json(request)
    except ValueError as e:
        logger.warning(f"Rejected webhook body, invalid JSON: {e!s}")
        response = WebhookResponse(status="error", message="Invalid JSON body")
        return JSONResponse(
            status_code=400,
            content=response.model_dump(by_alias=True, exclude_none=True),
        )

    result = await request.app.state.contact_service.forward_call_event(payload)

    response = WebhookResponse(
        status=result.status,
        contact_id=result.contact_id,
        message=result.error,
        note=result.note,
    )
    return JSONResponse(
        status_code=200 if result.success else 500,
        content=response.model_dump(by_alias=True, exclude_none=True),
    )


@router.get("/api/ghl/contacts")
async def list_ghl_contacts(request: Request):
    """Contact list for the live dashboard."""
    try:
        return await request.app.state.contact_service.list_contacts()
    except UpstreamError as e:
        return JSONResponse(status_code=502, content={"error": str(e)})
