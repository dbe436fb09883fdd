import os
import logging
from typing import Dict, List, Any, Tuple, Optional

import requests
from dotenv import load_dotenv

from domain.models import Invoice

load_dotenv()
base_url: str = os.getenv("API_BASE_URL", "http://localhost:4567").rstrip("/")
timeout_seconds: float = float(os.getenv("REQUEST_TIMEOUT", "10"))

logger = logging.getLogger(__name__)


def _headers(token: Optional[str], with_body: bool = False) -> Dict[str, str]:
    headers = {"Authorization": f"Bearer {token or ''}"}
    if with_body:
        headers["Content-Type"] = "application/json"
    return headers


def _error_message(action: str, resp: requests.Response) -> str:
    detail = resp.text.strip()
    if detail:
        return f"{action} failed ({resp.status_code}): {detail}"
    return f"{action} failed ({resp.status_code})"


def _send(
        method: str,
        path: str,
        token: Optional[str],
        payload: Optional[Dict[str, Any]] = None,
) -> requests.Response:
    return requests.request(
        method,
        f"{base_url}{path}",
        headers=_headers(token, with_body=payload is not None),
        json=payload,
        timeout=timeout_seconds,
    )


def fetch_invoices(token: Optional[str]) -> Tuple[bool, str, List[Invoice]]:
    """
    GET /invoices.
    Returns (ok, message, invoices)
    """
    try:
        resp = _send("GET", "/invoices", token)

        if not resp.ok:
            msg = _error_message("Fetch invoices", resp)
            logger.warning(msg)
            return False, msg, []

        body = resp.json()
        if not isinstance(body, list):
            msg = f"Unexpected response: expected a list of invoices, got {type(body).__name__}"
            logger.error(msg)
            return False, msg, []

        invoices = [Invoice.from_dict(row) for row in body]
        return True, "Fetched", invoices

    except requests.exceptions.RequestException as e:
        logger.error("Error fetching invoices: %s", e)
        return False, f"Connection error: {e}", []
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        logger.error("Error parsing invoices: %s", e)
        return False, f"Unexpected response: {e}", []


def _write(
        action: str,
        method: str,
        path: str,
        token: Optional[str],
        payload: Dict[str, Any],
) -> Tuple[bool, str, Optional[Dict[str, Any]]]:
    try:
        resp = _send(method, path, token, payload)

        if not resp.ok:
            msg = _error_message(action, resp)
            logger.warning(msg)
            return False, msg, None

        body = resp.json() if resp.content else None
        logger.info("%s succeeded (%s %s)", action, method, path)
        return True, f"{action} succeeded", body

    except requests.exceptions.RequestException as e:
        logger.error("%s failed: %s", action, e)
        return False, f"Connection error: {e}", None
    except ValueError as e:
        logger.error("%s returned invalid JSON: %s", action, e)
        return False, f"Unexpected response: {e}", None


def create_invoice(
        token: Optional[str],
        payload: Dict[str, Any],
) -> Tuple[bool, str, Optional[Dict[str, Any]]]:
    """
    POST /invoices/create.
    Returns (ok, message, created_invoice_json)
    """
    return _write("Create invoice", "POST", "/invoices/create", token, payload)


def update_invoice(
        token: Optional[str],
        invoice_id: str,
        payload: Dict[str, Any],
) -> Tuple[bool, str, Optional[Dict[str, Any]]]:
    """
    PATCH /invoices/update/{id}.
    Returns (ok, message, updated_invoice_json)
    """
    return _write("Update invoice", "PATCH", f"/invoices/update/{invoice_id}", token, payload)


def delete_invoice(token: Optional[str], invoice_id: str) -> Tuple[bool, str, None]:
    """
    DELETE /invoices/delete/{id}.
    Returns (ok, message, None)
    """
    try:
        resp = _send("DELETE", f"/invoices/delete/{invoice_id}", token)

        if not resp.ok:
            msg = _error_message("Delete invoice", resp)
            logger.warning(msg)
            return False, msg, None

        logger.info("Deleted invoice %s", invoice_id)
        return True, "Deleted", None

    except requests.exceptions.RequestException as e:
        logger.error("Delete invoice %s failed: %s", invoice_id, e)
        return False, f"Connection error: {e}", None
