# invoices/utils/formatting.py
from datetime import date, datetime
from typing import Optional


def format_currency(amount: float) -> str:
    """
    Format an amount as dollars with two decimals.
    Example: 1234.5 -> "$1,234.50"
    """
    return f"${amount or 0:,.2f}"


def date_part(value: Optional[str]) -> str:
    """
    "2024-03-01T00:00:00.000Z" -> "2024-03-01"
    """
    if not value:
        return ""
    return value.split("T")[0]


def parse_form_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(date_part(value))
    except ValueError:
        return None


def format_form_date(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def format_display_date(value: Optional[str]) -> str:
    if not value:
        return "-"
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return "-"
    return parsed.strftime("%m/%d/%Y")


def short_id(invoice_id: str) -> str:
    return (invoice_id or "")[:6]
