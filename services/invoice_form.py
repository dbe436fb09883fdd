# services/invoice_form.py
from dataclasses import fields, replace
from typing import Any, List

from domain.models import Invoice, InvoiceForm, InvoiceItem
from utils.formatting import date_part

ITEM_FIELDS = {f.name for f in fields(InvoiceItem)}

# form attribute -> payload key, for the inputs the form marks as required
REQUIRED_FIELDS = {
    "client_id": "clientId",
    "issue_date": "issueDate",
    "due_date": "dueDate",
}


def blank_form() -> InvoiceForm:
    return InvoiceForm()


def add_item(form: InvoiceForm) -> InvoiceForm:
    """
    Append a default line item. Returns a new form.
    """
    new_item = InvoiceItem(
        description="",
        quantity=1,
        unit_price=0,
        discount=0,
        is_percentage_discount=True,
    )
    return replace(form, items=[*form.items, new_item])


def update_item(form: InvoiceForm, index: int, key: str, value: Any) -> InvoiceForm:
    """
    Set one field of the item at `index`. Returns a new form; the original
    items are left untouched.

    Raises IndexError for an index outside the item list and KeyError for a
    field InvoiceItem does not have.
    """
    if key not in ITEM_FIELDS:
        raise KeyError(key)
    if not 0 <= index < len(form.items):
        raise IndexError(f"item index {index} out of range")

    items = list(form.items)
    items[index] = replace(items[index], **{key: value})
    return replace(form, items=items)


def remove_item(form: InvoiceForm, index: int) -> InvoiceForm:
    return replace(form, items=[item for i, item in enumerate(form.items) if i != index])


def form_from_invoice(invoice: Invoice) -> InvoiceForm:
    """
    Pre-populate the form from an existing invoice for editing.
    """
    return InvoiceForm(
        client_id=invoice.client_id,
        issue_date=date_part(invoice.issue_date),
        due_date=date_part(invoice.due_date),
        notes=invoice.notes or "",
        discount_type=invoice.discount_type or "",
        discount_value=invoice.discount_value or 0,
        tax_rate=invoice.tax_rate or 0,
        tax_name=invoice.tax_name or "",
        items=[replace(item) for item in invoice.items],
    )


def missing_required_fields(form: InvoiceForm) -> List[str]:
    return [
        payload_key
        for attr, payload_key in REQUIRED_FIELDS.items()
        if not str(getattr(form, attr)).strip()
    ]
