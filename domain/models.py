# invoices/domain/models.py

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _number(value: Any, default: float = 0) -> float:
    if value is None or value == "":
        return default
    return float(value)


def _optional_number(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


@dataclass
class ClientSummary:
    """
    Denormalized client attached to an invoice by the backend.
    """
    id: str
    name: str
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClientSummary":
        return cls(
            id=str(data.get("id", "")),
            name=data.get("name") or "",
            email=data.get("email"),
        )


@dataclass
class InvoiceItem:
    """
    One billable line within an invoice.
    """
    description: str = ""
    quantity: float = 1
    unit_price: float = 0
    discount: Optional[float] = None
    is_percentage_discount: Optional[bool] = None
    amount: Optional[float] = None  # computed by the server, never here

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InvoiceItem":
        return cls(
            description=data.get("description") or "",
            quantity=_number(data.get("quantity")),
            unit_price=_number(data.get("unitPrice")),
            discount=_optional_number(data.get("discount")),
            is_percentage_discount=data.get("isPercentageDiscount"),
            amount=_optional_number(data.get("amount")),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "description": self.description,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
        }
        if self.discount is not None:
            data["discount"] = self.discount
        if self.is_percentage_discount is not None:
            data["isPercentageDiscount"] = self.is_percentage_discount
        if self.amount is not None:
            data["amount"] = self.amount
        return data


@dataclass
class Invoice:
    """
    An invoice as returned by the backend. `total_amount` is trusted as-is.
    """
    id: str
    client_id: str
    issue_date: str
    due_date: str
    total_amount: float = 0
    items: List[InvoiceItem] = field(default_factory=list)
    notes: Optional[str] = None
    discount_type: Optional[str] = None
    discount_value: Optional[float] = None
    tax_rate: Optional[float] = None
    tax_name: Optional[str] = None
    client: Optional[ClientSummary] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Invoice":
        client = data.get("client")
        return cls(
            id=str(data["id"]),
            client_id=str(data.get("clientId") or ""),
            issue_date=data.get("issueDate") or "",
            due_date=data.get("dueDate") or "",
            total_amount=_number(data.get("totalAmount")),
            items=[InvoiceItem.from_dict(i) for i in data.get("items") or []],
            notes=data.get("notes"),
            discount_type=data.get("discountType"),
            discount_value=_optional_number(data.get("discountValue")),
            tax_rate=_optional_number(data.get("taxRate")),
            tax_name=data.get("taxName"),
            client=ClientSummary.from_dict(client) if client else None,
        )


@dataclass
class InvoiceForm:
    """
    Transient editing state for one invoice. Dates are "YYYY-MM-DD" strings,
    "" when unset.
    """
    client_id: str = ""
    issue_date: str = ""
    due_date: str = ""
    notes: str = ""
    discount_type: str = ""
    discount_value: float = 0
    tax_rate: float = 0
    tax_name: str = ""
    items: List[InvoiceItem] = field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        return {
            "clientId": self.client_id,
            "issueDate": self.issue_date,
            "dueDate": self.due_date,
            "notes": self.notes,
            "discountType": self.discount_type,
            "discountValue": self.discount_value,
            "taxRate": self.tax_rate,
            "taxName": self.tax_name,
            "items": [item.to_dict() for item in self.items],
        }
