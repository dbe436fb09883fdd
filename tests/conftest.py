"""Shared fixtures for invoice dashboard tests."""
import pytest

from domain.models import Invoice


@pytest.fixture
def invoice_json():
    """An invoice as the backend returns it."""
    return {
        "id": "inv-123456",
        "clientId": "client-1",
        "issueDate": "2024-03-01T00:00:00.000Z",
        "dueDate": "2024-03-31T00:00:00.000Z",
        "notes": "Thanks for your business",
        "discountType": "PERCENTAGE",
        "discountValue": 10,
        "taxRate": 19,
        "taxName": "VAT",
        "totalAmount": 150,
        "items": [
            {
                "description": "Consulting",
                "quantity": 2,
                "unitPrice": 75,
                "discount": 0,
                "isPercentageDiscount": True,
                "amount": 150,
            }
        ],
        "client": {"id": "client-1", "name": "Acme Corp", "email": "billing@acme.test"},
    }


@pytest.fixture
def invoice(invoice_json):
    return Invoice.from_dict(invoice_json)
