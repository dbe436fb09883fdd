"""Tests for invoice form-state operations."""
import pytest

from domain.models import InvoiceForm, InvoiceItem
from services.invoice_form import (
    add_item,
    blank_form,
    form_from_invoice,
    missing_required_fields,
    remove_item,
    update_item,
)


def _form_with_items(*descriptions):
    return InvoiceForm(items=[InvoiceItem(description=d) for d in descriptions])


class TestItemEditing:
    """Tests for adding, updating and removing line items."""

    def test_add_item_appends_default_row(self):
        form = add_item(blank_form())

        assert form.items == [
            InvoiceItem(description="", quantity=1, unit_price=0, discount=0, is_percentage_discount=True)
        ]

    def test_add_item_does_not_mutate_original(self):
        original = _form_with_items("a")

        updated = add_item(original)

        assert len(original.items) == 1
        assert [i.description for i in updated.items] == ["a", ""]

    def test_update_item_sets_single_field(self):
        form = _form_with_items("a", "b")

        updated = update_item(form, 1, "unit_price", 12.5)

        assert updated.items[1].unit_price == 12.5
        assert updated.items[1].description == "b"
        assert form.items[1].unit_price == 0

    def test_update_item_rejects_unknown_field(self):
        with pytest.raises(KeyError):
            update_item(_form_with_items("a"), 0, "colour", "red")

    def test_update_item_rejects_bad_index(self):
        with pytest.raises(IndexError):
            update_item(_form_with_items("a"), 3, "description", "x")

    def test_remove_item_by_index(self):
        form = _form_with_items("a", "b", "c")

        updated = remove_item(form, 1)

        assert [i.description for i in updated.items] == ["a", "c"]

    def test_remove_item_out_of_range_is_noop(self):
        form = _form_with_items("a")

        assert remove_item(form, 5).items == form.items


class TestFormFromInvoice:
    """Tests for pre-populating the form when editing."""

    def test_prefills_fields_and_trims_dates(self, invoice):
        form = form_from_invoice(invoice)

        assert form.client_id == "client-1"
        assert form.issue_date == "2024-03-01"
        assert form.due_date == "2024-03-31"
        assert form.notes == "Thanks for your business"
        assert form.discount_type == "PERCENTAGE"
        assert form.discount_value == 10
        assert form.tax_rate == 19
        assert form.tax_name == "VAT"
        assert form.items == invoice.items

    def test_items_are_copied(self, invoice):
        form = form_from_invoice(invoice)

        edited = update_item(form, 0, "description", "Changed")

        assert invoice.items[0].description == "Consulting"
        assert edited.items[0].description == "Changed"

    def test_missing_optionals_become_defaults(self, invoice):
        invoice.notes = None
        invoice.discount_type = None
        invoice.discount_value = None
        invoice.tax_rate = None
        invoice.tax_name = None

        form = form_from_invoice(invoice)

        assert (form.notes, form.discount_type, form.discount_value, form.tax_rate, form.tax_name) == (
            "", "", 0, 0, "",
        )


class TestRequiredFields:
    """Tests for the required-input check run before submitting."""

    def test_blank_form_reports_all_required(self):
        assert missing_required_fields(blank_form()) == ["clientId", "issueDate", "dueDate"]

    def test_complete_form_reports_nothing(self):
        form = InvoiceForm(client_id="c1", issue_date="2024-01-01", due_date="2024-01-31")

        assert missing_required_fields(form) == []

    def test_items_are_not_validated(self):
        form = InvoiceForm(
            client_id="c1",
            issue_date="2024-01-01",
            due_date="2024-01-31",
            items=[InvoiceItem(description="", quantity=-1, unit_price=0)],
        )

        assert missing_required_fields(form) == []
