"""Tests for the delete confirmation dialog."""
from unittest.mock import patch

import pytest
from streamlit.testing.v1 import AppTest

from domain.models import Invoice


def _delete_dialog_app():
    import streamlit as st
    from element_component import confirm_delete_dialog

    confirm_delete_dialog(st.session_state["dialog_invoice_id"])


@pytest.fixture
def app(invoice):
    other = Invoice(id="inv-999999", client_id="client-2", issue_date="2024-04-01", due_date="2024-04-30")
    at = AppTest.from_function(_delete_dialog_app, default_timeout=10)
    at.session_state["accessToken"] = "tok"
    at.session_state["invoices"] = [invoice, other]
    at.session_state["dialog_invoice_id"] = invoice.id
    return at


class TestConfirmDeleteDialog:
    """Tests for confirming and cancelling a delete."""

    def test_confirm_removes_invoice_locally(self, app):
        with patch("element_component.delete_invoice", return_value=(True, "Deleted", None)) as delete, \
                patch("api_client.fetch_invoices") as fetch:
            app.run()
            app.button(key="delete_confirm").click().run()

        assert not app.exception
        delete.assert_called_once_with("tok", "inv-123456")
        fetch.assert_not_called()
        assert [inv.id for inv in app.session_state["invoices"]] == ["inv-999999"]

    def test_failed_delete_keeps_list_and_shows_error(self, app):
        with patch("element_component.delete_invoice",
                   return_value=(False, "Delete invoice failed (500)", None)) as delete:
            app.run()
            app.button(key="delete_confirm").click().run()

        delete.assert_called_once()
        assert app.error[0].value == "Delete invoice failed (500)"
        assert [inv.id for inv in app.session_state["invoices"]] == ["inv-123456", "inv-999999"]

    def test_cancel_does_not_delete(self, app):
        with patch("element_component.delete_invoice") as delete:
            app.run()
            app.button(key="delete_cancel").click().run()

        delete.assert_not_called()
        assert len(app.session_state["invoices"]) == 2
