import streamlit as st
import pandas as pd
from typing import List

from api_client import delete_invoice
from domain.models import InvoiceItem
from utils.formatting import format_currency
from utils.session import get_access_token


@st.dialog("Delete Invoice")
def confirm_delete_dialog(invoice_id: str):
    st.write("Are you sure you want to delete this invoice? This action cannot be undone.")

    col_cancel, col_confirm = st.columns(2)

    with col_cancel:
        if st.button("Cancel", key="delete_cancel"):
            st.rerun()
    with col_confirm:
        if st.button("Confirm", type="primary", key="delete_confirm"):
            ok, msg, _ = delete_invoice(get_access_token(), invoice_id)
            if not ok:
                st.error(msg)
                return

            # drop locally, no refetch
            st.session_state["invoices"] = [
                inv for inv in st.session_state["invoices"] if inv.id != invoice_id
            ]
            st.rerun()


def invoice_items_table(items: List[InvoiceItem]):
    if not items:
        st.caption("No items.")
        return

    rows = []
    for item in items:
        if item.discount:
            discount = f"{item.discount:g}%" if item.is_percentage_discount else format_currency(item.discount)
        else:
            discount = "-"
        rows.append(
            {
                "Description": item.description,
                "Qty": item.quantity,
                "Unit Price": format_currency(item.unit_price),
                "Discount": discount,
                "Amount": format_currency(item.amount) if item.amount is not None else "-",
            }
        )

    df = pd.DataFrame(rows)
    st.dataframe(df, width="stretch", hide_index=True)
