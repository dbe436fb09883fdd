from dataclasses import replace

import streamlit as st

from api_client import fetch_invoices, create_invoice, update_invoice
from element_component import confirm_delete_dialog, invoice_items_table
from services.invoice_form import (
    add_item,
    blank_form,
    form_from_invoice,
    missing_required_fields,
    remove_item,
    update_item,
)
from utils.formatting import (
    format_currency,
    format_display_date,
    format_form_date,
    parse_form_date,
    short_id,
)
from utils.session import require_access_token

st.set_page_config(page_title="Invoices", page_icon="🧾")
st.sidebar.header("🧾 Invoices")

token = require_access_token()

DISCOUNT_TYPES = {
    "": "No Discount",
    "PERCENTAGE": "Percentage",
    "FIXED": "Fixed",
}

REQUIRED_LABELS = {
    "clientId": "Client ID",
    "issueDate": "Issue Date",
    "dueDate": "Due Date",
}

# -----------------------------------------------------------------------------
# Session state defaults
# -----------------------------------------------------------------------------
defaults = {
    "invoices": [],
    "invoices_loaded": False,
    "fetch_error": None,
    "editing_invoice": None,
    "invoice_form": blank_form(),
    # bumped whenever the form is replaced wholesale so widgets re-seed
    "form_version": 0,
    "form_notice": None,
}

for k, v in defaults.items():
    st.session_state.setdefault(k, v)


def load_invoices():
    with st.spinner("Loading invoices..."):
        ok, msg, invoices = fetch_invoices(token)

    if ok:
        st.session_state["invoices"] = invoices
        st.session_state["fetch_error"] = None
    else:
        st.session_state["fetch_error"] = msg

    st.session_state["invoices_loaded"] = True


def set_form(form, editing=None):
    st.session_state["invoice_form"] = form
    st.session_state["editing_invoice"] = editing
    st.session_state["form_version"] += 1


def reset_form():
    set_form(blank_form())


if not st.session_state["invoices_loaded"]:
    load_invoices()

# -----------------------------------------------------------------------------
# 1) Invoice form
# -----------------------------------------------------------------------------
st.title("Invoices")

editing = st.session_state["editing_invoice"]
form = st.session_state["invoice_form"]
v = st.session_state["form_version"]

if st.session_state["form_notice"]:
    st.success(st.session_state["form_notice"])
    st.session_state["form_notice"] = None

if editing:
    st.subheader(f"Edit Invoice #{short_id(editing.id)}")
else:
    st.subheader("New Invoice")

col_left, col_right = st.columns(2)

with col_left:
    client_id = st.text_input("Client ID", value=form.client_id, key=f"client_id_{v}")
    issue_date = st.date_input(
        "Issue Date",
        value=parse_form_date(form.issue_date),
        key=f"issue_date_{v}",
    )
    due_date = st.date_input(
        "Due Date",
        value=parse_form_date(form.due_date),
        key=f"due_date_{v}",
    )

with col_right:
    tax_name = st.text_input("Tax Name", value=form.tax_name, key=f"tax_name_{v}")
    tax_rate = st.number_input(
        "Tax Rate (%)",
        value=float(form.tax_rate),
        step=1.0,
        format="%g",
        key=f"tax_rate_{v}",
    )
    discount_options = list(DISCOUNT_TYPES.keys())
    discount_type = st.selectbox(
        "Discount",
        options=discount_options,
        index=discount_options.index(form.discount_type) if form.discount_type in DISCOUNT_TYPES else 0,
        format_func=lambda value: DISCOUNT_TYPES.get(value, value),
        key=f"discount_type_{v}",
    )
    discount_value = st.number_input(
        "Discount Value",
        value=float(form.discount_value),
        step=1.0,
        format="%g",
        key=f"discount_value_{v}",
    )

notes = st.text_area("Notes", value=form.notes, key=f"notes_{v}")

form = replace(
    form,
    client_id=client_id,
    issue_date=format_form_date(issue_date),
    due_date=format_form_date(due_date),
    notes=notes,
    discount_type=discount_type,
    discount_value=discount_value,
    tax_rate=tax_rate,
    tax_name=tax_name,
)

# -----------------------------------------------------------------------------
# 2) Line items
# -----------------------------------------------------------------------------
st.markdown("**Invoice Items**")

remove_index = None

for i, item in enumerate(form.items):
    label_visibility = "visible" if i == 0 else "collapsed"
    col_desc, col_qty, col_price, col_disc, col_pct, col_remove = st.columns(
        [3, 1, 1.5, 1.5, 1, 0.6],
        vertical_alignment="bottom",
    )

    with col_desc:
        description = st.text_input(
            "Description",
            value=item.description,
            placeholder="Description",
            label_visibility=label_visibility,
            key=f"item_{v}_{i}_description",
        )
    with col_qty:
        quantity = st.number_input(
            "Qty",
            value=float(item.quantity),
            step=1.0,
            format="%g",
            label_visibility=label_visibility,
            key=f"item_{v}_{i}_quantity",
        )
    with col_price:
        unit_price = st.number_input(
            "Unit Price",
            value=float(item.unit_price),
            step=1.0,
            format="%g",
            label_visibility=label_visibility,
            key=f"item_{v}_{i}_unit_price",
        )
    with col_disc:
        discount = st.number_input(
            "Discount",
            value=float(item.discount or 0),
            step=1.0,
            format="%g",
            label_visibility=label_visibility,
            key=f"item_{v}_{i}_discount",
        )
    with col_pct:
        is_percentage = st.checkbox(
            "%",
            value=bool(item.is_percentage_discount),
            help="Discount is a percentage",
            key=f"item_{v}_{i}_is_percentage_discount",
        )
    with col_remove:
        if st.button("✖", key=f"item_{v}_{i}_remove", help="Remove item"):
            remove_index = i

    # only write back what the user changed so untouched server values survive
    changes = (
        ("description", description, item.description),
        ("quantity", quantity, item.quantity),
        ("unit_price", unit_price, item.unit_price),
        ("discount", discount, item.discount or 0),
        ("is_percentage_discount", is_percentage, bool(item.is_percentage_discount)),
    )
    for key, new_value, old_value in changes:
        if new_value != old_value:
            form = update_item(form, i, key, new_value)

st.session_state["invoice_form"] = form

if remove_index is not None:
    set_form(remove_item(form, remove_index), editing)
    st.rerun()

if st.button("➕ Add Item", key="add_item"):
    st.session_state["invoice_form"] = add_item(form)
    st.rerun()

# -----------------------------------------------------------------------------
# 3) Submit / cancel
# -----------------------------------------------------------------------------
col_submit, col_cancel = st.columns([1, 3])

with col_submit:
    submitted = st.button(
        "Update Invoice" if editing else "Create Invoice",
        type="primary",
        key="submit_invoice",
    )

with col_cancel:
    if editing and st.button("Cancel", key="cancel_edit"):
        reset_form()
        st.rerun()

if submitted:
    missing = missing_required_fields(form)
    if missing:
        st.error(f"Please fill in: {', '.join(REQUIRED_LABELS[m] for m in missing)}")
    else:
        payload = form.to_payload()
        if editing:
            ok, msg, _ = update_invoice(token, editing.id, payload)
        else:
            ok, msg, _ = create_invoice(token, payload)

        if ok:
            load_invoices()
            reset_form()
            st.session_state["form_notice"] = "Invoice updated" if editing else "Invoice created"
            st.rerun()
        else:
            st.error(msg)

st.divider()

# -----------------------------------------------------------------------------
# 4) Invoice list
# -----------------------------------------------------------------------------
if st.session_state["fetch_error"]:
    st.error(f"Could not load invoices: {st.session_state['fetch_error']}")

invoices = st.session_state["invoices"]

if not invoices:
    st.info("No invoices yet.")

for inv in invoices:
    with st.container(border=True):
        col_title, col_edit, col_delete = st.columns([6, 1, 1])

        client_name = inv.client.name if inv.client and inv.client.name else "Client"

        with col_title:
            st.subheader(f"Invoice #{short_id(inv.id)} - {client_name}")
        with col_edit:
            if st.button("✏️", key=f"edit_{inv.id}", help="Edit invoice"):
                set_form(form_from_invoice(inv), inv)
                st.rerun()
        with col_delete:
            if st.button("🗑️", key=f"delete_{inv.id}", help="Delete invoice"):
                confirm_delete_dialog(inv.id)

        st.write(f"Issue Date: {format_display_date(inv.issue_date)}")
        st.write(f"Due Date: {format_display_date(inv.due_date)}")
        st.write(f"Total: {format_currency(inv.total_amount)}")

        with st.expander(f"Items ({len(inv.items)})"):
            invoice_items_table(inv.items)
