import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import logging

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px

from ledger.config import get_settings
from ledger.domain import ALL_CATEGORIES
from ledger.formatting import balance_tone, format_inr, format_lakh
from ledger.session import LedgerSession
from ledger.sync import drive_urls, fetch_csv

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="Payment Reminder", page_icon="💰", layout="centered")

if "ledger" not in st.session_state:
    session = LedgerSession(snapshot_path=settings.snapshot_path)
    session.load()
    st.session_state.ledger = session

ledger: LedgerSession = st.session_state.ledger


def run_sync() -> None:
    urls = drive_urls(settings.drive_file_id, settings.proxy_base)
    with st.spinner("Downloading from Google Drive..."):
        result = ledger.sync(lambda: fetch_csv(urls, timeout_s=settings.request_timeout_s))
    if result.is_left():
        st.session_state.sync_error = result.get_error()
    else:
        st.session_state.pop("sync_error", None)


st.title("💰 Payment Reminder")

col_sync, col_status = st.columns([1, 2])
with col_sync:
    if st.button("🔄 Sync from Drive", use_container_width=True):
        run_sync()
with col_status:
    if ledger.last_status:
        st.caption(ledger.last_status)
    elif ledger.last_synced:
        synced = pd.to_datetime(ledger.last_synced, errors="coerce")
        label = synced.strftime("%d %b %Y, %H:%M") if pd.notna(synced) else ledger.last_synced
        st.caption(f"Last synced: {label}")

with st.expander("📂 Load a CSV export from disk"):
    uploaded = st.file_uploader("Ledger CSV", type=["csv", "txt"])
    if uploaded is not None and st.button("Load file"):
        loaded = ledger.upload(uploaded.getvalue().decode("utf-8", errors="replace"))
        if loaded.is_left():
            st.error(loaded.get_error())
        else:
            st.session_state.pop("sync_error", None)
            st.success(f"✅ Loaded {len(ledger.entries)} entries")

if "sync_error" in st.session_state:
    st.error(f"**Sync Failed**\n\n{st.session_state.sync_error}")
    st.caption(
        "Troubleshooting: check your internet connection, make sure the file "
        "is accessible, and try again in a few seconds."
    )

if not ledger.entries:
    st.info("No ledger data yet. Sync from Drive to get started.")
    st.stop()

stats = ledger.stats()
k1, k2, k3, k4 = st.columns(4)
with k1:
    st.metric("Total Parties", stats.total_parties)
with k2:
    st.metric("Total Debit", format_lakh(stats.total_debit))
with k3:
    st.metric("Total Credit", format_lakh(stats.total_credit))
with k4:
    st.metric(
        "Net Balance",
        format_lakh(abs(stats.net_balance)),
        delta="credit side" if stats.net_balance < 0 else "debit side",
        delta_color="inverse" if stats.net_balance < 0 else "normal",
    )

query = st.text_input("🔍 Search party", value=ledger.filter_state.search_query)
ledger.search(query)

options = list(ledger.categories())
current = ledger.filter_state.category
category = st.radio(
    "Voucher type",
    options,
    index=options.index(current) if current in options else 0,
    format_func=lambda c: "All" if c == ALL_CATEGORIES else (c or "(none)"),
    horizontal=True,
)
ledger.select_category(category)

balances = ledger.party_balances()
if not balances:
    st.info("**No entries found**\n\nTry adjusting your search or filter")
    st.stop()

df = pd.DataFrame(
    [
        {
            "Party": e.party_name,
            "Voucher": e.voucher_type,
            "Date": e.date,
            "Balance": e.balance,
            "Amount": f"₹{format_inr(e.balance)}",
            "Side": balance_tone(e.balance),
        }
        for e in balances
    ]
)

top = df.head(15).assign(abs_balance=lambda x: x["Balance"].abs())
top["colour"] = np.where(top["Balance"] >= 0, "#4CAF50", "#f44336")
fig = px.bar(
    top,
    x="abs_balance",
    y="Party",
    orientation="h",
    labels={"abs_balance": "Balance (₹)", "Party": ""},
    title="Largest outstanding balances",
)
fig.update_traces(marker_color=top["colour"])
fig.update_layout(yaxis={"autorange": "reversed"}, margin=dict(t=40, b=10, l=10, r=10))
st.plotly_chart(fig, use_container_width=True)

st.dataframe(
    df[["Party", "Voucher", "Date", "Amount", "Side"]],
    use_container_width=True,
    hide_index=True,
)
st.download_button(
    "⬇ Download CSV",
    df.drop(columns=["Amount"]).to_csv(index=False),
    file_name="party_balances.csv",
    mime="text/csv",
)
