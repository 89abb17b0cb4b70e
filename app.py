# app.py
import streamlit as st

from leadscout.config import get_settings
from leadscout.form import MAX_RESULTS, MIN_RESULTS, can_submit, make_params, run_search
from leadscout.io import contacts_to_csv, contacts_to_frame, export_filename
from leadscout.logging_config import setup_logging
from leadscout.search import GeminiLeadFinder
from leadscout.types import DEFAULT_RESULT_COUNT, Idle, Loading
from leadscout.views import View, select_view


# ----------------------------
# Page config
# ----------------------------
st.set_page_config(
    page_title="LeadScout — Find Leads in Seconds",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# ----------------------------
# Styling
# ----------------------------
SCOUT_CSS = """
<style>
#MainMenu {visibility: hidden;}
footer {visibility: hidden;}

:root{
  --ink-1: rgba(15, 23, 42, 0.95);     /* slate-900 */
  --ink-2: rgba(71, 85, 105, 0.90);    /* slate-600 */
  --indigo-1: rgba(79, 70, 229, 1);
  --indigo-2: rgba(67, 56, 202, 1);
  --border-soft: rgba(226, 232, 240, 1);
}

.stApp { background: #f8fafc; }

.scout-brand {
  display: flex;
  gap: 10px;
  align-items: center;
  font-weight: 800;
  font-size: 22px;
  color: var(--ink-1);
}
.scout-dot {
  width: 28px; height: 28px; border-radius: 8px;
  background: var(--indigo-1);
}
.scout-hero {
  text-align: center;
  max-width: 760px;
  margin: 24px auto 8px auto;
}
.scout-title {
  font-size: 44px;
  font-weight: 800;
  letter-spacing: -0.02em;
  color: var(--ink-1);
}
.scout-title span { color: var(--indigo-1); }
.scout-sub {
  font-size: 17px;
  color: var(--ink-2);
  margin-top: 8px;
}

/* Primary button (indigo) */
div[data-testid="stButton"] > button[kind="primary"] {
  border-radius: 10px !important;
  font-weight: 650 !important;
  background: var(--indigo-1) !important;
  border: 1px solid var(--indigo-1) !important;
}
div[data-testid="stButton"] > button[kind="primary"]:hover {
  background: var(--indigo-2) !important;
}
div[data-testid="stButton"] > button:disabled {
  background: rgba(203, 213, 225, 1) !important;
  border-color: rgba(203, 213, 225, 1) !important;
}

div[data-testid="stTextInput"] input,
div[data-testid="stNumberInput"] input {
  border-radius: 10px !important;
}
</style>
"""
st.markdown(SCOUT_CSS, unsafe_allow_html=True)


# ----------------------------
# Session init
# ----------------------------
if "logging_ready" not in st.session_state:
    setup_logging(get_settings().log_level)
    st.session_state["logging_ready"] = True
if "search_state" not in st.session_state:
    st.session_state["search_state"] = Idle()
if "lead_finder" not in st.session_state:
    st.session_state["lead_finder"] = GeminiLeadFinder()

state = st.session_state["search_state"]


# ----------------------------
# Hero / input collector
# ----------------------------
st.markdown(
    """
    <div class="scout-brand"><div class="scout-dot"></div><div>LeadScout</div></div>
    <div class="scout-hero">
      <div class="scout-title">Find <span>Leads</span> in Seconds</div>
      <div class="scout-sub">
        Enter a niche and location. Our AI agent scrapes live search data to find
        businesses, websites, and contact details for you.
      </div>
    </div>
    """,
    unsafe_allow_html=True,
)

c1, c2, c3, c4 = st.columns([4, 4, 2, 2], vertical_alignment="bottom")
with c1:
    niche = st.text_input("Niche", placeholder="e.g. Dentists, Roofers", key="niche")
with c2:
    location = st.text_input("Location", placeholder="e.g. Chicago", key="location")
with c3:
    count = st.number_input(
        "Limit",
        min_value=MIN_RESULTS,
        max_value=MAX_RESULTS,
        value=DEFAULT_RESULT_COUNT,
        step=1,
        help="Number of results (1-50)",
        key="count",
    )
with c4:
    find = st.button(
        "Find",
        type="primary",
        width="stretch",
        disabled=not can_submit(niche, location, state),
        key="find",
    )

if find:
    st.session_state["search_state"] = Loading(params=make_params(niche, location, count))
    st.rerun()


# ----------------------------
# Results
# ----------------------------
view = select_view(state)

if view is View.LOADING:
    with st.spinner("Scraping..."):
        st.session_state["search_state"] = run_search(st.session_state["lead_finder"], state.params)
    st.rerun()

elif view is View.ERROR:
    st.error(f"Error searching for leads: {state.error}")

elif view is View.EMPTY:
    st.subheader("No results found")
    st.caption("Try broadening your location or changing your niche keywords.")

elif view is View.TABLE:
    h1, h2 = st.columns([5, 1], vertical_alignment="center")
    with h1:
        st.subheader(f"Search Results ({len(state.data)} found)")
    with h2:
        st.download_button(
            "Export CSV",
            data=contacts_to_csv(state.data),
            file_name=export_filename(state.params.niche, state.params.location),
            mime="text/csv",
            width="stretch",
            key="export",
        )
    st.dataframe(
        contacts_to_frame(state.data),
        hide_index=True,
        width="stretch",
        column_config={
            "Email": st.column_config.LinkColumn("Email", display_text=r"^mailto:(.*)$"),
            "Phone": st.column_config.LinkColumn("Phone", display_text=r"^tel:(.*)$"),
            "Website": st.column_config.LinkColumn("Website", display_text="Visit Site"),
        },
    )

st.divider()
st.caption("Powered by Google Gemini Search Grounding. Data is scraped from public search results.")
