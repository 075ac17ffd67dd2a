# Home.py
import logging
import streamlit as st

from core import settings as cfg
from core import pricing as p
from core.inputs import InvalidInput, parse_inputs
from core.models import HaulMode
from core.render import results_frame

logging.basicConfig(
    level=getattr(logging, cfg.log_level(), logging.WARNING),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("dumpster.home")

# ===== Page config (call once, first) =======================================
st.set_page_config(
    page_title="Dumpster Calculator",
    layout="centered",
    initial_sidebar_state="collapsed",
)

# Hide Streamlit chrome (header/menu/footer) and pull content up a bit
st.markdown("""
<style>
header[data-testid="stHeader"] { display: none; }   /* top header bar */
#MainMenu { visibility: hidden; }                   /* hamburger menu */
footer { visibility: hidden; }                      /* "Made with Streamlit" */
div.block-container { padding-top: 1rem; max-width: 650px; }
</style>
""", unsafe_allow_html=True)

# ===================== Header ===============================================
TITLE_TEXT        = "Dumpster Calculator"
TITLE_SIZE_PX     = 40
TITLE_WEIGHT      = 800
TITLE_COLOR       = "#374151"
TITLE_FONT_FAMILY = "system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif"

st.markdown(
    f"""
    <div style="
      text-align:center;
      font-size:{TITLE_SIZE_PX}px;
      font-weight:{TITLE_WEIGHT};
      color:{TITLE_COLOR};
      line-height:1.2;
      margin:8px 0 16px 0;
      font-family:{TITLE_FONT_FAMILY};
    ">{TITLE_TEXT}</div>
    """,
    unsafe_allow_html=True,
)

# ===================== Inputs ===============================================
MODE_LABELS = [m.label for m in HaulMode]

mode_label = st.radio(
    "Rate type",
    MODE_LABELS,
    index=0,
    horizontal=True,
    key="haul_mode",
    label_visibility="collapsed",
)
mode = HaulMode.parse(mode_label)

form = {"haul_mode": mode}
form["delivery_cost"] = st.text_input("Delivery Cost", key="delivery_cost", placeholder="0")
form["haul_cost"]     = st.text_input("Haul Cost", key="haul_cost", placeholder="0")
form["rent_cost"]     = st.text_input("Rent Cost", key="rent_cost", placeholder="0")
form["fuel_pct"]      = st.text_input("Fuel (%)", key="fuel_pct", placeholder="0")
form["tax_pct"]       = st.text_input("Tax (%)", key="tax_pct", placeholder="0")

# Tonnage only matters once we leave flat rate
if mode.uses_tonnage:
    form["expected_tons"] = st.text_input("Expected Tonnage", key="expected_tons", placeholder="0")
    if mode is HaulMode.INCLUSION:
        form["included_tons"] = st.text_input("Included Tonnage", key="included_tons", placeholder="0")
    else:
        form["minimum_tons"] = st.text_input("Minimum Tonnage", key="minimum_tons", placeholder="0")
    form["tonnage_cost"] = st.text_input("Tonnage Cost", key="tonnage_cost", placeholder="0")

c1, c2 = st.columns(2)
with c1:
    form["rate_class"] = st.checkbox("RCA", key="rate_class")
with c2:
    form["expedited"] = st.checkbox("ASAP", key="expedited")

# ===================== Results ==============================================
try:
    inputs = parse_inputs(form, strict=cfg.strict_input())
except InvalidInput as exc:
    logger.warning("rejected input: %s", exc)
    st.error(str(exc))
else:
    st.dataframe(results_frame(p.quote(inputs)), hide_index=True)

contact = cfg.support_contact()
if contact:
    st.caption(f"support: {contact}")
