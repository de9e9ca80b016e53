from typing import Dict, Optional
import streamlit as st

from .constants import DEFAULT_WATER_TEMP_C, DISCLAIMER, SPOT_MANUAL_DEFAULT, WEIGHT_UNITS
from .data import reference_frame, search_table
from .utils import fmt_karat, fmt_usd

DEFAULT_INPUTS = {
    "weight_unit": "gram",
    "air_weight": 0.0,
    "water_weight": 0.0,
    "water_temp_c": DEFAULT_WATER_TEMP_C,
    "use_manual_spot": True,
    "spot_manual": dict(SPOT_MANUAL_DEFAULT),
}

def init_state():
    for key, val in DEFAULT_INPUTS.items():
        if key not in st.session_state:
            st.session_state[key] = val.copy() if isinstance(val, dict) else val
    if "last_result" not in st.session_state:
        st.session_state["last_result"] = None

def title():
    st.set_page_config(layout="centered", page_title="Gold Karat Checker", page_icon="⚖️")
    st.title("Gold Karat Checker")
    st.caption("Hydrostatic weighing (water balance) method")

def method_explainer():
    with st.expander("How this method works", expanded=False):
        st.markdown(
            "1. **Weigh in air:** record the dry weight of the piece (e.g. 10.50 g).\n"
            "2. **Weigh in water:** fully submerge the piece with no air bubbles and record the weight (e.g. 9.80 g).\n"
            "3. **Compute density:** density = weight in air ÷ (weight in air − weight in water).\n"
            "4. **Interpret:** the checker reports a final karat range plus a consistency indicator for quick screening."
        )

def sidebar_inputs() -> Dict[str, object]:
    st.sidebar.header("Weighing data")
    unit = st.sidebar.radio("Weight unit", list(WEIGHT_UNITS), horizontal=True, key="weight_unit")
    suffix = "g" if unit == "gram" else "ct"
    air = st.sidebar.number_input(f"Weight in air ({suffix})", min_value=0.0, step=0.01, format="%.2f", key="air_weight")
    water = st.sidebar.number_input(f"Weight in water ({suffix})", min_value=0.0, step=0.01, format="%.2f", key="water_weight")
    temp = st.sidebar.number_input("Water temperature (°C) — optional", step=0.5, key="water_temp_c")
    st.sidebar.caption("Default 20°C. Temperature changes water density (simple correction).")

    with st.sidebar.expander("Gold spot price (USD)"):
        use_manual = st.checkbox("Use manual spot price", key="use_manual_spot")
        spot_oz: Optional[float] = None
        if use_manual:
            sm = st.session_state["spot_manual"]
            sm["gold_oz"] = st.number_input("Gold $/oz", value=float(sm["gold_oz"]), step=1.0)
            st.session_state["spot_manual"] = sm
            spot_oz = float(sm["gold_oz"])
        else:
            st.caption("Uses the Yahoo Finance benchmark (GC=F). Click Calculate to refresh.")
    return {"weight_unit": unit, "air_weight": air, "water_weight": water,
            "water_temp_c": temp, "spot_oz": spot_oz}

def render_result(result):
    st.subheader("Result")
    st.markdown(
        f"<span style='background:{result.category_color};color:white;padding:4px 12px;"
        f"border-radius:999px;font-weight:700'>{result.category_label}</span>",
        unsafe_allow_html=True,
    )
    st.markdown(f"**Final range:** {result.final_range_label} — {result.conclusion}")

    c1, c2 = st.columns(2)
    c1.metric("Density", f"{result.density:.2f} g/cm³")
    c2.metric("Estimated gold content", f"{result.gold_percent:.1f}%")
    c1.metric("Karat (from percent)", f"{result.karat_from_percent:.1f}K")
    c1.caption("K = % × 24 / 100")
    if result.karat_from_density is not None:
        c2.metric("Karat (from density)", f"{fmt_karat(result.karat_from_density)}K")
        c2.caption(f"Density range: {result.karat_density_range}")
    else:
        c2.metric("Karat (from density)", "?")
        c2.caption("Outside the table range")

    delta = "" if result.delta_karat is None else f" — difference ≈ **{result.delta_karat:.1f}K**"
    msg = f"Consistency indicator: **{result.delta_flag}**{delta}\n\n{result.delta_note}"
    if result.delta_flag == "WARN":
        st.warning(msg)
    else:
        st.info(msg)

def render_value(value: Dict, spot: Dict):
    if not value:
        return
    with st.expander(f"Gold content value (spot {fmt_usd(spot['per_oz'])}/oz, {spot['source']})"):
        for name, row in value.items():
            st.markdown(f"- **{name}**: {row['karat']:.1f}K → {row['fine_gold_g']:.3f} g fine gold ≈ {fmt_usd(row['value_usd'])}")

def render_reference_table():
    st.subheader("Gold karat conversion table (24K → 6K)")
    q = st.text_input("Search karat (e.g. 18K) or percent", key="table_query")
    bands = search_table(q)
    if not bands:
        st.caption("No rows match the search.")
        return
    df = reference_frame(bands)
    st.dataframe(df, use_container_width=True, hide_index=True,
                 column_config={
                     "Purity (%)": st.column_config.NumberColumn(format="%.1f"),
                     "Min density (g/cm³)": st.column_config.NumberColumn(format="%.2f"),
                     "Max density (g/cm³)": st.column_config.NumberColumn(format="%.2f"),
                 })
    st.download_button("Download table (CSV)", data=df.to_csv(index=False).encode("utf-8"),
                       file_name="karat_table.csv", mime="text/csv")

def disclaimer():
    st.error(f"**Important — disclaimer.** {DISCLAIMER}")
