"""Assumptions page for the dashboard."""

import streamlit as st
import pandas as pd
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent))
from savings_calculator.config.assumptions import AssumptionsError, get_assumptions, load_assumptions
from savings_calculator.cost.packages import PACKAGES
from styles import inject_styles, page_header, section_header, info_box

st.set_page_config(page_title="Assumptions", page_icon="⚙️", layout="wide")
inject_styles()

page_header("⚙️ Calculator Assumptions", "Operational assumptions behind every savings estimate")

if "assumptions" in st.session_state:
    assumptions = st.session_state["assumptions"]
else:
    try:
        assumptions = load_assumptions()
    except AssumptionsError as e:
        st.error(f"Invalid assumptions file, showing built-in defaults: {e}")
        assumptions = get_assumptions()

st.markdown(info_box(
    "These values are read from <code>config/assumptions.yaml</code> (falling back to built-in defaults) "
    "and are not editable here."
), unsafe_allow_html=True)

section_header("Unit Economics")

rows = []
for section, values in assumptions.to_dict().items():
    for key, value in values.items():
        rows.append({
            "Service": section.replace("_", " ").title(),
            "Assumption": key.replace("_", " ").capitalize(),
            "Value": value,
        })

st.dataframe(pd.DataFrame(rows), use_container_width=True, hide_index=True)

section_header("Packages")

packages_df = pd.DataFrame([
    {
        "Package": config.label,
        "Description": config.description,
        "Services": ", ".join(service.label for service in config.services),
    }
    for config in PACKAGES.values()
])
st.dataframe(packages_df, use_container_width=True, hide_index=True)
