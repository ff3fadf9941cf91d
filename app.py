"""
Medical Office Financial Model - SimSG v1
A minimal Streamlit interface that uses the engine as the single source of truth
"""

import hashlib
import json
import logging
import os

import streamlit as st

from engine.models import SimulationInput, default_input
from engine.compute import simulate
from components.inputs_form import render_inputs_form
from components.kpi_panel import render_kpi_panel


logging.basicConfig(
    level=os.getenv("SIMSG_LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

st.set_page_config(
    page_title="SimSG - Medical Offices",
    page_icon="🏥",
    layout="wide"
)


def hash_input(inp: SimulationInput) -> str:
    """Create hash of the input snapshot for caching"""
    inp_str = json.dumps(inp.to_dict(), sort_keys=True)
    return hashlib.md5(inp_str.encode()).hexdigest()


def main():
    st.title("🏥 Medical offices")
    st.caption("Financial simulation – v1 (year 1, TTC)")

    form_col, kpi_col = st.columns([2, 1])

    with form_col:
        inp = render_inputs_form(default_input())

    inp_hash = hash_input(inp)

    # Recompute only when the inputs changed
    if 'engine' not in st.session_state or st.session_state['engine'].get('hash') != inp_hash:
        st.session_state['engine'] = {
            'res': simulate(inp),
            'hash': inp_hash,
            'input': inp
        }

    res = st.session_state['engine']['res']
    inp = st.session_state['engine']['input']

    with kpi_col:
        render_kpi_panel(inp, res)

    st.caption("FR format, TTC. Rounding: € to the unit, % to one decimal. v1 without charts.")


if __name__ == "__main__":
    main()
