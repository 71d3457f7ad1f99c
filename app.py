import altair as alt
import pandas as pd
import streamlit as st
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Dict, List, Optional

from econstruct.charts import (
    donut_chart,
    gauge_chart,
    grid_bar_chart,
    hourly_area_chart,
    weekly_line_chart,
)
from econstruct.context import Coordinate
from econstruct.dashboard import compute_dashboard
from econstruct.geocode import GeocodeError, search_address
from econstruct.settings import load_settings
from econstruct.shaping import COLORS
from econstruct.upload import ACCEPTED_EXTENSIONS, DEFAULT_ZOOM, NO_LOCATION_ERROR, SelectionState, format_code

alt.data_transformers.disable_max_rows()


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        f"""
        <style>
        .app-top-bar {{padding: 6px 0 4px;border-bottom: 1px solid #1f2937;margin-bottom: 10px;}}
        .app-top-bar .subtitle {{color: #94a3b8;font-size: 0.9rem;margin-top: 2px;}}
        .app-top-bar .page-title {{font-size: 1.4rem;font-weight: 700;}}
        .card {{border-radius: 16px;padding: 16px;background: {COLORS["card"]};margin-bottom: 12px;}}
        .card-title {{font-size: 0.9rem;color: #cbd5e1;}}
        .card-subtitle {{font-size: 0.8rem;color: #94a3b8;}}
        .tile {{border-radius: 12px;background: #1e293b;padding: 12px;text-align: center;}}
        .tile .value {{font-size: 1.5rem;font-weight: 600;}}
        .tile .label {{font-size: 0.75rem;color: #94a3b8;}}
        .legend-row {{display: flex;gap: 8px;align-items: center;font-size: 0.8rem;color: #cbd5e1;}}
        .legend-dot {{display: inline-block;width: 8px;height: 8px;border-radius: 50%;}}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str, subtitle: Optional[str] = None):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-title">{title}</div>
          <div class="card-subtitle">{subtitle or ""}</div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def tile(label: str, value: Any, value_first: bool = False):
    parts = [f"<div class='value'>{value}</div>", f"<div class='label'>{label}</div>"]
    if not value_first:
        parts.reverse()
    st.markdown(f"<div class='tile'>{''.join(parts)}</div>", unsafe_allow_html=True)


def render_legend(items: List[Dict[str, Any]]):
    cols = st.columns(len(items))
    for col, item in zip(cols, items):
        col.markdown(
            f"<div class='legend-row'><span class='legend-dot' style='background:{item['color']}'></span>"
            f"<span>{item['label']}</span><span>{item['value']} kWh</span></div>",
            unsafe_allow_html=True,
        )


def _selection() -> SelectionState:
    return st.session_state.setdefault("selection", SelectionState())


def _set_selection(state: SelectionState):
    st.session_state["selection"] = state


# ---------- Pages ----------
def render_upload_page():
    state = _selection()
    st.title("ECOnstruct")
    st.caption("Greener Spaces for all")

    with card("Project location", "Set the marker from a search or coordinates. Light demo geocoding via Nominatim."):
        search_cols = st.columns([5, 1])
        query = search_cols[0].text_input("Search", value=state.search, placeholder="Search address, place, or coordinates", label_visibility="collapsed")
        if search_cols[1].button("Search"):
            state = replace(state, search=query)
            try:
                location = search_address(query, load_settings())
                state = state.with_search_result(location)
            except GeocodeError as exc:
                state = state.with_search_result(None, exc.message)
            _set_selection(state)
        if state.search_error:
            st.error(state.search_error)

        point = state.marker or state.center
        coord_cols = st.columns(3)
        lat = coord_cols[0].number_input("Latitude", min_value=-90.0, max_value=90.0, value=float(point.lat), format="%.5f")
        lng = coord_cols[1].number_input("Longitude", min_value=-180.0, max_value=180.0, value=float(point.lng), format="%.5f")
        if coord_cols[2].button("Set marker"):
            state = state.with_marker(Coordinate(lat=lat, lng=lng))
            _set_selection(state)
        st.map(pd.DataFrame({"lat": [point.lat], "lon": [point.lng]}), zoom=DEFAULT_ZOOM)
        st.caption("© OpenStreetMap contributors")

    with card("BIM file of the building"):
        uploaded = st.file_uploader("BIM file", type=ACCEPTED_EXTENSIONS, label_visibility="collapsed")
        if uploaded is not None and uploaded.name != state.file_name:
            state = state.with_file(uploaded.name)
            _set_selection(state)
        if state.file_name:
            st.markdown(f"**Selected:** {state.file_name}")
        if state.file_error:
            st.error(state.file_error)
        elif state.file_number is not None:
            st.success(f"Detected number: {format_code(state.file_number)}")

    footer = st.columns([4, 1])
    footer[0].caption(f"Selected: {state.marker.label(5)}" if state.marker else NO_LOCATION_ERROR)
    if footer[1].button("Continue", disabled=not state.can_continue, type="primary"):
        st.session_state["dashboard"] = {"code": state.continue_code(), "context": state.dashboard_context()}
        st.rerun()


def render_dashboard_page(code: str, context):
    bundle = compute_dashboard(code, context, with_charts=False)
    header = bundle["header"]
    solar = bundle["digits"]["solar"]
    pie_colors = [COLORS["accent"], COLORS["home"], COLORS["grid"]]

    top = st.columns([6, 1])
    top[0].markdown(
        f"<div class='app-top-bar'><div class='page-title'>{header['title']}</div><div class='subtitle'>{header['subtitle']}</div></div>",
        unsafe_allow_html=True,
    )
    if top[1].button("← Back"):
        st.session_state.pop("dashboard", None)
        st.rerun()

    row = st.columns(3)
    with row[0]:
        with card("Weather & Climate", "Toy series"):
            st.altair_chart(weekly_line_chart(bundle["weekly_series"]), use_container_width=True)
    with row[1]:
        with card("Shading"):
            st.altair_chart(hourly_area_chart(bundle["hourly_series"]), use_container_width=True)
    with row[2]:
        benefits = bundle["benefits"]
        with card("Environmental benefits", f"Accumulated power generation (kWh): {solar}"):
            cols = st.columns(3)
            with cols[0]:
                tile("Standard coal saved (t)", f"{benefits['coal_saved_t']:.2f}", value_first=True)
            with cols[1]:
                tile("CO₂ avoided (t)", f"{benefits['co2_avoided_t']:.2f}", value_first=True)
            with cols[2]:
                tile("Equivalent trees", benefits["equivalent_trees"], value_first=True)

    row = st.columns(3)
    with row[0]:
        with card("Grid – Net Exported (kWh)"):
            st.altair_chart(grid_bar_chart(bundle["grid_bar"]), use_container_width=True)
            st.caption(f"Net exported: {bundle['net_exported']}")
    with row[1]:
        with card("Solar (kWh)", f"{solar} generated"):
            st.altair_chart(donut_chart(bundle["solar_pie"], pie_colors), use_container_width=True)
            render_legend(bundle["solar_legend"])
    with row[2]:
        orders = bundle["work_orders"]
        with card("Work orders"):
            cols = st.columns(2)
            with cols[0]:
                tile("Executing", orders["executing"])
            with cols[1]:
                tile("Finished", orders["finished"])

    row = st.columns(2)
    with row[0]:
        with card("Home supply (kWh)"):
            st.altair_chart(donut_chart(bundle["home_pie"], pie_colors), use_container_width=True)
    with row[1]:
        with card("Battery", f"{bundle['gauge_value']}%"):
            st.altair_chart(gauge_chart(bundle["gauge_value"]), use_container_width=True)


# ---------- UI setup ----------
st.set_page_config(page_title="ECOnstruct", layout="wide")
inject_base_styles()

target = st.session_state.get("dashboard")
if target is None and st.query_params.get("code"):
    target = {"code": st.query_params.get("code"), "context": None}

if target is None:
    render_upload_page()
else:
    render_dashboard_page(target["code"], target["context"])
