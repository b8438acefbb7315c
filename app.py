"""Size Checker -- Streamlit web interface."""

import os
import time

import streamlit as st

from sizecheck import (
    ABOUT_TEXT,
    PRIVACY_TEXT,
    generate_results,
    is_valid_username,
    loading_steps,
    sanitize_username,
    share_url,
)

SITE_URL = os.environ.get("SIZECHECK_SITE_URL", "http://localhost:8501")

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_RULER = _LUCIDE.format(s=32, paths=(
    '<path d="M21.3 15.3a2.4 2.4 0 0 1 0 3.4l-2.6 2.6a2.4 2.4 0 0 1-3.4 0'
    'L2.7 8.7a2.41 2.41 0 0 1 0-3.4l2.6-2.6a2.41 2.41 0 0 1 3.4 0Z"/>'
    '<path d="m14.5 12.5 2-2"/><path d="m11.5 9.5 2-2"/>'
    '<path d="m8.5 6.5 2-2"/><path d="m17.5 15.5 2-2"/>'
))

ICON_MICROSCOPE = _LUCIDE.format(s=20, paths=(
    '<path d="M6 18h8"/><path d="M3 22h18"/>'
    '<path d="M14 22a7 7 0 1 0 0-14h-1"/><path d="M9 14h2"/>'
    '<path d="M9 12a2 2 0 0 1-2-2V6h6v4a2 2 0 0 1-2 2Z"/>'
    '<path d="M12 6V3a1 1 0 0 0-1-1H9a1 1 0 0 0-1 1v3"/>'
))

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Size Checker",
    page_icon="\U0001f4cf",
    layout="centered",
)

# ── Custom CSS ────────────────────────────────────────────────────────────

st.markdown("""<style>
.size-display {
    font-size: 4rem;
    font-weight: 800;
    line-height: 1;
    text-align: center;
}
.size-display small {
    font-size: 1.4rem;
    font-weight: 500;
    opacity: 0.7;
}
</style>""", unsafe_allow_html=True)

# ── UI state ──────────────────────────────────────────────────────────────

if "result" not in st.session_state:
    st.session_state.result = None
    st.session_state.username = None


def _reset() -> None:
    st.session_state.result = None
    st.session_state.username = None


def _analyse(username: str, with_percentile: bool) -> dict | None:
    """Play the loading sequence, then generate the result."""
    try:
        with st.status("Starting analysis…", expanded=False) as status:
            bar = st.progress(0.0)
            steps = loading_steps()
            for i, (message, seconds) in enumerate(steps, start=1):
                status.update(label=message)
                time.sleep(seconds)
                bar.progress(i / len(steps))
            result = generate_results(username, percentile=with_percentile)
            status.update(label="Analysis complete", state="complete")
    except Exception:
        st.error("Oops! Something went wrong. Please try again.")
        return None
    return result


# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_RULER} Size Checker</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Our patented algorithm measures any username with up to 99% confidence.  \n"
    "It is a **parody**: the result comes from the letters of the name only."
)

# ── Input ─────────────────────────────────────────────────────────────────

if st.session_state.result is None:
    st.markdown(
        f'<p style="display:flex;align-items:center;gap:6px">'
        f'{ICON_MICROSCOPE} <strong>Analyse a username</strong></p>',
        unsafe_allow_html=True,
    )
    with st.form("checker-form"):
        raw = st.text_input(
            "Username",
            placeholder="@username",
            autocomplete="off",
        )
        with_percentile = st.checkbox("Show percentile")
        submitted = st.form_submit_button("Check size", type="primary")

    if submitted:
        username = sanitize_username(raw)
        if not is_valid_username(username):
            st.error("Please enter a valid Twitter username")
        else:
            result = _analyse(username, with_percentile)
            if result is not None:
                st.session_state.result = result
                st.session_state.username = username
                st.rerun()

# ── Result ────────────────────────────────────────────────────────────────

else:
    result = st.session_state.result
    username = st.session_state.username

    st.subheader(f"@{username}")
    st.markdown(
        f'<div class="size-display">{result["size"]} '
        f'<small>{result["unit"]}</small></div>',
        unsafe_allow_html=True,
    )
    st.write("")
    st.info(result["description"])
    st.progress(
        result["confidence"] / 100,
        text=f"Confidence: {result['confidence']}%",
    )
    if result["percentile"] is not None:
        st.metric("Percentile", result["percentile"])

    col1, col2 = st.columns(2)
    with col1:
        st.link_button(
            "Share on X",
            share_url(username, result, SITE_URL),
            use_container_width=True,
        )
    with col2:
        st.button("Try again", on_click=_reset, use_container_width=True)

# ── About / privacy ───────────────────────────────────────────────────────

st.divider()
with st.expander("About"):
    st.write(ABOUT_TEXT)
with st.expander("Privacy"):
    st.write(PRIVACY_TEXT)
