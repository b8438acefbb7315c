"""Build docs/index.html for GitHub Pages (PyScript / Pyodide).

Extracts the generator from sizecheck/__init__.py via the ast module,
wraps it in a PyScript-powered HTML page, and writes to docs/.

Usage:
    python build_docs.py
"""

import ast
from pathlib import Path

ROOT = Path(__file__).parent
SRC = ROOT / "sizecheck" / "__init__.py"
OUT = ROOT / "docs" / "index.html"

PYSCRIPT_VERSION = "2024.9.2"

# Top-level names copied into the page, in dependency order.
CORE_NAMES = [
    "SIZE_MIN",
    "SIZE_MAX",
    "SIZE_MEAN",
    "SIZE_STDDEV",
    "CM_PER_INCH",
    "CONFIDENCE_MIN",
    "USERNAME_MAX_LENGTH",
    "CATEGORIES",
    "FALLBACK_DESCRIPTION",
    "LOADING_MESSAGES",
    "ABOUT_TEXT",
    "PRIVACY_TEXT",
    "_USERNAME_CHARS",
    "_USERNAME_RE",
    "hash_username",
    "seeded_random",
    "round_one_decimal",
    "_round_half_up",
    "normal_distribution",
    "percentile_for",
    "description_for",
    "generate_results",
    "sanitize_username",
    "is_valid_username",
    "loading_steps",
    "share_text",
    "share_url",
]


# ── AST extraction ────────────────────────────────────────────────────────


def _extract(source: str, tree: ast.Module, name: str) -> str:
    """Return the source text of a top-level assignment or function."""
    for node in ast.iter_child_nodes(tree):
        if isinstance(node, ast.FunctionDef) and node.name == name:
            return ast.get_source_segment(source, node)
        if isinstance(node, ast.Assign):
            for target in node.targets:
                if isinstance(target, ast.Name) and target.id == name:
                    return ast.get_source_segment(source, node)
    raise ValueError(f"{name!r} not found in source")


# ── Python code that runs inside PyScript ─────────────────────────────────

_PY_IMPORTS = """\
import asyncio
import math
import random
import re
from urllib.parse import quote

from pyscript import when, document, window
"""

_PY_BROWSER = r'''
# ── Page state ──

state = {"username": None, "result": None}


def show_section(name):
    for section in ("input", "loading", "results"):
        el = document.querySelector(f"#{section}-section")
        if section == name:
            el.classList.remove("hidden")
        else:
            el.classList.add("hidden")


def show_error(message):
    el = document.querySelector("#error-message")
    el.textContent = message
    el.classList.remove("hidden")


def display_results(username, result):
    document.querySelector("#result-username").textContent = f"@{username}"
    document.querySelector("#size-display").textContent = str(result["size"])
    document.querySelector("#unit-display").textContent = result["unit"]
    document.querySelector("#result-description").textContent = result["description"]
    document.querySelector("#confidence-percentage").textContent = f"{result['confidence']}%"
    document.querySelector("#confidence-fill").style.width = f"{result['confidence']}%"


# ── Event handlers ──

@when("input", "#username-input")
def on_username_input(event):
    event.target.value = sanitize_username(event.target.value)
    document.querySelector("#error-message").classList.add("hidden")


@when("submit", "#checker-form")
async def on_submit(event):
    event.preventDefault()
    username = sanitize_username(document.querySelector("#username-input").value)
    if not is_valid_username(username):
        show_error("Please enter a valid Twitter username")
        return

    try:
        show_section("loading")
        message_el = document.querySelector("#loading-message")
        for message, seconds in loading_steps():
            message_el.textContent = message
            await asyncio.sleep(seconds)

        result = generate_results(username)
        state["username"] = username
        state["result"] = result
        display_results(username, result)
        show_section("results")
    except Exception:
        show_section("input")
        show_error("Oops! Something went wrong. Please try again.")


@when("click", "#share-btn")
def on_share(event):
    if state["result"] is None:
        return
    url = share_url(state["username"], state["result"], window.location.origin)
    window.open(url, "_blank", "width=600,height=400,resizable=yes,scrollbars=yes")


@when("click", "#try-again-btn")
def on_try_again(event):
    state["username"] = None
    state["result"] = None
    document.querySelector("#confidence-fill").style.width = "0"
    field = document.querySelector("#username-input")
    field.value = ""
    show_section("input")
    field.focus()


def show_modal(name):
    document.querySelector(f"#{name}-modal").classList.remove("hidden")
    document.body.style.overflow = "hidden"


def hide_modal(name):
    document.querySelector(f"#{name}-modal").classList.add("hidden")
    document.body.style.overflow = ""


@when("click", "#about-link")
def on_about(event):
    event.preventDefault()
    show_modal("about")


@when("click", "#privacy-link")
def on_privacy(event):
    event.preventDefault()
    show_modal("privacy")


@when("click", ".modal-close")
def on_modal_close(event):
    hide_modal("about")
    hide_modal("privacy")


@when("keydown", "body")
def on_keydown(event):
    if event.key == "Escape":
        hide_modal("about")
        hide_modal("privacy")


# ── Ready ──
document.querySelector("#about-text").textContent = ABOUT_TEXT
document.querySelector("#privacy-text").textContent = PRIVACY_TEXT
document.querySelector("#loading-overlay").style.display = "none"
'''


# ── HTML template ─────────────────────────────────────────────────────────
# Uses __PYSCRIPT_VERSION__ and __PYSCRIPT_CODE__ as placeholders
# (no f-strings or .format to avoid escaping CSS braces).

HTML_TEMPLATE = r'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="A parody size checker. Results come from the username alone.">
    <title>Size Checker</title>
    <link rel="stylesheet" href="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.css">
    <script type="module" src="https://pyscript.net/releases/__PYSCRIPT_VERSION__/core.js"></script>
    <style>
        :root {
            --bg: #0f0f14;
            --panel: rgba(255, 255, 255, 0.04);
            --border: rgba(255, 255, 255, 0.08);
            --fg: #f4f4f8;
            --muted: #8a8a99;
            --accent: #ff4f8b;
            --error: #ef4444;
        }

        * { box-sizing: border-box; margin: 0; padding: 0; }

        body {
            min-height: 100vh;
            display: flex;
            flex-direction: column;
            align-items: center;
            justify-content: center;
            background: var(--bg);
            color: var(--fg);
            font-family: 'Inter', -apple-system, sans-serif;
        }

        .hidden { display: none !important; }

        #loading-overlay {
            position: fixed;
            inset: 0;
            z-index: 9999;
            background: var(--bg);
            display: flex;
            align-items: center;
            justify-content: center;
            color: var(--muted);
            letter-spacing: 3px;
            text-transform: uppercase;
            font-size: 0.75rem;
        }

        .panel {
            width: min(92vw, 520px);
            padding: 2.5rem 2rem;
            background: var(--panel);
            border: 1px solid var(--border);
            border-radius: 20px;
            text-align: center;
        }

        h1 { font-size: 1.8rem; margin-bottom: 0.4rem; }
        .tagline { color: var(--muted); font-size: 0.85rem; margin-bottom: 2rem; }

        #username-input {
            width: 100%;
            padding: 0.9rem 1rem;
            font-size: 1.1rem;
            background: transparent;
            color: var(--fg);
            border: 1px solid var(--border);
            border-radius: 10px;
            outline: none;
        }

        button {
            width: 100%;
            margin-top: 1rem;
            padding: 0.85rem;
            border: none;
            border-radius: 10px;
            background: var(--accent);
            color: #fff;
            font-weight: 600;
            cursor: pointer;
        }
        button.secondary { background: rgba(255, 255, 255, 0.08); }

        #error-message {
            margin-top: 1rem;
            color: var(--error);
            font-size: 0.85rem;
        }

        .spinner {
            width: 40px; height: 40px;
            margin: 0 auto 1.5rem;
            border: 3px solid rgba(255,255,255,0.1);
            border-top-color: var(--accent);
            border-radius: 50%;
            animation: spin 0.8s linear infinite;
        }
        @keyframes spin { to { transform: rotate(360deg); } }

        #size-display { font-size: 4rem; font-weight: 800; }
        #unit-display { color: var(--muted); margin-left: 0.3rem; }
        #result-description { margin: 1.5rem 0; line-height: 1.5; }

        .confidence-bar {
            height: 6px;
            background: rgba(255,255,255,0.08);
            border-radius: 3px;
            overflow: hidden;
        }
        #confidence-fill {
            width: 0;
            height: 100%;
            background: var(--accent);
            transition: width 1s ease;
        }
        .confidence-label { margin-top: 0.5rem; font-size: 0.8rem; color: var(--muted); }

        footer { margin-top: 2rem; font-size: 0.8rem; }
        footer a { color: var(--muted); margin: 0 0.6rem; }

        .modal {
            position: fixed;
            inset: 0;
            background: rgba(0, 0, 0, 0.7);
            display: flex;
            align-items: center;
            justify-content: center;
            z-index: 100;
        }
        .modal .panel { text-align: left; line-height: 1.6; }
        .modal h2 { margin-bottom: 1rem; }
    </style>
</head>
<body>
    <div id="loading-overlay">Loading&hellip;</div>

    <main class="panel">
        <h1>&#128207; Size Checker</h1>
        <p class="tagline">Our patented algorithm measures any username with up to 99% confidence.</p>

        <section id="input-section">
            <form id="checker-form" autocomplete="off">
                <input id="username-input" type="text" placeholder="@username" maxlength="16">
                <button type="submit">Check size</button>
                <div id="error-message" class="hidden"></div>
            </form>
        </section>

        <section id="loading-section" class="hidden">
            <div class="spinner"></div>
            <p id="loading-message"></p>
        </section>

        <section id="results-section" class="hidden">
            <h2 id="result-username"></h2>
            <div><span id="size-display"></span><span id="unit-display"></span></div>
            <p id="result-description"></p>
            <div class="confidence-bar"><div id="confidence-fill"></div></div>
            <p class="confidence-label">Confidence: <span id="confidence-percentage"></span></p>
            <button id="share-btn" type="button">Share on X</button>
            <button id="try-again-btn" type="button" class="secondary">Try again</button>
        </section>
    </main>

    <footer>
        <a href="#" id="about-link">About</a>
        <a href="#" id="privacy-link">Privacy</a>
    </footer>

    <div id="about-modal" class="modal hidden">
        <div class="panel">
            <h2>About</h2>
            <p id="about-text"></p>
            <button type="button" class="modal-close secondary">Close</button>
        </div>
    </div>

    <div id="privacy-modal" class="modal hidden">
        <div class="panel">
            <h2>Privacy</h2>
            <p id="privacy-text"></p>
            <button type="button" class="modal-close secondary">Close</button>
        </div>
    </div>

    <!-- Python logic via PyScript -->
    <script type="py">
__PYSCRIPT_CODE__
    </script>

</body>
</html>
'''


# ── Build ──────────────────────────────────────────────────────────────────


def build(out: Path = OUT) -> str:
    source = SRC.read_text(encoding="utf-8")
    tree = ast.parse(source)

    core = "\n\n".join(_extract(source, tree, name) for name in CORE_NAMES)

    py_code = (
        _PY_IMPORTS
        + "\n# ── Core logic (extracted from sizecheck/__init__.py) ──\n\n"
        + core + "\n"
        + _PY_BROWSER
    )

    html = (
        HTML_TEMPLATE
        .replace("__PYSCRIPT_VERSION__", PYSCRIPT_VERSION)
        .replace("__PYSCRIPT_CODE__", py_code)
    )

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(html, encoding="utf-8")
    print(f"Built {out}  ({len(html):,} bytes)")
    return html


if __name__ == "__main__":
    build()
