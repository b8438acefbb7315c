"""Tests for the static docs page builder."""

import ast

import pytest

import build_docs
import sizecheck


def _core_namespace() -> dict:
    source = build_docs.SRC.read_text(encoding="utf-8")
    tree = ast.parse(source)
    code = "import math\nimport random\nimport re\nfrom urllib.parse import quote\n\n" + "\n\n".join(
        build_docs._extract(source, tree, name) for name in build_docs.CORE_NAMES
    )
    namespace: dict = {}
    exec(compile(code, "<extracted>", "exec"), namespace)
    return namespace


class TestExtract:
    def test_function(self):
        source = "def f(x):\n    return x\n\ny = 1\n"
        tree = ast.parse(source)
        assert build_docs._extract(source, tree, "f") == "def f(x):\n    return x"

    def test_assignment(self):
        source = "def f(x):\n    return x\n\ny = [\n    1,\n]\n"
        tree = ast.parse(source)
        assert build_docs._extract(source, tree, "y") == "y = [\n    1,\n]"

    def test_missing_name(self):
        tree = ast.parse("x = 1\n")
        with pytest.raises(ValueError, match="'nope' not found"):
            build_docs._extract("x = 1\n", tree, "nope")


class TestExtractedCore:
    def test_matches_library(self):
        ns = _core_namespace()
        for name in ["jack", "ag", "dril", "user_42", "Z9_"]:
            assert ns["generate_results"](name) == sizecheck.generate_results(name)
            assert ns["generate_results"](name, percentile=True) == sizecheck.generate_results(
                name, percentile=True
            )

    def test_helpers_present(self):
        ns = _core_namespace()
        assert ns["sanitize_username"]("@jack!") == "jack"
        assert ns["share_url"]("jack", {"size": 1.0, "unit": "cm", "confidence": 80}, "x").startswith(
            "https://twitter.com/intent/tweet?text="
        )


class TestBuild:
    def test_writes_page(self, tmp_path, capsys):
        out = tmp_path / "docs" / "index.html"
        html = build_docs.build(out)
        assert out.read_text(encoding="utf-8") == html
        assert "Built" in capsys.readouterr().out

    def test_placeholders_replaced(self, tmp_path):
        html = build_docs.build(tmp_path / "index.html")
        assert "__PYSCRIPT_CODE__" not in html
        assert "__PYSCRIPT_VERSION__" not in html
        assert f"releases/{build_docs.PYSCRIPT_VERSION}/core.js" in html

    def test_contains_core_and_handlers(self, tmp_path):
        html = build_docs.build(tmp_path / "index.html")
        assert "def generate_results(" in html
        assert "CATEGORIES = [" in html
        assert '@when("submit", "#checker-form")' in html
        for element_id in ["username-input", "size-display", "about-modal", "privacy-modal"]:
            assert f'id="{element_id}"' in html
