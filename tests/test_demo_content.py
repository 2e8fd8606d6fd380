"""
Tests for turning demo source into stored HTML pages.
"""
import json
import re

from utils.demo_content import (
    PYODIDE_VERSION,
    detect_requirements,
    load_pygame_shim,
    render_demo_content,
    wrap_markdown_as_html,
    wrap_python_as_html,
)


def _embedded_code(html):
    match = re.search(r"const code = (.*);\n", html)
    assert match, "code literal not found"
    return json.loads(match.group(1))


def test_detect_requirements():
    code = "\n".join([
        "import pygame",
        "import numpy as np",
        "import requests",
        "from bs4 import BeautifulSoup",
        "import math, random",
        "    import indented_is_ignored",
    ])
    needs = detect_requirements(code)
    assert needs == {"pygame": True, "numpy": True, "micropip": ["requests", "bs4"]}


def test_plain_script_needs_nothing():
    assert detect_requirements("print(sum(range(10)))") == {"pygame": False, "numpy": False, "micropip": []}


class TestPythonWrapper:
    def test_loads_pyodide_and_embeds_code(self, app):
        code = 'print("</script><b>hi</b>")\nfor i in range(3):\n    print(i)'
        html = wrap_python_as_html(code)
        assert f"pyodide/v{PYODIDE_VERSION}/full/" in html
        assert "</script><b>" not in html
        assert _embedded_code(html) == code

    def test_numpy_is_loaded_as_builtin_package(self, app):
        html = wrap_python_as_html("import numpy as np\nprint(np.zeros(3))")
        assert 'loadPackage(["numpy"])' in html
        assert "micropip.install" not in html

    def test_third_party_imports_go_through_micropip(self, app):
        html = wrap_python_as_html("import rich\nrich.print('x')")
        assert 'loadPackage(["micropip"])' in html
        assert 'micropip.install("rich")' in html

    def test_pygame_installs_shim(self, app):
        html = wrap_python_as_html("import pygame\npygame.init()")
        assert "/pygame/__init__.py" in html
        assert "MAX_FRAMES" in html

    def test_no_shim_without_pygame(self, app):
        assert "/pygame/__init__.py" not in wrap_python_as_html("print(1)")


def test_shim_source_is_raw_python(app):
    source = load_pygame_shim()
    assert "class Rect" in source
    assert "class Vector2" in source
    assert "{{" not in source


def test_markdown_wrapper_escapes_fallback(app):
    html = wrap_markdown_as_html("# Title\n<script>alert(1)</script>")
    assert "marked" in html
    assert "<pre id=\"source\"># Title\n&lt;script&gt;" in html


def test_render_dispatch(app):
    assert render_demo_content("html", "<p>x</p>") == "<p>x</p>"
    assert "pyodide" in render_demo_content("python", "print(1)")
    assert "marked" in render_demo_content("markdown", "# x")
