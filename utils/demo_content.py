"""
Turns submitted demo source into the self-contained HTML page stored in the
blob store and shown in a sandboxed iframe.

Python demos run in the browser on Pyodide. Imports decide what gets loaded:
``numpy`` ships with Pyodide, ``pygame`` is replaced by a canvas-backed shim
and any other third-party import is installed with micropip at page load.
"""
import re

from flask import current_app, render_template

PYODIDE_VERSION = "0.26.4"
PYODIDE_INDEX_URL = f"https://cdn.jsdelivr.net/pyodide/v{PYODIDE_VERSION}/full/"
PYGAME_SHIM_TEMPLATE = "demo/pygame_shim.py"

# Modules that never need a download: the stdlib subset Pyodide bundles plus the
# packages handled separately below.
SKIP_MODULES = frozenset("""
sys os io math random json re time datetime collections itertools functools
string typing abc copy enum pathlib dataclasses operator contextlib textwrap
struct array bisect heapq statistics decimal fractions hashlib hmac secrets
base64 html xml csv configparser argparse logging unittest pdb traceback gc
inspect dis ast token tokenize codecs unicodedata locale gettext platform
ctypes threading multiprocessing subprocess socket ssl email http urllib
ftplib smtplib uuid tempfile shutil glob fnmatch pickle shelve sqlite3
zipfile tarfile gzip bz2 lzma zlib pprint warnings weakref types importlib
asyncio pygame numpy np
""".split())

_IMPORT_RE = re.compile(r"^(?:import|from)\s+(\w+)", re.MULTILINE)
_PYGAME_RE = re.compile(r"^(?:import\s+pygame|from\s+pygame)", re.MULTILINE)
_NUMPY_RE = re.compile(r"^(?:import\s+numpy|from\s+numpy)", re.MULTILINE)


def detect_requirements(code: str) -> dict:
    """
    Returns {"pygame": bool, "numpy": bool, "micropip": [package, ...]}.
    Only top-level (column 0) import statements are considered.
    """
    micropip = []
    for name in _IMPORT_RE.findall(code):
        if name not in SKIP_MODULES and name not in micropip:
            micropip.append(name)
    return {
        "pygame": bool(_PYGAME_RE.search(code)),
        "numpy": bool(_NUMPY_RE.search(code)),
        "micropip": micropip,
    }


def load_pygame_shim() -> str:
    # read raw: the shim is Python source, not a Jinja template
    source, _, _ = current_app.jinja_env.loader.get_source(current_app.jinja_env, PYGAME_SHIM_TEMPLATE)
    return source


def wrap_python_as_html(code: str) -> str:
    needs = detect_requirements(code)

    builtin_packages = []
    if needs["numpy"]:
        builtin_packages.append("numpy")
    if needs["micropip"]:
        builtin_packages.append("micropip")

    return render_template(
        "demo/python.html",
        code=code,
        pyodide_url=PYODIDE_INDEX_URL,
        builtin_packages=builtin_packages,
        micropip_packages=needs["micropip"],
        pygame_shim=load_pygame_shim() if needs["pygame"] else None,
    )


def wrap_markdown_as_html(text: str) -> str:
    return render_template("demo/markdown.html", text=text)


def render_demo_content(demo_type: str, code: str) -> str:
    if demo_type == "python":
        return wrap_python_as_html(code)
    if demo_type == "markdown":
        return wrap_markdown_as_html(code)
    return code
