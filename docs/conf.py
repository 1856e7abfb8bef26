"""Sphinx configuration for charsetutil documentation."""

import charsetutil

project = "charsetutil"
copyright = "2025, charsetutil contributors"
author = "charsetutil contributors"
release = charsetutil.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

autosummary_generate = True

templates_path = ["_templates"]
exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "chardet": ("https://chardet.readthedocs.io/en/latest", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
