import os
import sys

sys.path.insert(0, os.path.abspath("../src"))

# Sphinx configuration, see
# https://www.sphinx-doc.org/en/master/usage/configuration.html

project = "credential-guard"
copyright = "2024, credential-guard authors"
author = "credential-guard authors"
release = "0.1.0"

suppress_warnings = ["autosectionlabel.*"]

extensions = [
    "sphinx.ext.napoleon",
    "sphinx.ext.autodoc",
    "sphinx.ext.autosectionlabel",
    "sphinx_click",
]

autodoc_member_order = "bysource"
autodoc_mock_imports = ["ruamel"]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "furo"
html_title = f"{project} documentation v{release}"
htmlhelp_basename = "credential-guard-doc"
