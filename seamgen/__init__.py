"""
seamgen — contract-driven code generation.

Reads seam contracts (YAML) and renders stub, blueprint and test
templates from them.
"""

__version__ = "0.1.0"
