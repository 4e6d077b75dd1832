"""
rdfe2rdfx: dynamic folder export converter.

Converts dynamic folder exports from their JSON form (.rdfe) into the
equivalent XML form (.rdfx), one file at a time or recursively over a
directory tree, writing each result side-by-side with its source.

Main features:
- Strict schema validation of the JSON export (unknown fields are rejected)
- Deterministic XML output with a fixed element order
- CDATA sections for multi-line values such as script bodies
- Optional YAML configuration for extensions and batch behaviour
"""

__version__ = "1.0.0"
