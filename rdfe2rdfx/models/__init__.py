"""
Data models for dynamic folder exports.

This package contains the immutable in-memory tree produced by the loader
and consumed by the emitter.

Modules:
- export: Export, ExportObject and CustomProperty dataclasses
"""

from rdfe2rdfx.models.export import CustomProperty, Export, ExportObject

__all__ = ["CustomProperty", "Export", "ExportObject"]
