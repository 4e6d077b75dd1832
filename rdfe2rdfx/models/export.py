"""Dataclasses for the dynamic folder export tree.

An export is a strict tree: one Export owns its ExportObjects in source order,
and each ExportObject owns its CustomProperties in source order. Every string
field is optional; None means the field was absent (or null) in the source.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CustomProperty:
    """One named, typed, valued metadata entry attached to an object."""

    name: str | None = None
    type: str | None = None
    value: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CustomProperty":
        return cls(
            name=data.get("Name"),
            type=data.get("Type"),
            value=data.get("Value"),
        )


@dataclass(frozen=True)
class ExportObject:
    """One item of a dynamic folder, carrying scripts and custom metadata."""

    type: str | None = None
    name: str | None = None
    description: str | None = None
    notes: str | None = None
    custom_properties: tuple[CustomProperty, ...] = field(default_factory=tuple)
    script: str | None = None
    script_interpreter: str | None = None
    dynamic_credential_script: str | None = None
    dynamic_credential_script_interpreter: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExportObject":
        return cls(
            type=data.get("Type"),
            name=data.get("Name"),
            description=data.get("Description"),
            notes=data.get("Notes"),
            custom_properties=tuple(
                CustomProperty.from_dict(prop) for prop in data.get("CustomProperties") or []
            ),
            script=data.get("Script"),
            script_interpreter=data.get("ScriptInterpreter"),
            dynamic_credential_script=data.get("DynamicCredentialScript"),
            dynamic_credential_script_interpreter=data.get("DynamicCredentialScriptInterpreter"),
        )


@dataclass(frozen=True)
class Export:
    """Root of a dynamic folder export.

    The order of ``objects`` is the order they appeared in the source document
    and determines the order of the emitted XML.
    """

    name: str | None = None
    objects: tuple[ExportObject, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Export":
        """
        Build an export tree from a schema-validated JSON document.

        Args:
            data: Parsed JSON root object, already validated against EXPORT_SCHEMA

        Returns:
            Immutable Export tree
        """
        return cls(
            name=data.get("Name"),
            objects=tuple(ExportObject.from_dict(obj) for obj in data.get("Objects") or []),
        )
