"""
Emit dynamic folder exports as XML.

The XML layout is fixed: element names and their order are what downstream
consumers key on, so the traversal is driven by explicit, ordered field
tables rather than by introspecting the dataclasses.
"""

import logging
from collections.abc import Callable
from operator import attrgetter
from typing import BinaryIO

from lxml import etree

from rdfe2rdfx.exceptions import WriteError
from rdfe2rdfx.models import CustomProperty, Export, ExportObject
from rdfe2rdfx.util.text import needs_cdata

logger = logging.getLogger(__name__)

INDENT = "    "

ROOT_ELEMENT = "DynamicFolderExport"
OBJECT_ELEMENT = "DynamicFolderExportObject"
PROPERTY_ELEMENT = "CustomProperty"

# (element name, accessor) pairs, in output order
FieldTable = list[tuple[str, Callable]]

EXPORT_FIELDS: FieldTable = [
    ("Name", attrgetter("name")),
]

OBJECT_HEADER_FIELDS: FieldTable = [
    ("Type", attrgetter("type")),
    ("Name", attrgetter("name")),
    ("Description", attrgetter("description")),
    ("Notes", attrgetter("notes")),
]

OBJECT_SCRIPT_FIELDS: FieldTable = [
    ("ScriptInterpreter", attrgetter("script_interpreter")),
    ("Script", attrgetter("script")),
    ("DynamicCredentialScriptInterpreter", attrgetter("dynamic_credential_script_interpreter")),
    ("DynamicCredentialScript", attrgetter("dynamic_credential_script")),
]

# CustomProperties sits between the header and script fields
OBJECT_FIELDS: FieldTable = OBJECT_HEADER_FIELDS + OBJECT_SCRIPT_FIELDS

PROPERTY_FIELDS: FieldTable = [
    ("Name", attrgetter("name")),
    ("Type", attrgetter("type")),
    ("Value", attrgetter("value")),
]


def write_string_value(parent: etree._Element, name: str, value: str | None) -> etree._Element:
    """
    Append a child element holding an optional string value.

    Absent and empty values give an empty element, single-line values give
    plain (escaped) text, and multi-line values give a CDATA section. A "]]>"
    inside a multi-line value is split across adjacent CDATA sections by lxml.

    Args:
        parent: Element to append to
        name: Child element name
        value: String value, or None when absent

    Returns:
        The new child element

    Raises:
        WriteError: If the value cannot be represented in XML
    """
    child = etree.SubElement(parent, name)
    try:
        if needs_cdata(value):
            child.text = etree.CDATA(value)
        else:
            child.text = value
    except ValueError as e:
        raise WriteError(f"value of <{name}> cannot be represented in XML: {e}") from e
    return child


def _write_fields(parent: etree._Element, fields: FieldTable, source: object) -> None:
    for name, accessor in fields:
        write_string_value(parent, name, accessor(source))


def _build_property(parent: etree._Element, prop: CustomProperty) -> None:
    element = etree.SubElement(parent, PROPERTY_ELEMENT)
    _write_fields(element, PROPERTY_FIELDS, prop)


def _build_object(parent: etree._Element, obj: ExportObject) -> None:
    element = etree.SubElement(parent, OBJECT_ELEMENT)
    _write_fields(element, OBJECT_HEADER_FIELDS, obj)

    properties = etree.SubElement(element, "CustomProperties")
    for prop in obj.custom_properties:
        _build_property(properties, prop)

    _write_fields(element, OBJECT_SCRIPT_FIELDS, obj)


def build_element(export: Export) -> etree._Element:
    """
    Build the XML element tree for an export.

    Args:
        export: Export tree to convert

    Returns:
        Root <DynamicFolderExport> element, indented with four spaces

    Raises:
        WriteError: If a value cannot be represented in XML
    """
    root = etree.Element(ROOT_ELEMENT)
    _write_fields(root, EXPORT_FIELDS, export)

    objects = etree.SubElement(root, "Objects")
    for obj in export.objects:
        _build_object(objects, obj)

    etree.indent(root, space=INDENT)
    return root


def emit(export: Export, stream: BinaryIO) -> None:
    """
    Write an export as a UTF-8 XML fragment.

    No XML declaration is written; the output is meant to be embedded.
    Newlines inside values are written unchanged.

    Args:
        export: Export tree to convert
        stream: Writable binary stream

    Raises:
        WriteError: If a value cannot be represented or the stream cannot be written
    """
    root = build_element(export)
    data = etree.tostring(root, encoding="utf-8", xml_declaration=False)

    try:
        stream.write(data)
        stream.flush()
    except OSError as e:
        raise WriteError(str(e), getattr(stream, "name", None)) from e

    logger.debug(f"Wrote {len(data)} bytes for {len(export.objects)} object(s)")
