"""
Load dynamic folder exports from JSON.

The loader is lenient on syntax and strict on schema: comments and trailing
commas are accepted, everything else must be standard JSON. Unknown fields,
wrong value types and documents nested deeper than MAX_DEPTH levels are
rejected with SchemaError.
"""

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, BinaryIO

from jsonschema import ValidationError, validate

from rdfe2rdfx.exceptions import SchemaError
from rdfe2rdfx.models import Export
from rdfe2rdfx.schema import EXPORT_SCHEMA

logger = logging.getLogger(__name__)

# Root object counts as depth 1
MAX_DEPTH = 8

JSON_WHITESPACE = " \t\r\n"


def nesting_depth(value: Any) -> int:
    """
    Compute the container nesting depth of a parsed JSON value.

    Scalars have depth 0, an empty object or array has depth 1, and each
    level of nested containers adds one.

    Args:
        value: Parsed JSON value

    Returns:
        Maximum nesting depth

    Example:
        >>> nesting_depth({"Objects": [{"Name": "a"}]})
        3
    """
    deepest = 0
    stack: list[tuple[Any, int]] = [(value, 1)]
    while stack:
        current, depth = stack.pop()
        if isinstance(current, dict):
            children: Iterable[Any] = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in children)
    return deepest


def _string_end(text: str, start: int) -> int:
    # text[start] is the opening quote of a JSON string literal
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
        elif text[i] == '"':
            return i + 1
        else:
            i += 1
    return len(text)


def strip_comments(text: str) -> str:
    """
    Remove // line comments and /* block comments */ outside string literals.

    Args:
        text: JSON text that may contain comments

    Returns:
        The text with every comment removed

    Raises:
        ValueError: If a block comment is never closed
    """
    out = []
    i = 0
    while i < len(text):
        if text[i] == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
        elif text.startswith("//", i):
            end = text.find("\n", i)
            i = len(text) if end == -1 else end
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            if end == -1:
                raise ValueError(f"Unterminated comment: char {i}")
            out.append(" ")
            i = end + 2
        else:
            out.append(text[i])
            i += 1
    return "".join(out)


def strip_trailing_commas(text: str) -> str:
    """
    Remove a single comma that directly precedes a closing } or ].

    Only a comma following a value is dropped, so "[,]" and "[1,,]" remain
    invalid. The text must already be free of comments.
    """
    out = []
    last = ""
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            last = '"'
            i = end
            continue
        if ch == ",":
            j = i + 1
            while j < len(text) and text[j] in JSON_WHITESPACE:
                j += 1
            if j < len(text) and text[j] in "}]" and last not in ("", "[", "{", ","):
                i += 1
                continue
        out.append(ch)
        if ch not in JSON_WHITESPACE:
            last = ch
        i += 1
    return "".join(out)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _format_json_path(path: Iterable[Any]) -> str:
    result = "$"
    for part in path:
        if isinstance(part, int):
            result += f"[{part}]"
        else:
            result += f".{part}"
    return result


def _parse(data: bytes, source: str | None) -> Any:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SchemaError(f"input is not valid UTF-8 ({e.reason})", source) from e

    try:
        return json.loads(
            strip_trailing_commas(strip_comments(text)), parse_constant=_reject_constant
        )
    except RecursionError as e:
        raise SchemaError(
            f"document exceeds the maximum nesting depth of {MAX_DEPTH}", source
        ) from e
    except ValueError as e:
        raise SchemaError(f"malformed JSON: {e}", source) from e


def load(stream: BinaryIO, source: str | None = None) -> Export:
    """
    Read a JSON export from a byte stream and build the export tree.

    The stream is read to completion before any validation happens.

    Args:
        stream: Readable binary stream containing the JSON document
        source: Optional name of the stream (e.g. file path) for error messages

    Returns:
        Immutable Export tree

    Raises:
        SchemaError: If the input is not well-formed JSON, contains a field not
            present in the export schema, or is nested deeper than MAX_DEPTH
    """
    document = _parse(stream.read(), source)

    depth = nesting_depth(document)
    if depth > MAX_DEPTH:
        raise SchemaError(
            f"document nesting depth {depth} exceeds the maximum of {MAX_DEPTH}", source
        )

    try:
        validate(instance=document, schema=EXPORT_SCHEMA)
    except ValidationError as e:
        raise SchemaError(e.message, source, _format_json_path(e.absolute_path)) from e

    export = Export.from_dict(document)
    logger.debug(f"Loaded export {export.name!r} with {len(export.objects)} object(s)")
    return export


def load_file(path: str | Path) -> Export:
    """
    Load a JSON export from a file.

    Args:
        path: Path to the .rdfe file

    Returns:
        Immutable Export tree

    Raises:
        SchemaError: If the file content is not a valid export
        OSError: If the file cannot be read
    """
    with open(path, "rb") as f:
        return load(f, source=str(path))
