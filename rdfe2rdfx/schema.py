"""
JSON Schema for dynamic folder export documents.

Every object level sets additionalProperties to false so that unknown or
misspelled fields (property names are case-sensitive) are rejected instead of
being silently dropped.
"""

OPTIONAL_STRING = {"type": ["string", "null"]}

CUSTOM_PROPERTY_SCHEMA = {
    "type": "object",
    "properties": {
        "Name": OPTIONAL_STRING,
        "Type": OPTIONAL_STRING,
        "Value": OPTIONAL_STRING,
    },
    "additionalProperties": False,
}

EXPORT_OBJECT_SCHEMA = {
    "type": "object",
    "properties": {
        "Type": OPTIONAL_STRING,
        "Name": OPTIONAL_STRING,
        "Description": OPTIONAL_STRING,
        "Notes": OPTIONAL_STRING,
        "CustomProperties": {"type": "array", "items": CUSTOM_PROPERTY_SCHEMA},
        "Script": OPTIONAL_STRING,
        "ScriptInterpreter": OPTIONAL_STRING,
        "DynamicCredentialScript": OPTIONAL_STRING,
        "DynamicCredentialScriptInterpreter": OPTIONAL_STRING,
    },
    "additionalProperties": False,
}

EXPORT_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Dynamic folder export",
    "type": "object",
    "properties": {
        "Name": OPTIONAL_STRING,
        "Objects": {"type": "array", "items": EXPORT_OBJECT_SCHEMA},
    },
    "additionalProperties": False,
}
