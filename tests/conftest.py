"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path

import pytest

from rdfe2rdfx.models import CustomProperty, Export, ExportObject


@pytest.fixture
def sample_document():
    """Return a JSON-ready export document with one object and one property."""
    return {
        "Name": "Folder1",
        "Objects": [
            {
                "Type": "Job",
                "Name": "N1",
                "CustomProperties": [
                    {"Name": "P1", "Type": "string", "Value": "line1\nline2"},
                ],
            }
        ],
    }


@pytest.fixture
def sample_export():
    """Return a fully populated export tree."""
    return Export(
        name="Servers",
        objects=(
            ExportObject(
                type="Credential",
                name="Domain Admin",
                description="Shared admin account",
                notes="",
                custom_properties=(
                    CustomProperty(name="Owner", type="Text", value="ops"),
                    CustomProperty(name="Tags", type="Text", value="a\nb"),
                ),
                script="Write-Output 'hello'\nexit 0",
                script_interpreter="powershell",
                dynamic_credential_script=None,
                dynamic_credential_script_interpreter="json",
            ),
            ExportObject(type="Folder", name="Empty"),
        ),
    )


@pytest.fixture
def write_export(tmp_path):
    """Return a helper that writes a document (dict or raw text) to an .rdfe file."""

    def _write(relative: str, document) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
