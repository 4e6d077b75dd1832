"""
Tests for configuration loading.
"""

import pytest

from rdfe2rdfx.config import DEFAULT_CONFIG, ConverterConfig, load_config, validate_config
from rdfe2rdfx.exceptions import InvalidConfigError, UsageError


def test_defaults():
    """Test default settings match the standard extensions"""
    config = load_config(None)

    assert config == ConverterConfig()
    assert config.input_extension == ".rdfe"
    assert config.output_extension == ".rdfx"
    assert config.continue_on_error is False
    assert config.log_level == "WARNING"


def test_default_config_is_valid():
    validate_config(DEFAULT_CONFIG)


def test_load_full_config(tmp_path):
    """Test loading every supported key"""
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text(
        "conversion:\n"
        "  input_extension: .json\n"
        "  output_extension: .xml\n"
        "  continue_on_error: true\n"
        "logging:\n"
        "  level: DEBUG\n"
    )

    config = load_config(config_file)

    assert config.input_extension == ".json"
    assert config.output_extension == ".xml"
    assert config.continue_on_error is True
    assert config.log_level == "DEBUG"


def test_partial_config_keeps_defaults(tmp_path):
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text("conversion:\n  continue_on_error: true\n")

    config = load_config(config_file)

    assert config.continue_on_error is True
    assert config.input_extension == ".rdfe"
    assert config.log_level == "WARNING"


def test_empty_config_file(tmp_path):
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text("")

    assert load_config(config_file) == ConverterConfig()


def test_unknown_key_rejected(tmp_path):
    """Test that unknown configuration keys are rejected"""
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text("conversion:\n  recursive: false\n")

    with pytest.raises(InvalidConfigError, match="recursive"):
        load_config(config_file)


def test_extension_needs_leading_dot(tmp_path):
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text("conversion:\n  output_extension: xml\n")

    with pytest.raises(InvalidConfigError):
        load_config(config_file)


def test_same_extensions_rejected():
    with pytest.raises(InvalidConfigError, match="must differ"):
        ConverterConfig.from_dict({"conversion": {"output_extension": ".rdfe"}})


def test_invalid_log_level(tmp_path):
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text("logging:\n  level: LOUD\n")

    with pytest.raises(InvalidConfigError):
        load_config(config_file)


def test_invalid_yaml(tmp_path):
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text("conversion: [unclosed\n")

    with pytest.raises(InvalidConfigError, match="invalid YAML"):
        load_config(config_file)


def test_not_a_mapping(tmp_path):
    config_file = tmp_path / "rdfe2rdfx.yaml"
    config_file.write_text("- just\n- a list\n")

    with pytest.raises(InvalidConfigError, match="expected a mapping"):
        load_config(config_file)


def test_missing_config_file(tmp_path):
    """Test that a missing config file is a usage error"""
    with pytest.raises(UsageError):
        load_config(tmp_path / "missing.yaml")
