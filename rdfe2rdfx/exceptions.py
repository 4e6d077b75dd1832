"""
Custom exceptions for rdfe2rdfx with helpful error messages.
"""

# Process exit codes
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_CONVERSION_ERROR = 2


class Rdfe2RdfxError(Exception):
    """Base exception for rdfe2rdfx errors."""

    exit_code = EXIT_CONVERSION_ERROR

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class UsageError(Rdfe2RdfxError):
    """Errors caused by how the tool was invoked."""

    exit_code = EXIT_USAGE_ERROR


class MissingPathError(UsageError):
    """No input path was given on the command line."""

    def __init__(self, input_extension: str = ".rdfe"):
        super().__init__(f"Required <file{input_extension}> or <directory> path not specified")


class InputPathNotFoundError(UsageError):
    """Input file or directory does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Specified path '{path}' not found")


class InvalidExtensionError(UsageError):
    """Input file does not carry the expected extension."""

    def __init__(self, path: str, input_extension: str):
        self.path = path
        super().__init__(f"Input file '{path}' must have {input_extension} extension")


class ConfigurationError(UsageError):
    """Configuration file errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str, config_path: str = None):
        message = f"Invalid configuration file: {error_details}"
        if config_path:
            message = f"Invalid configuration file {config_path}: {error_details}"

        suggestion = (
            "Check the configuration file against the expected layout:\n"
            "  conversion:\n"
            "    input_extension: .rdfe\n"
            "    output_extension: .rdfx\n"
            "    continue_on_error: false\n"
            "  logging:\n"
            "    level: WARNING"
        )
        super().__init__(message, suggestion)


class ConversionError(Rdfe2RdfxError):
    """Errors while converting a single export file."""

    exit_code = EXIT_CONVERSION_ERROR


class SchemaError(ConversionError):
    """Input is not valid JSON or violates the export schema."""

    def __init__(self, error_details: str, source: str = None, json_path: str = None):
        self.error_details = error_details
        self.source = source
        self.json_path = json_path

        message = f"Invalid export: {error_details}"
        if source:
            message = f"Invalid export {source}: {error_details}"
        if json_path:
            message += f"\n  Path: {json_path}"

        suggestion = (
            "The export must be a JSON object with only these fields:\n"
            "  Name, Objects[Type, Name, Description, Notes, CustomProperties[Name, Type, Value],\n"
            "  Script, ScriptInterpreter, DynamicCredentialScript,\n"
            "  DynamicCredentialScriptInterpreter]"
        )
        super().__init__(message, suggestion)


class WriteError(ConversionError):
    """XML output could not be written."""

    def __init__(self, error_details: str, destination: str = None):
        self.error_details = error_details
        self.destination = destination

        message = f"Failed to write XML: {error_details}"
        if destination:
            message = f"Failed to write XML to {destination}: {error_details}"
        super().__init__(message)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for CLI display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string
    """
    if isinstance(error, Rdfe2RdfxError):
        # Custom errors have helpful messages and suggestions
        output = f"[red]Error:[/red] {error.message}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        # Generic errors
        return f"[red]Error:[/red] {str(error)}"
