"""
Utility functions and helpers.

This package contains reusable utilities for file discovery, string value
handling, logging and progress display.

Modules:
- files: Extension handling and recursive input discovery
- text: CDATA selection for string values
- logging: Logging configuration
- progress: rich progress bars and summaries
"""
