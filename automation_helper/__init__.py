"""Automation Helper CLI: ABB RAPID reference lookup, sensor snippets and an AI assistant."""

__version__ = "0.1.0"
