"""Output formatters."""
from .console import ConsoleFormatter
from .json_out import JSONFormatter
from .markdown import MarkdownFormatter

__all__ = ["ConsoleFormatter", "JSONFormatter", "MarkdownFormatter"]
