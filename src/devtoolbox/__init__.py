"""DevToolbox - developer utilities behind a pluggable tool registry."""

__version__ = "0.1.0"

from devtoolbox.exceptions import ToolInputError, UnknownActionError

__all__ = ["__version__", "ToolInputError", "UnknownActionError"]
