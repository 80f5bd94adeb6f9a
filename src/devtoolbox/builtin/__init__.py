"""Tools shipped with DevToolbox."""

from devtoolbox.builtin.base64_encoder import Base64EncoderTool
from devtoolbox.builtin.date_converter import DateConverterTool
from devtoolbox.builtin.json_formatter import JSONFormatterTool
from devtoolbox.builtin.markdown_preview import MarkdownPreviewTool
from devtoolbox.builtin.qr_code import QRCodeTool
from devtoolbox.tools.base import BaseToolProvider


def builtin_providers(disabled: frozenset[str] | set[str] = frozenset()) -> list[BaseToolProvider]:
    """Built-in tools in navigation order, minus any disabled ids."""
    providers: list[BaseToolProvider] = [
        DateConverterTool(),
        JSONFormatterTool(),
        MarkdownPreviewTool(),
        Base64EncoderTool(),
        QRCodeTool(),
    ]
    return [p for p in providers if p.descriptor().id not in disabled]


__all__ = [
    "Base64EncoderTool",
    "builtin_providers",
    "DateConverterTool",
    "JSONFormatterTool",
    "MarkdownPreviewTool",
    "QRCodeTool",
]
