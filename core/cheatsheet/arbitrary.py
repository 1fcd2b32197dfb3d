"""Property aliases accepted by bracketed arbitrary-value classes."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

ARBITRARY_PROPERTIES: Mapping[str, str] = MappingProxyType(
    {
        "pt": "padding-top",
        "pb": "padding-bottom",
        "pl": "padding-left",
        "pr": "padding-right",
        "p": "padding",
        "mb": "margin-bottom",
        "m": "margin",
        "mt": "margin-top",
        "ml": "margin-left",
        "mr": "margin-right",
        "w": "width",
        "h": "height",
        "top": "top",
        "bottom": "bottom",
        "left": "left",
        "right": "right",
        "bg": "background",
        "border": "border-color",
        "text": "color",
        "aspect": "aspect-ratio",
        "color": "color",
        "max-w": "max-width",
        "max-h": "max-height",
        "min-w": "min-width",
        "min-h": "min-height",
    }
)
