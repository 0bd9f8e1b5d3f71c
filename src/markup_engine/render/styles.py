"""Style configuration for rendered overlays."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

STYLE_ENV_PREFIX = "MARKUP_ENGINE_STYLE_"


@dataclass(frozen=True, slots=True)
class RenderStyles:
    """Rich style strings applied per segment kind."""

    text: str = ""
    heading: str = "bold"
    marker: str = "dim"
    bold: str = "bold"
    italic: str = "italic"
    escape: str = "dim"
    highlight: str = "on grey27"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RenderStyles":
        """Defaults overridden by ``MARKUP_ENGINE_STYLE_<FIELD>`` variables."""

        source = os.environ if environ is None else environ
        overrides = {}
        for item in fields(cls):
            value = source.get(f"{STYLE_ENV_PREFIX}{item.name.upper()}")
            if value is not None:
                overrides[item.name] = value
        return replace(cls(), **overrides)


DEFAULT_STYLES = RenderStyles()

__all__ = ["DEFAULT_STYLES", "RenderStyles", "STYLE_ENV_PREFIX"]
