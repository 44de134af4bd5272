"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, domblock.toml only contains
overrides. An empty (or absent) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from domblock.domain.names import EmptyLabelPolicy


class NormalizeConfig(BaseModel):
    """[normalize] section."""

    model_config = {"frozen": True}

    empty_labels: EmptyLabelPolicy = EmptyLabelPolicy.REJECT


class BlocklistConfig(BaseModel):
    """[blocklist] section: block-list file parsing for ``lookup``."""

    model_config = {"frozen": True}

    comment_prefix: str = "#"

