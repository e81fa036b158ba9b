"""Pydantic configuration models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    """How failed matches are rendered."""

    stderr: bool = True
    max_repr_length: int = Field(default=200, ge=20)
    show_snapshots: bool = True
    title: str = "Pattern match failed"


class DecodeConfig(BaseModel):
    """How JSON documents are turned into values before matching."""

    decimals: bool = False
    datetimes: bool = False
    markers: bool = True
