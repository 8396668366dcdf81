"""Gist publishing contracts."""

from __future__ import annotations

from pydantic import BaseModel


class GistFile(BaseModel):
    filename: str
    content: str
