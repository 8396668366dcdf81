"""Command-line interface for todogist."""

from __future__ import annotations

from todogist.cli.app import main as main
from todogist.cli.parser import build_parser as build_parser

__all__ = ["build_parser", "main"]
