"""Output publishing."""

from todogist.publishers.document import build_gist_files, render_reports
from todogist.publishers.gist import GistPublisher, build_files_payload

__all__ = ["GistPublisher", "build_files_payload", "build_gist_files", "render_reports"]
