"""File-level services: pattern matching and per-file inspection."""

from opinionated_usings.service.file_scan import FileScanner, match_files

__all__ = [
    "FileScanner",
    "match_files",
]
