"""
Review Processing

This module provides exclusion filtering of diff files and the mapping
of model findings onto GitHub review comments.
"""

from .filter import filter_files, parse_exclude_patterns
from .mapper import map_findings

__all__ = ['filter_files', 'parse_exclude_patterns', 'map_findings']
