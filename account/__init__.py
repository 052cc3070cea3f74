"""
Vimeo MCP Lite - Account Module
===============================

Account-level summaries (video/folder counts, storage quota).
"""

from .account_stats import AccountStats, bytes_to_gb

__all__ = [
    'AccountStats',
    'bytes_to_gb',
]
