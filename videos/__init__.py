"""
Vimeo MCP Lite - Video Operations Module
========================================

Video capabilities:
- Listing and searching videos as minimal records
- Fetching single-video details
- Updating title, description and tags
"""

from .video_manager import VideoManager
from .video_updater import VideoUpdater

__all__ = [
    'VideoManager',
    'VideoUpdater',
]
