"""
Vimeo MCP Lite - Folder Operations Module
=========================================

Folder (Vimeo "project") capabilities:
- Listing all folders with video counts
- Paging through the videos of one folder
- Creating folders
- Moving videos into folders
"""

from .folder_manager import FolderManager
from .folder_organizer import FolderOrganizer

__all__ = [
    'FolderManager',
    'FolderOrganizer',
]
