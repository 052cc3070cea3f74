#!/usr/bin/env python3
"""
Utils package for Vimeo MCP Lite
Provides input validation and minimal-shape extraction utilities
"""

from .validators import (
    validator,
    ValidationError,
    validate_video_id,
    validate_folder_id,
    validate_page,
    validate_per_page,
    validate_search_query,
    validate_folder_name,
    validate_tags
)

from .extractors import (
    UNTITLED,
    uri_tail,
    iso_date,
    to_minimal_video,
    to_minimal_folder,
    connection_total
)

__all__ = [
    # Validators
    'validator',
    'ValidationError',
    'validate_video_id',
    'validate_folder_id',
    'validate_page',
    'validate_per_page',
    'validate_search_query',
    'validate_folder_name',
    'validate_tags',

    # Extractors
    'UNTITLED',
    'uri_tail',
    'iso_date',
    'to_minimal_video',
    'to_minimal_folder',
    'connection_total',
]
