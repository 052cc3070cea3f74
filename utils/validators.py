#!/usr/bin/env python3
"""
Input validation for Vimeo MCP Lite
Validates and normalizes tool arguments before they reach the Vimeo API
"""

import re
import logging
from typing import Any, List, Optional
from urllib.parse import urlparse

from config import ValidationConfig

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Custom exception for validation errors"""
    pass


class InputValidator:
    """Validates and sanitizes user inputs"""

    def __init__(self, validation_config: Optional[ValidationConfig] = None):
        """Initialize validator with config"""
        settings = validation_config or ValidationConfig()
        self.default_page = settings.default_page
        self.max_per_page = settings.max_per_page
        self.max_query_length = settings.max_query_length
        self.max_folder_name_length = settings.max_folder_name_length

    def validate_resource_id(self, value: Any, label: str = "Video ID") -> str:
        """
        Validate a Vimeo video or folder ID

        Accepts the bare numeric ID, a resource URI ("/videos/123",
        "/users/1/projects/789") or a vimeo.com URL. For URLs the first
        all-digit path segment is the ID, so the hash of an unlisted
        link ("https://vimeo.com/123/abcdef") is ignored.

        Raises:
            ValidationError: If the ID is missing or malformed
        """
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)

        if not value or not isinstance(value, str):
            raise ValidationError(f"{label} is required")

        value = value.strip()
        segments = [s for s in urlparse(value).path.split("/") if s]
        candidate = None

        if "/" not in value:
            candidate = value
        else:
            for marker in ("videos", "projects"):
                if marker in segments:
                    index = len(segments) - 1 - segments[::-1].index(marker)
                    if index + 1 < len(segments):
                        candidate = segments[index + 1]
                    break
            if candidate is None:
                candidate = next((s for s in segments if s.isdigit()), None)

        if not candidate or not re.match(r'^[0-9]+$', candidate):
            raise ValidationError(
                f"Invalid {label}: {value[:50]}. Expected a Vimeo ID such as 123456789"
            )

        return candidate

    def validate_page(self, page: Any) -> int:
        """
        Validate page number

        Missing or zero pages fall back to the first page.

        Raises:
            ValidationError: If page is not a number
        """
        if page is None or page == "":
            return self.default_page

        try:
            page = int(page)
        except (TypeError, ValueError):
            raise ValidationError(f"page must be a number, got: {type(page).__name__}")

        if page < 1:
            return self.default_page

        return page

    def validate_per_page(self, per_page: Any, default: int) -> int:
        """
        Validate per_page parameter

        Missing values use the operation's default; values above the
        Vimeo limit are capped rather than rejected.

        Raises:
            ValidationError: If per_page is not a number
        """
        if per_page is None or per_page == "":
            return default

        try:
            per_page = int(per_page)
        except (TypeError, ValueError):
            raise ValidationError(
                f"per_page must be a number, got: {type(per_page).__name__}"
            )

        if per_page < 1:
            return default

        if per_page > self.max_per_page:
            logger.warning(
                f"per_page {per_page} exceeds limit {self.max_per_page}, capping to {self.max_per_page}"
            )
            per_page = self.max_per_page

        return per_page

    def validate_search_query(self, query: Any, required: bool = True) -> Optional[str]:
        """
        Validate search query

        Raises:
            ValidationError: If a required query is missing or too long
        """
        if query is None or (isinstance(query, str) and not query.strip()):
            if required:
                raise ValidationError("Search query is required")
            return None

        if not isinstance(query, str):
            raise ValidationError("Search query must be a string")

        query = query.strip()

        if len(query) > self.max_query_length:
            raise ValidationError(
                f"Search query too long (max {self.max_query_length} characters)"
            )

        return query

    def validate_folder_name(self, name: Any) -> str:
        """Validate folder name"""
        if not name or not isinstance(name, str) or not name.strip():
            raise ValidationError("Folder name is required")

        name = name.strip()

        if len(name) > self.max_folder_name_length:
            raise ValidationError(
                f"Folder name too long (max {self.max_folder_name_length} characters)"
            )

        return name

    def validate_tags(self, tags: Any) -> List[str]:
        """
        Validate tag list

        Blank tags are dropped; non-string entries are rejected.
        """
        if not isinstance(tags, list):
            raise ValidationError("Tags must be a list of strings")

        validated_tags = []
        for tag in tags:
            if not isinstance(tag, str):
                raise ValidationError("Tags must be a list of strings")
            tag = tag.strip()
            if tag:
                validated_tags.append(tag)

        return validated_tags


# Global validator instance
validator = InputValidator()


# Convenience functions for easy import
def validate_video_id(video_id: Any) -> str:
    """Validate video ID"""
    return validator.validate_resource_id(video_id, "Video ID")


def validate_folder_id(folder_id: Any) -> str:
    """Validate folder ID"""
    return validator.validate_resource_id(folder_id, "Folder ID")


def validate_page(page: Any) -> int:
    """Validate page number"""
    return validator.validate_page(page)


def validate_per_page(per_page: Any, default: int) -> int:
    """Validate results per page"""
    return validator.validate_per_page(per_page, default)


def validate_search_query(query: Any, required: bool = True) -> Optional[str]:
    """Validate search query"""
    return validator.validate_search_query(query, required)


def validate_folder_name(name: Any) -> str:
    """Validate folder name"""
    return validator.validate_folder_name(name)


def validate_tags(tags: Any) -> List[str]:
    """Validate tags"""
    return validator.validate_tags(tags)
