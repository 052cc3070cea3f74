#!/usr/bin/env python3
"""
Minimal-shape extractors for Vimeo MCP Lite
Reduce verbose Vimeo resources to the few fields an AI agent needs
"""

from typing import Any, Dict, Optional

UNTITLED = "Untitled"


def _block(resource: Optional[Dict[str, Any]], key: str) -> Dict[str, Any]:
    """Return a nested object, or {} when it is missing or not an object"""
    if not isinstance(resource, dict):
        return {}
    value = resource.get(key)
    return value if isinstance(value, dict) else {}


def uri_tail(uri: Optional[str]) -> str:
    """
    Derive an identifier from a resource URI

    "/videos/123456" -> "123456", "/users/1/projects/789" -> "789".
    Missing or empty URIs give "".
    """
    if not uri or not isinstance(uri, str):
        return ""
    return uri.rstrip("/").split("/")[-1]


def iso_date(timestamp: Optional[str]) -> str:
    """Truncate an ISO 8601 timestamp to its calendar date"""
    if not timestamp or not isinstance(timestamp, str):
        return ""
    return timestamp.split("T")[0]


def _as_int(value: Any) -> int:
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def to_minimal_video(video: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Map a Vimeo video resource to {id, name, duration, created, folder?}

    The folder key is only present when the resource embeds a named
    parent folder.
    """
    video = video if isinstance(video, dict) else {}

    minimal = {
        "id": uri_tail(video.get("uri")),
        "name": video.get("name") or UNTITLED,
        "duration": _as_int(video.get("duration")),
        "created": iso_date(video.get("created_time")),
    }

    folder_name = _block(video, "parent_folder").get("name")
    if folder_name:
        minimal["folder"] = folder_name

    return minimal


def to_minimal_folder(folder: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Map a Vimeo project (folder) resource to {id, name, video_count}"""
    folder = folder if isinstance(folder, dict) else {}
    videos = _block(_block(_block(folder, "metadata"), "connections"), "videos")

    return {
        "id": uri_tail(folder.get("uri")),
        "name": folder.get("name") or UNTITLED,
        "video_count": _as_int(videos.get("total")),
    }


def connection_total(resource: Optional[Dict[str, Any]], connection: str = "videos") -> int:
    """Read metadata.connections.<connection>.total, defaulting to 0"""
    counted = _block(_block(_block(resource, "metadata"), "connections"), connection)
    return _as_int(counted.get("total"))
