"""
Vimeo MCP Lite - Folder Manager
===============================

Read-side folder operations: listing every folder and paging through
the videos of one folder. Vimeo calls folders "projects".
"""

from typing import Dict, Any, List
from urllib.parse import urlencode
import logging

from vimeo_client import VimeoClient
from utils import (
    to_minimal_folder,
    to_minimal_video,
    connection_total,
    validate_folder_id,
    validate_page,
    validate_per_page
)

logger = logging.getLogger(__name__)

FOLDER_PAGE_SIZE = 100
DEFAULT_PER_PAGE = 50
FOLDER_VIDEO_FIELDS = "uri,name,duration,created_time"


class FolderManager:
    """
    Lists folders and folder contents.

    Every call re-fetches from Vimeo; nothing is cached between calls.
    """

    def __init__(self, client: VimeoClient, max_pages: int = 50):
        """
        Initialize FolderManager.

        Args:
            client: Vimeo API client
            max_pages: Upper bound on pages fetched by list_folders
        """
        self.client = client
        self.max_pages = max_pages
        logger.info("FolderManager initialized")

    async def list_folders(self) -> Dict[str, Any]:
        """
        List all folders with their video counts.

        Pages of 100 are fetched until a short page arrives. A failed page
        or hitting the page ceiling stops the loop early; the folders
        collected so far are returned with ``truncated: True``.

        Returns:
            {total, folders: [{id, name, video_count}], truncated?}
        """
        folders: List[Dict[str, Any]] = []
        truncated = False
        page = 1

        while True:
            if page > self.max_pages:
                logger.warning(
                    f"⚠️  list_folders stopped at page ceiling ({self.max_pages}); result truncated"
                )
                truncated = True
                break

            query = urlencode({"per_page": FOLDER_PAGE_SIZE, "page": page})
            res = await self.client.request(f"/me/projects?{query}")
            items = res.data.get("data")

            if res.status != 200 or not isinstance(items, list):
                logger.warning(
                    f"⚠️  list_folders page {page} failed (status {res.status}); result truncated"
                )
                truncated = True
                break

            folders.extend(to_minimal_folder(item) for item in items)

            if len(items) < FOLDER_PAGE_SIZE:
                break
            page += 1

        result: Dict[str, Any] = {"total": len(folders), "folders": folders}
        if truncated:
            result["truncated"] = True

        logger.info(f"Listed {len(folders)} folders over {page} page(s)")
        return result

    async def get_folder_videos(
        self,
        folder_id: str,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE
    ) -> Dict[str, Any]:
        """
        Get one page of videos in a folder, with the folder's name and size.

        A failed metadata fetch degrades the folder name to "Unknown";
        a failed video fetch is reported as an error.

        Returns:
            {folder, total, page, per_page, videos: [{id, name, duration, created}]}
        """
        folder_id = validate_folder_id(folder_id)
        page = validate_page(page)
        per_page = validate_per_page(per_page, DEFAULT_PER_PAGE)

        folder_query = urlencode({"fields": "name,metadata.connections.videos.total"})
        folder_res = await self.client.request(f"/me/projects/{folder_id}?{folder_query}")

        if folder_res.status == 200:
            folder_name = folder_res.data.get("name") or "Unknown"
            total_videos = connection_total(folder_res.data)
        else:
            logger.warning(
                f"⚠️  Folder {folder_id} metadata unavailable (status {folder_res.status})"
            )
            folder_name = "Unknown"
            total_videos = 0

        video_query = urlencode({
            "per_page": per_page,
            "page": page,
            "fields": FOLDER_VIDEO_FIELDS,
        })
        res = await self.client.request(f"/me/projects/{folder_id}/videos?{video_query}")

        if res.status != 200:
            return {"error": "Failed to fetch folder videos", "status": res.status}

        items = res.data.get("data")
        videos = [to_minimal_video(v) for v in items] if isinstance(items, list) else []

        return {
            "folder": folder_name,
            "total": total_videos,
            "page": page,
            "per_page": per_page,
            "videos": videos,
        }
