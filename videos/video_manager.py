"""
Vimeo MCP Lite - Video Manager
==============================

Read-side video operations with token-economical output:
- Listing videos, optionally scoped to a folder or filtered by name
- Searching videos by name
- Fetching one video's details
"""

from typing import Dict, Any, Optional
from urllib.parse import urlencode
import logging

from vimeo_client import VimeoClient, VimeoResponse
from utils import (
    iso_date,
    to_minimal_video,
    validate_folder_id,
    validate_page,
    validate_per_page,
    validate_search_query,
    validate_video_id
)

logger = logging.getLogger(__name__)

LIST_PER_PAGE = 50
SEARCH_PER_PAGE = 25
DESCRIPTION_PREVIEW_LENGTH = 500

LIST_FIELDS = "uri,name,duration,created_time,parent_folder"
FOLDER_LIST_FIELDS = "uri,name,duration,created_time"
DETAIL_FIELDS = "uri,name,description,duration,created_time,parent_folder,tags,privacy,link"


class VideoManager:
    """
    Lists, searches and describes videos.

    Results are reduced to minimal records before they are returned.
    """

    def __init__(self, client: VimeoClient, description_length: int = DESCRIPTION_PREVIEW_LENGTH):
        """
        Initialize VideoManager.

        Args:
            client: Vimeo API client
            description_length: Characters of description kept by get_video
        """
        self.client = client
        self.description_length = description_length
        logger.info("VideoManager initialized")

    @staticmethod
    def _page_of_videos(res: VimeoResponse) -> Dict[str, Any]:
        items = res.data.get("data")
        videos = [to_minimal_video(v) for v in items] if isinstance(items, list) else []
        total = res.data.get("total") or len(videos)
        return {"total": total, "videos": videos}

    async def list_videos(
        self,
        folder_id: Optional[str] = None,
        search: Optional[str] = None,
        page: int = 1,
        per_page: int = LIST_PER_PAGE
    ) -> Dict[str, Any]:
        """
        List one page of videos.

        Args:
            folder_id: Restrict to this folder (optional)
            search: Name filter (optional)
            page: Page number (default 1)
            per_page: Results per page (default 50, max 100)

        Returns:
            {total, page, per_page, videos} or {error, status}
        """
        page = validate_page(page)
        per_page = validate_per_page(per_page, LIST_PER_PAGE)
        search = validate_search_query(search, required=False)

        params: Dict[str, Any] = {"per_page": per_page, "page": page}

        if folder_id:
            folder_id = validate_folder_id(folder_id)
            params["fields"] = FOLDER_LIST_FIELDS
            endpoint = f"/me/projects/{folder_id}/videos"
        else:
            params["fields"] = LIST_FIELDS
            endpoint = "/me/videos"

        if search:
            params["query"] = search

        logger.info(f"Listing videos (folder={folder_id}, search={search!r}, page={page})")
        res = await self.client.request(f"{endpoint}?{urlencode(params)}")

        if res.status != 200:
            return {"error": "Failed to fetch videos", "status": res.status}

        listing = self._page_of_videos(res)
        return {
            "total": listing["total"],
            "page": page,
            "per_page": per_page,
            "videos": listing["videos"],
        }

    async def search_videos(
        self,
        query: str,
        page: int = 1,
        per_page: int = SEARCH_PER_PAGE
    ) -> Dict[str, Any]:
        """
        Search the account's videos by name.

        Returns:
            {query, total, page, per_page, videos} or {error, status}
        """
        query = validate_search_query(query)
        page = validate_page(page)
        per_page = validate_per_page(per_page, SEARCH_PER_PAGE)

        params = {
            "query": query,
            "per_page": per_page,
            "page": page,
            "fields": LIST_FIELDS,
        }

        logger.info(f"Searching videos: '{query}' (page={page}, per_page={per_page})")
        res = await self.client.request(f"/me/videos?{urlencode(params)}")

        if res.status != 200:
            return {"error": "Search failed", "status": res.status}

        listing = self._page_of_videos(res)
        return {
            "query": query,
            "total": listing["total"],
            "page": page,
            "per_page": per_page,
            "videos": listing["videos"],
        }

    async def get_video(self, video_id: str) -> Dict[str, Any]:
        """
        Get details for one video.

        The description is cut to its first 500 characters and tags are
        reduced to their names.

        Returns:
            {id, name, description, duration, created, folder, tags, privacy, link}
            or {error: "Video not found", status}
        """
        video_id = validate_video_id(video_id)

        res = await self.client.request(f"/videos/{video_id}?{urlencode({'fields': DETAIL_FIELDS})}")

        if res.status != 200:
            return {"error": "Video not found", "status": res.status}

        v = res.data
        parent_folder = v.get("parent_folder") or {}
        privacy = v.get("privacy") or {}
        tags = v.get("tags") or []
        description = v.get("description")

        return {
            "id": video_id,
            "name": v.get("name"),
            "description": description[:self.description_length] if isinstance(description, str) else "",
            "duration": v.get("duration"),
            "created": iso_date(v.get("created_time")) or None,
            "folder": parent_folder.get("name") if isinstance(parent_folder, dict) else None,
            "tags": [t.get("name") for t in tags if isinstance(t, dict) and t.get("name")],
            "privacy": privacy.get("view") if isinstance(privacy, dict) else None,
            "link": v.get("link"),
        }
