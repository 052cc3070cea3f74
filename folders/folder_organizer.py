"""
Vimeo MCP Lite - Folder Organizer
=================================

Write-side folder operations: creating folders and moving videos
into them.
"""

from typing import Dict, Any
import logging

from vimeo_client import VimeoClient
from utils import (
    uri_tail,
    validate_folder_id,
    validate_folder_name,
    validate_video_id
)

logger = logging.getLogger(__name__)

MOVE_SUCCESS_STATUSES = (200, 201, 204)


class FolderOrganizer:
    """Creates folders and files videos into them."""

    def __init__(self, client: VimeoClient):
        """
        Initialize FolderOrganizer.

        Args:
            client: Vimeo API client
        """
        self.client = client
        logger.info("FolderOrganizer initialized")

    async def move_video(self, video_id: str, folder_id: str) -> Dict[str, Any]:
        """
        Move a video into a folder.

        Upstream failures are reported through the success flag only.

        Returns:
            {success, video_id, folder_id}
        """
        video_id = validate_video_id(video_id)
        folder_id = validate_folder_id(folder_id)

        logger.info(f"Moving video {video_id} to folder {folder_id}")

        res = await self.client.request(
            f"/me/projects/{folder_id}/items",
            "POST",
            {"items": [{"uri": f"/videos/{video_id}"}]}
        )

        success = res.status in MOVE_SUCCESS_STATUSES
        if not success:
            logger.warning(f"⚠️  Move of video {video_id} failed with status {res.status}")

        return {"success": success, "video_id": video_id, "folder_id": folder_id}

    async def create_folder(self, name: str) -> Dict[str, Any]:
        """
        Create a new folder.

        The name is validated but sent and echoed exactly as given.

        Returns:
            {success: True, id, name} on creation, otherwise
            {success: False, error}
        """
        validate_folder_name(name)

        logger.info(f"Creating folder: {name}")

        res = await self.client.request("/me/projects", "POST", {"name": name})
        upstream_error = res.data.get("error")

        if res.status == 201:
            folder_id = uri_tail(res.data.get("uri"))
            logger.info(f"✅ Folder created: {folder_id}")
            return {"success": True, "id": folder_id, "name": name}

        if res.status == 400 and isinstance(upstream_error, str) and "already exists" in upstream_error:
            return {"success": False, "error": "Folder already exists"}

        logger.warning(f"⚠️  Folder creation failed with status {res.status}")
        return {"success": False, "error": upstream_error or "Failed to create folder"}
