"""
Vimeo MCP Lite - Video Updater
==============================

Partial metadata updates for existing videos. Only the fields the
caller supplies are sent; everything else on the video is untouched.
"""

from typing import Dict, Any, Optional, List
import logging

from vimeo_client import VimeoClient
from utils import validate_tags, validate_video_id

logger = logging.getLogger(__name__)


class VideoUpdater:
    """Updates title, description and tags of a video."""

    def __init__(self, client: VimeoClient):
        """
        Initialize VideoUpdater.

        Args:
            client: Vimeo API client
        """
        self.client = client
        logger.info("VideoUpdater initialized")

    @staticmethod
    def build_update_body(
        name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Build a PATCH body from the supplied fields.

        None means "not supplied" and the key is left out; it is never
        sent as null.
        """
        body: Dict[str, Any] = {}

        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        if tags is not None:
            body["tags"] = validate_tags(tags)

        return body

    async def update_video(
        self,
        video_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        tags: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Update video metadata.

        Returns:
            {success, video_id}; success is True only for status 200
        """
        video_id = validate_video_id(video_id)
        body = self.build_update_body(name=name, description=description, tags=tags)

        logger.info(f"Updating video {video_id}: {', '.join(sorted(body)) or 'no fields'}")

        res = await self.client.request(f"/videos/{video_id}", "PATCH", body)
        success = res.status == 200
        if not success:
            logger.warning(f"⚠️  Update of video {video_id} failed with status {res.status}")

        return {"success": success, "video_id": video_id}
