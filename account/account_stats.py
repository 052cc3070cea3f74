"""
Vimeo MCP Lite - Account Statistics
===================================

One-call account summary: video count, folder count and upload quota.
"""

import asyncio
from typing import Dict, Any
import logging

from vimeo_client import VimeoClient, VimeoResponse

logger = logging.getLogger(__name__)

BYTES_PER_GB = 1073741824


def bytes_to_gb(value: Any) -> str:
    """Convert a byte count to gigabytes with two decimals ("1.00")"""
    try:
        amount = float(value or 0)
    except (TypeError, ValueError):
        amount = 0.0
    return f"{amount / BYTES_PER_GB:.2f}"


def _total(res: VimeoResponse) -> int:
    try:
        return int(res.data.get("total") or 0)
    except (TypeError, ValueError):
        return 0


class AccountStats:
    """Summarizes the authenticated account."""

    def __init__(self, client: VimeoClient):
        """
        Initialize AccountStats.

        Args:
            client: Vimeo API client
        """
        self.client = client
        logger.info("AccountStats initialized")

    async def get_stats(self) -> Dict[str, Any]:
        """
        Get account statistics.

        The three requests are independent and run concurrently. A failed
        request contributes zero instead of an error.

        Returns:
            {total_videos, total_folders, storage_used_gb, storage_max_gb}
        """
        video_res, folder_res, user_res = await asyncio.gather(
            self.client.request("/me/videos?per_page=1&fields=uri"),
            self.client.request("/me/projects?per_page=1"),
            self.client.request("/me?fields=upload_quota"),
        )

        quota = user_res.data.get("upload_quota") or {}
        space = quota.get("space") if isinstance(quota, dict) else None
        space = space if isinstance(space, dict) else {}

        return {
            "total_videos": _total(video_res),
            "total_folders": _total(folder_res),
            "storage_used_gb": bytes_to_gb(space.get("used")),
            "storage_max_gb": bytes_to_gb(space.get("max")),
        }
