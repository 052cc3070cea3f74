"""
Tool dispatch table for Vimeo MCP Lite

Declares the callable surface (name, description, input schema) and
routes calls by name to their handlers. Handler errors are converted
into {"error": ...} results here so that one bad call never takes the
server down.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from vimeo_client import VimeoClient
from folders import FolderManager, FolderOrganizer
from videos import VideoManager, VideoUpdater
from account import AccountStats
from utils import ValidationError

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[Dict[str, Any]]]


@dataclass(frozen=True)
class ToolSpec:
    """One entry of the dispatch table"""

    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: Handler

    @property
    def argument_names(self) -> List[str]:
        return list(self.input_schema.get("properties", {}))

    @property
    def required(self) -> List[str]:
        return list(self.input_schema.get("required", []))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


def _schema(properties: Optional[Dict[str, Any]] = None, required: Optional[List[str]] = None) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": "object", "properties": properties or {}}
    if required:
        schema["required"] = required
    return schema


def to_json(result: Dict[str, Any]) -> str:
    """Serialize a handler result as compact JSON text"""
    return json.dumps(result, ensure_ascii=False, separators=(",", ":"))


TOOL_DESCRIPTIONS = {
    "list_folders": "List all Vimeo folders with video counts. Returns: {total, folders: [{id, name, video_count}]}",
    "list_videos": (
        "List videos with minimal data. Returns: {total, page, per_page, videos: "
        "[{id, name, duration, created, folder}]}. Use page param for pagination."
    ),
    "get_video": (
        "Get details for a specific video. Returns: "
        "{id, name, description, duration, created, folder, tags, privacy, link}"
    ),
    "get_folder_videos": (
        "Get videos in a folder. Returns: {folder, total, page, per_page, "
        "videos: [{id, name, duration, created}]}"
    ),
    "move_video": "Move a video to a folder. Returns: {success, video_id, folder_id}",
    "create_folder": "Create a new folder. Returns: {success, id, name} or {success: false, error}",
    "update_video": "Update video metadata. Only the fields you pass are changed. Returns: {success, video_id}",
    "search_videos": (
        "Search videos by name. Returns: {query, total, page, per_page, "
        "videos: [{id, name, duration, created, folder}]}"
    ),
    "get_stats": (
        "Get account statistics. Returns: "
        "{total_videos, total_folders, storage_used_gb, storage_max_gb}"
    ),
}


PAGE_ARGUMENT = {"type": "number", "description": "Page number (default: 1)"}

TOOL_ARGUMENTS: Dict[str, Dict[str, Dict[str, Any]]] = {
    "list_folders": {},
    "list_videos": {
        "folder_id": {"type": "string", "description": "Filter by folder ID (optional)"},
        "search": {"type": "string", "description": "Search by name (optional)"},
        "page": PAGE_ARGUMENT,
        "per_page": {"type": "number", "description": "Results per page (default: 50, max: 100)"},
    },
    "get_video": {
        "video_id": {"type": "string", "description": "Video ID"},
    },
    "get_folder_videos": {
        "folder_id": {"type": "string", "description": "Folder ID"},
        "page": PAGE_ARGUMENT,
        "per_page": {"type": "number", "description": "Results per page (default: 50, max: 100)"},
    },
    "move_video": {
        "video_id": {"type": "string", "description": "Video ID to move"},
        "folder_id": {"type": "string", "description": "Target folder ID"},
    },
    "create_folder": {
        "name": {"type": "string", "description": "Folder name"},
    },
    "update_video": {
        "video_id": {"type": "string", "description": "Video ID"},
        "name": {"type": "string", "description": "New title (optional)"},
        "description": {"type": "string", "description": "New description (optional)"},
        "tags": {"type": "array", "items": {"type": "string"}, "description": "Tags array (optional)"},
    },
    "search_videos": {
        "query": {"type": "string", "description": "Search query"},
        "page": PAGE_ARGUMENT,
        "per_page": {"type": "number", "description": "Results per page (default: 25, max: 100)"},
    },
    "get_stats": {},
}

REQUIRED_ARGUMENTS: Dict[str, List[str]] = {
    "get_video": ["video_id"],
    "get_folder_videos": ["folder_id"],
    "move_video": ["video_id", "folder_id"],
    "create_folder": ["name"],
    "update_video": ["video_id"],
    "search_videos": ["query"],
}


def argument_description(tool: str, argument: str) -> str:
    """Prose shown to the calling agent for one tool argument"""
    return TOOL_ARGUMENTS[tool][argument]["description"]


class ToolDispatcher:
    """
    Name-to-handler routing for every exposed tool

    Example:
        ```python
        dispatcher = ToolDispatcher(client)
        text = await dispatcher.call_tool("list_videos", {"per_page": 10})
        ```
    """

    def __init__(
        self,
        client: VimeoClient,
        max_folder_pages: int = 50,
        description_length: int = 500
    ):
        self.client = client
        self.folder_manager = FolderManager(client, max_pages=max_folder_pages)
        self.folder_organizer = FolderOrganizer(client)
        self.video_manager = VideoManager(client, description_length=description_length)
        self.video_updater = VideoUpdater(client)
        self.account_stats = AccountStats(client)

        self.tools: Dict[str, ToolSpec] = {
            spec.name: spec for spec in self._build_table()
        }
        logger.info(f"Tool dispatcher ready with {len(self.tools)} tools")

    def _build_table(self) -> List[ToolSpec]:
        handlers: Dict[str, Handler] = {
            "list_folders": self.folder_manager.list_folders,
            "list_videos": self.video_manager.list_videos,
            "get_video": self.video_manager.get_video,
            "get_folder_videos": self.folder_manager.get_folder_videos,
            "move_video": self.folder_organizer.move_video,
            "create_folder": self.folder_organizer.create_folder,
            "update_video": self.video_updater.update_video,
            "search_videos": self.video_manager.search_videos,
            "get_stats": self.account_stats.get_stats,
        }

        return [
            ToolSpec(
                name=name,
                description=TOOL_DESCRIPTIONS[name],
                input_schema=_schema(TOOL_ARGUMENTS[name], REQUIRED_ARGUMENTS.get(name)),
                handler=handler,
            )
            for name, handler in handlers.items()
        ]

    def list_tools(self) -> List[Dict[str, Any]]:
        """Tool declarations as plain dicts (name, description, inputSchema)"""
        return [spec.to_dict() for spec in self.tools.values()]

    async def dispatch(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Route a call to its handler and return the result dict

        Never raises: unknown tools, malformed arguments and handler
        errors become {"error": ...} results.
        """
        spec = self.tools.get(name)
        if spec is None:
            logger.warning(f"Unknown tool requested: {name}")
            return {"error": f"Unknown tool: {name}"}

        try:
            arguments = arguments or {}
            if not isinstance(arguments, dict):
                raise ValidationError("Arguments must be an object of named values")

            kwargs = {
                key: value
                for key, value in arguments.items()
                if key in spec.argument_names and value is not None
            }

            missing = [key for key in spec.required if key not in kwargs]
            if missing:
                raise ValidationError(f"Missing required argument: {', '.join(missing)}")

            logger.info(f"Calling tool {name}")
            return await spec.handler(**kwargs)

        except ValidationError as e:
            logger.warning(f"Validation error in {name}: {e}")
            return {"error": str(e)}
        except Exception as e:
            logger.error(f"Tool {name} failed: {type(e).__name__}: {e}")
            return {"error": str(e) or type(e).__name__}

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
        """Dispatch a call and serialize its result as compact JSON text"""
        return to_json(await self.dispatch(name, arguments))
