#!/usr/bin/env python3
"""
Vimeo MCP Lite
A token-efficient Model Context Protocol server for the Vimeo API.

Design principles:
- ✅ Minimal response payloads (a few fields per video, not the full resource)
- ✅ First-class folder operations
- ✅ Server-side filtering to reduce data transfer
- ✅ Pagination with counts, not full data dumps

Provides tools for:
- Folders (list, contents, create, move videos)
- Videos (list, search, details, update)
- Account statistics
"""

import sys
import logging
from typing import Annotated, Optional, List

from fastmcp import FastMCP
from pydantic import Field
from pydantic import ValidationError as ConfigError

from config import get_config, describe_config_error
from vimeo_client import VimeoClient
from dispatcher import ToolDispatcher, TOOL_DESCRIPTIONS, argument_description as arg

__version__ = "1.0.0"

# Load configuration; a missing access token is fatal before any call is served
try:
    config = get_config()
except ConfigError as e:
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    logging.getLogger(__name__).error(describe_config_error(e))
    sys.exit(1)

# Setup logging (stderr, so stdio transport stays clean)
logging.basicConfig(
    level=getattr(logging, config.server.log_level),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize MCP server
mcp = FastMCP("vimeo-mcp-lite")

# Initialize Vimeo API client and dispatch table
vimeo = VimeoClient.from_config(config.vimeo_api)
dispatcher = ToolDispatcher(
    vimeo,
    max_folder_pages=config.vimeo_api.max_folder_pages,
    description_length=config.validation.description_preview_length
)


# ============================================================================
# MCP TOOLS - FOLDERS
# ============================================================================

@mcp.tool(name="list_folders", description=TOOL_DESCRIPTIONS["list_folders"])
async def list_folders() -> str:
    return await dispatcher.call_tool("list_folders", {})


@mcp.tool(name="get_folder_videos", description=TOOL_DESCRIPTIONS["get_folder_videos"])
async def get_folder_videos(
    folder_id: Annotated[str, Field(description=arg("get_folder_videos", "folder_id"))],
    page: Annotated[int, Field(description=arg("get_folder_videos", "page"))] = 1,
    per_page: Annotated[int, Field(description=arg("get_folder_videos", "per_page"))] = 50
) -> str:
    return await dispatcher.call_tool("get_folder_videos", {
        "folder_id": folder_id,
        "page": page,
        "per_page": per_page,
    })


@mcp.tool(name="create_folder", description=TOOL_DESCRIPTIONS["create_folder"])
async def create_folder(
    name: Annotated[str, Field(description=arg("create_folder", "name"))]
) -> str:
    return await dispatcher.call_tool("create_folder", {"name": name})


@mcp.tool(name="move_video", description=TOOL_DESCRIPTIONS["move_video"])
async def move_video(
    video_id: Annotated[str, Field(description=arg("move_video", "video_id"))],
    folder_id: Annotated[str, Field(description=arg("move_video", "folder_id"))]
) -> str:
    return await dispatcher.call_tool("move_video", {
        "video_id": video_id,
        "folder_id": folder_id,
    })


# ============================================================================
# MCP TOOLS - VIDEOS
# ============================================================================

@mcp.tool(name="list_videos", description=TOOL_DESCRIPTIONS["list_videos"])
async def list_videos(
    folder_id: Annotated[Optional[str], Field(description=arg("list_videos", "folder_id"))] = None,
    search: Annotated[Optional[str], Field(description=arg("list_videos", "search"))] = None,
    page: Annotated[int, Field(description=arg("list_videos", "page"))] = 1,
    per_page: Annotated[int, Field(description=arg("list_videos", "per_page"))] = 50
) -> str:
    return await dispatcher.call_tool("list_videos", {
        "folder_id": folder_id,
        "search": search,
        "page": page,
        "per_page": per_page,
    })


@mcp.tool(name="search_videos", description=TOOL_DESCRIPTIONS["search_videos"])
async def search_videos(
    query: Annotated[str, Field(description=arg("search_videos", "query"))],
    page: Annotated[int, Field(description=arg("search_videos", "page"))] = 1,
    per_page: Annotated[int, Field(description=arg("search_videos", "per_page"))] = 25
) -> str:
    return await dispatcher.call_tool("search_videos", {
        "query": query,
        "page": page,
        "per_page": per_page,
    })


@mcp.tool(name="get_video", description=TOOL_DESCRIPTIONS["get_video"])
async def get_video(
    video_id: Annotated[str, Field(description=arg("get_video", "video_id"))]
) -> str:
    return await dispatcher.call_tool("get_video", {"video_id": video_id})


@mcp.tool(name="update_video", description=TOOL_DESCRIPTIONS["update_video"])
async def update_video(
    video_id: Annotated[str, Field(description=arg("update_video", "video_id"))],
    name: Annotated[Optional[str], Field(description=arg("update_video", "name"))] = None,
    description: Annotated[Optional[str], Field(description=arg("update_video", "description"))] = None,
    tags: Annotated[Optional[List[str]], Field(description=arg("update_video", "tags"))] = None
) -> str:
    return await dispatcher.call_tool("update_video", {
        "video_id": video_id,
        "name": name,
        "description": description,
        "tags": tags,
    })


# ============================================================================
# MCP TOOLS - ACCOUNT
# ============================================================================

@mcp.tool(name="get_stats", description=TOOL_DESCRIPTIONS["get_stats"])
async def get_stats() -> str:
    return await dispatcher.call_tool("get_stats", {})


# ============================================================================
# SERVER INITIALIZATION
# ============================================================================

def main() -> None:
    logger.info(f"Starting vimeo-mcp-lite v{__version__}")
    logger.info(f"Transport: {config.server.transport}")
    logger.info(f"Tools: {', '.join(dispatcher.tools)}")

    if config.server.transport == "http":
        logger.info(f"🚀 Starting in HTTP mode on {config.server.host}:{config.server.port}")
        mcp.run(
            transport="streamable-http",
            host=config.server.host,
            port=config.server.port
        )
    else:
        logger.info("🚀 vimeo-mcp-lite server running on stdio")
        mcp.run()


if __name__ == "__main__":
    main()
