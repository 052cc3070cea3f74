#!/usr/bin/env python3
"""
Tests for folder, video and account handlers
"""

import httpx
import pytest

from folders import FolderManager, FolderOrganizer
from videos import VideoManager, VideoUpdater
from account import AccountStats, bytes_to_gb
from utils import ValidationError
from conftest import video_resource, folder_resource


# ============================================================================
# FOLDERS
# ============================================================================

class TestListFolders:
    """Test the paginated folder listing"""

    @pytest.mark.asyncio
    async def test_stops_after_short_page(self, fake_vimeo, vimeo_client):
        """Test a full page followed by an empty page ends after two fetches"""
        pages = {
            "1": [folder_resource(str(i), f"F{i}", videos=i) for i in range(100)],
            "2": [],
        }

        def projects(request):
            return httpx.Response(200, json={"data": pages[request.url.params["page"]]})

        fake_vimeo.add("GET", "/me/projects", handler=projects)

        result = await FolderManager(vimeo_client).list_folders()

        assert result["total"] == 100
        assert len(result["folders"]) == 100
        assert "truncated" not in result
        calls = fake_vimeo.calls("GET", "/me/projects")
        assert len(calls) == 2
        assert [c.url.params["page"] for c in calls] == ["1", "2"]
        assert all(c.url.params["per_page"] == "100" for c in calls)
        assert result["folders"][5] == {"id": "5", "name": "F5", "video_count": 5}

    @pytest.mark.asyncio
    async def test_single_short_page(self, fake_vimeo, vimeo_client):
        """Test one short page needs one fetch"""
        fake_vimeo.add("GET", "/me/projects", body={"data": [folder_resource("1", "Only")]})

        result = await FolderManager(vimeo_client).list_folders()

        assert result == {"total": 1, "folders": [{"id": "1", "name": "Only", "video_count": 0}]}
        assert len(fake_vimeo.requests) == 1

    @pytest.mark.asyncio
    async def test_failed_page_truncates(self, fake_vimeo, vimeo_client):
        """Test a failing second page keeps page one and flags truncation"""
        def projects(request):
            if request.url.params["page"] == "1":
                return httpx.Response(200, json={"data": [folder_resource(str(i)) for i in range(100)]})
            return httpx.Response(500, json={"error": "Internal"})

        fake_vimeo.add("GET", "/me/projects", handler=projects)

        result = await FolderManager(vimeo_client).list_folders()

        assert result["total"] == 100
        assert result["truncated"] is True

    @pytest.mark.asyncio
    async def test_page_ceiling(self, fake_vimeo, vimeo_client):
        """Test the loop stops at the configured page ceiling"""
        fake_vimeo.add("GET", "/me/projects", body={"data": [folder_resource("1")] * 100})

        result = await FolderManager(vimeo_client, max_pages=3).list_folders()

        assert len(fake_vimeo.requests) == 3
        assert result["total"] == 300
        assert result["truncated"] is True


class TestGetFolderVideos:
    """Test the two-call folder contents handler"""

    @pytest.mark.asyncio
    async def test_combines_metadata_and_videos(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/projects/77", body={
            "name": "Tutorials",
            "metadata": {"connections": {"videos": {"total": 31}}},
        })
        fake_vimeo.add("GET", "/me/projects/77/videos", body={
            "data": [video_resource("1", "Intro"), video_resource("2", None)],
        })

        result = await FolderManager(vimeo_client).get_folder_videos("77", page=2, per_page=10)

        assert result["folder"] == "Tutorials"
        assert result["total"] == 31
        assert result["page"] == 2
        assert result["per_page"] == 10
        assert result["videos"] == [
            {"id": "1", "name": "Intro", "duration": 42, "created": "2024-03-05"},
            {"id": "2", "name": "Untitled", "duration": 42, "created": "2024-03-05"},
        ]
        params = fake_vimeo.calls("GET", "/me/projects/77/videos")[0].url.params
        assert params["page"] == "2"
        assert params["per_page"] == "10"

    @pytest.mark.asyncio
    async def test_metadata_failure_degrades(self, fake_vimeo, vimeo_client):
        """Test a failed folder lookup only degrades the name"""
        fake_vimeo.add("GET", "/me/projects/77", status=403, body={"error": "Forbidden"})
        fake_vimeo.add("GET", "/me/projects/77/videos", body={"data": []})

        result = await FolderManager(vimeo_client).get_folder_videos("77")

        assert result == {"folder": "Unknown", "total": 0, "page": 1, "per_page": 50, "videos": []}

    @pytest.mark.asyncio
    async def test_video_failure_is_error(self, fake_vimeo, vimeo_client):
        """Test a failed video page is reported as an error"""
        fake_vimeo.add("GET", "/me/projects/77", body={"name": "Tutorials"})
        fake_vimeo.add("GET", "/me/projects/77/videos", status=404, body={})

        result = await FolderManager(vimeo_client).get_folder_videos("77")

        assert result == {"error": "Failed to fetch folder videos", "status": 404}

    @pytest.mark.asyncio
    async def test_per_page_capped(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/projects/77", body={})
        fake_vimeo.add("GET", "/me/projects/77/videos", body={"data": []})

        result = await FolderManager(vimeo_client).get_folder_videos("77", per_page=1000)

        assert result["per_page"] == 100
        assert fake_vimeo.calls("GET", "/me/projects/77/videos")[0].url.params["per_page"] == "100"


class TestFolderOrganizer:
    """Test folder creation and video moves"""

    @pytest.mark.asyncio
    async def test_create_folder_success(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("POST", "/me/projects", status=201, body={"uri": "/users/1/projects/789", "name": "New"})

        result = await FolderOrganizer(vimeo_client).create_folder("New")

        assert result == {"success": True, "id": "789", "name": "New"}
        assert fake_vimeo.body_of(fake_vimeo.requests[0]) == {"name": "New"}

    @pytest.mark.asyncio
    async def test_create_folder_name_passed_through(self, fake_vimeo, vimeo_client):
        """Test the name is sent and echoed exactly as the caller gave it"""
        fake_vimeo.add("POST", "/me/projects", status=201, body={"uri": "/users/1/projects/790", "name": " Reels "})

        result = await FolderOrganizer(vimeo_client).create_folder(" Reels ")

        assert result == {"success": True, "id": "790", "name": " Reels "}
        assert fake_vimeo.body_of(fake_vimeo.requests[0]) == {"name": " Reels "}

    @pytest.mark.asyncio
    async def test_create_folder_already_exists(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("POST", "/me/projects", status=400, body={
            "error": "A folder with this name already exists.",
        })

        result = await FolderOrganizer(vimeo_client).create_folder("Dup")

        assert result == {"success": False, "error": "Folder already exists"}

    @pytest.mark.asyncio
    async def test_create_folder_other_error(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("POST", "/me/projects", status=403, body={"error": "Upgrade required"})

        result = await FolderOrganizer(vimeo_client).create_folder("X")

        assert result == {"success": False, "error": "Upgrade required"}

    @pytest.mark.asyncio
    async def test_create_folder_error_without_message(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("POST", "/me/projects", status=500, body=b"")

        result = await FolderOrganizer(vimeo_client).create_folder("X")

        assert result == {"success": False, "error": "Failed to create folder"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,expected", [(200, True), (201, True), (204, True), (404, False)])
    async def test_move_video(self, fake_vimeo, vimeo_client, status, expected):
        fake_vimeo.add("POST", "/me/projects/9/items", status=status)

        result = await FolderOrganizer(vimeo_client).move_video("123", "9")

        assert result == {"success": expected, "video_id": "123", "folder_id": "9"}
        assert fake_vimeo.body_of(fake_vimeo.requests[0]) == {"items": [{"uri": "/videos/123"}]}


# ============================================================================
# VIDEOS
# ============================================================================

class TestVideoManager:
    """Test video listing, search and details"""

    @pytest.mark.asyncio
    async def test_list_videos_unscoped(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/videos", body={
            "total": 240,
            "data": [video_resource("1", "A", parent_folder={"name": "Ads"})],
        })

        result = await VideoManager(vimeo_client).list_videos()

        assert result == {
            "total": 240,
            "page": 1,
            "per_page": 50,
            "videos": [{"id": "1", "name": "A", "duration": 42, "created": "2024-03-05", "folder": "Ads"}],
        }
        params = fake_vimeo.requests[0].url.params
        assert params["fields"] == "uri,name,duration,created_time,parent_folder"
        assert "query" not in params

    @pytest.mark.asyncio
    async def test_list_videos_per_page_capped(self, fake_vimeo, vimeo_client):
        """Test per_page 500 goes out as 100"""
        fake_vimeo.add("GET", "/me/videos", body={"data": []})

        result = await VideoManager(vimeo_client).list_videos(per_page=500)

        assert fake_vimeo.requests[0].url.params["per_page"] == "100"
        assert result["per_page"] == 100

    @pytest.mark.asyncio
    async def test_list_videos_folder_and_search(self, fake_vimeo, vimeo_client):
        """Test folder scope switches endpoint and search adds a query"""
        fake_vimeo.add("GET", "/me/projects/5/videos", body={"data": [video_resource("3")]})

        result = await VideoManager(vimeo_client).list_videos(folder_id="5", search="demo reel")

        assert result["total"] == 1
        params = fake_vimeo.requests[0].url.params
        assert params["query"] == "demo reel"
        assert params["fields"] == "uri,name,duration,created_time"

    @pytest.mark.asyncio
    async def test_list_videos_error(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/videos", status=401, body={"error": "Unauthorized"})

        result = await VideoManager(vimeo_client).list_videos()

        assert result == {"error": "Failed to fetch videos", "status": 401}

    @pytest.mark.asyncio
    async def test_search_videos(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/videos", body={"total": 2, "data": [video_resource("1"), video_resource("2")]})

        result = await VideoManager(vimeo_client).search_videos("launch")

        assert result["query"] == "launch"
        assert result["total"] == 2
        assert result["per_page"] == 25
        assert len(result["videos"]) == 2
        params = fake_vimeo.requests[0].url.params
        assert params["query"] == "launch"
        assert params["per_page"] == "25"

    @pytest.mark.asyncio
    async def test_search_videos_cap_and_error(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/videos", status=500, body={})

        result = await VideoManager(vimeo_client).search_videos("x", per_page=1000)

        assert result == {"error": "Search failed", "status": 500}
        assert fake_vimeo.requests[0].url.params["per_page"] == "100"

    @pytest.mark.asyncio
    async def test_search_videos_requires_query(self, vimeo_client):
        with pytest.raises(ValidationError):
            await VideoManager(vimeo_client).search_videos("")

    @pytest.mark.asyncio
    async def test_get_video(self, fake_vimeo, vimeo_client):
        """Test details mapping, description truncation and tag names"""
        fake_vimeo.add("GET", "/videos/42", body={
            "uri": "/videos/42",
            "name": "Keynote",
            "description": "d" * 800,
            "duration": 3600,
            "created_time": "2022-01-02T03:04:05+00:00",
            "parent_folder": {"name": "Events"},
            "tags": [{"name": "conf", "tag": "conf"}, {"name": "2022"}],
            "privacy": {"view": "unlisted"},
            "link": "https://vimeo.com/42",
        })

        result = await VideoManager(vimeo_client).get_video("42")

        assert result == {
            "id": "42",
            "name": "Keynote",
            "description": "d" * 500,
            "duration": 3600,
            "created": "2022-01-02",
            "folder": "Events",
            "tags": ["conf", "2022"],
            "privacy": "unlisted",
            "link": "https://vimeo.com/42",
        }

    @pytest.mark.asyncio
    async def test_get_video_description_kept_verbatim(self, fake_vimeo, vimeo_client):
        """Test the description is cut to 500 characters without other changes"""
        description = "\x07" * 10 + "d" * 600
        fake_vimeo.add("GET", "/videos/42", body={"name": "Bell", "description": description})

        result = await VideoManager(vimeo_client).get_video("42")

        assert result["description"] == "\x07" * 10 + "d" * 490
        assert len(result["description"]) == 500

    @pytest.mark.asyncio
    async def test_get_video_sparse(self, fake_vimeo, vimeo_client):
        """Test a video with no optional blocks"""
        fake_vimeo.add("GET", "/videos/42", body={"name": "Bare"})

        result = await VideoManager(vimeo_client).get_video("42")

        assert result["description"] == ""
        assert result["tags"] == []
        assert result["folder"] is None
        assert result["privacy"] is None

    @pytest.mark.asyncio
    async def test_get_video_not_found(self, fake_vimeo, vimeo_client):
        result = await VideoManager(vimeo_client).get_video("404404")

        assert result == {"error": "Video not found", "status": 404}


class TestVideoUpdater:
    """Test partial metadata updates"""

    @pytest.mark.asyncio
    async def test_only_supplied_fields_sent(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("PATCH", "/videos/7", body={"uri": "/videos/7"})

        result = await VideoUpdater(vimeo_client).update_video("7", name="X")

        assert result == {"success": True, "video_id": "7"}
        assert fake_vimeo.body_of(fake_vimeo.requests[0]) == {"name": "X"}

    @pytest.mark.asyncio
    async def test_all_fields(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("PATCH", "/videos/7", body={})

        await VideoUpdater(vimeo_client).update_video(
            "7", name="T", description="D", tags=["a", "b"]
        )

        assert fake_vimeo.body_of(fake_vimeo.requests[0]) == {
            "name": "T", "description": "D", "tags": ["a", "b"],
        }

    @pytest.mark.asyncio
    async def test_failure_status(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("PATCH", "/videos/7", status=403, body={"error": "Forbidden"})

        result = await VideoUpdater(vimeo_client).update_video("7", description="D")

        assert result == {"success": False, "video_id": "7"}

    def test_build_update_body_empty(self):
        assert VideoUpdater.build_update_body() == {}


# ============================================================================
# ACCOUNT
# ============================================================================

class TestAccountStats:
    """Test the account summary"""

    def test_bytes_to_gb(self):
        assert bytes_to_gb(1073741824) == "1.00"
        assert bytes_to_gb(None) == "0.00"
        assert bytes_to_gb(5 * 1073741824 // 2) == "2.50"

    @pytest.mark.asyncio
    async def test_get_stats(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/videos", body={"total": 321, "data": []})
        fake_vimeo.add("GET", "/me/projects", body={"total": 12, "data": []})
        fake_vimeo.add("GET", "/me", body={
            "upload_quota": {"space": {"used": 1073741824, "max": 5368709120}},
        })

        result = await AccountStats(vimeo_client).get_stats()

        assert result == {
            "total_videos": 321,
            "total_folders": 12,
            "storage_used_gb": "1.00",
            "storage_max_gb": "5.00",
        }
        assert fake_vimeo.calls("GET", "/me/videos")[0].url.params["per_page"] == "1"
        assert fake_vimeo.calls("GET", "/me/projects")[0].url.params["per_page"] == "1"

    @pytest.mark.asyncio
    async def test_get_stats_failures_default_to_zero(self, fake_vimeo, vimeo_client):
        fake_vimeo.add("GET", "/me/videos", status=500, body={})
        fake_vimeo.add("GET", "/me/projects", body={"total": 4})

        result = await AccountStats(vimeo_client).get_stats()

        assert result == {
            "total_videos": 0,
            "total_folders": 4,
            "storage_used_gb": "0.00",
            "storage_max_gb": "0.00",
        }
