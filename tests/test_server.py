"""Tests for the MCP tool handlers."""

import json
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

from asset_refs.config import AssetConfig
from asset_refs.server import AssetRefsMCPServer


@pytest.fixture
def server() -> AssetRefsMCPServer:
    return AssetRefsMCPServer()


class TestGenerateTool:
    def test_generate_reports_updated_files(
        self, server: AssetRefsMCPServer, make_project: Callable[..., Path]
    ) -> None:
        project = make_project(["assets/a.png"], pubspec="  assets:\n")

        result = server._handle_generate({"project_path": str(project)})
        data = json.loads(result[0].text)

        assert data["ok"] is True
        assert data["updated_files"] == [str(project / "pubspec.yaml"), str(project / "lib" / "res.dart")]
        assert data["message"].startswith("Complete!")

    def test_generate_uses_argument_overrides(
        self, server: AssetRefsMCPServer, make_project: Callable[..., Path]
    ) -> None:
        project = make_project(["assets/a.png"])

        result = server._handle_generate({"project_path": str(project), "generate_file_name": "images"})

        assert json.loads(result[0].text)["ok"] is True
        assert (project / "lib" / "images.dart").exists()
        assert not AssetConfig.config_file(project).exists()

    def test_generate_missing_path(self, server: AssetRefsMCPServer, tmp_path: Path) -> None:
        result = server._handle_generate({"project_path": str(tmp_path / "missing")})

        assert result[0].text.startswith("Path does not exist")


class TestConfigTools:
    def test_update_then_get(self, server: AssetRefsMCPServer, tmp_path: Path) -> None:
        server._handle_update_config({"project_path": str(tmp_path), "exclude_path": ["assets/font/"]})

        result = server._handle_get_config({"project_path": str(tmp_path)})

        assert json.loads(result[0].text) == {
            "generatePath": None,
            "generateFileName": None,
            "excludePath": ["assets/font/"],
        }

    def test_update_keeps_omitted_fields(self, server: AssetRefsMCPServer, tmp_path: Path) -> None:
        AssetConfig(generate_path="gen").save(tmp_path)

        result = server._handle_update_config({"project_path": str(tmp_path), "generate_file_name": "r"})
        data = json.loads(result[0].text)

        assert data["status"] == "saved"
        assert data["config"]["generatePath"] == "gen"
        assert data["config"]["generateFileName"] == "r"


class TestHealthCheck:
    def test_health_check_returns_ok_status(self, server: AssetRefsMCPServer) -> None:
        data = json.loads(server._handle_health_check({})[0].text)

        assert data["status"] == "ok"
        datetime.fromisoformat(data["timestamp"])


@pytest.mark.asyncio
async def test_tools_registered(server: AssetRefsMCPServer) -> None:
    tools = await server._list_tools()
    tool_names = [t.name for t in tools]
    assert tool_names == ["generate_asset_refs", "get_asset_config", "update_asset_config", "health_check"]


@pytest.mark.asyncio
async def test_unknown_tool(server: AssetRefsMCPServer) -> None:
    result = await server._call_tool("nope", {})
    assert result[0].text == "Unknown tool: nope"
