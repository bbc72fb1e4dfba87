"""MCP server exposing the asset reference generator as tools."""

import asyncio
import json
from datetime import datetime
from pathlib import Path

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .config import AssetConfig
from .core import AssetRefGenerator

VERSION = "1.0.0"

_CONFIG_PROPERTIES = {
    "generate_path": {
        "type": "string",
        "description": "Output folder under lib/ (e.g. 'generated'). Empty string clears it."
    },
    "generate_file_name": {
        "type": "string",
        "description": "Dart file name without extension (default: res). Also names the class."
    },
    "exclude_path": {
        "type": "array",
        "items": {"type": "string"},
        "description": "Path substrings to leave out of the scan, e.g. 'assets/font/'"
    },
}


class AssetRefsMCPServer:

    def __init__(self):
        self._server = Server("flutter-asset-refs")
        self._generator = AssetRefGenerator()
        self._register_handlers()

    def _register_handlers(self):
        self._server.list_tools()(self._list_tools)
        self._server.call_tool()(self._call_tool)

    async def _list_tools(self) -> list[Tool]:
        return [
            Tool(
                name="generate_asset_refs",
                description=(
                    "Scan asset, assets and images folders of a Flutter project, update the "
                    "assets block in pubspec.yaml and regenerate the Dart constants file. "
                    "Arguments other than project_path override the saved settings for this run only."
                ),
                inputSchema={
                    "type": "object",
                    "properties": {
                        "project_path": {
                            "type": "string",
                            "description": "Absolute path to the Flutter project root"
                        },
                        **_CONFIG_PROPERTIES,
                    },
                    "required": ["project_path"]
                }
            ),
            Tool(
                name="get_asset_config",
                description="Show the saved generator settings of a project.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "project_path": {
                            "type": "string",
                            "description": "Absolute path to the Flutter project root"
                        }
                    },
                    "required": ["project_path"]
                }
            ),
            Tool(
                name="update_asset_config",
                description="Change and save generator settings. Omitted fields keep their value.",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "project_path": {
                            "type": "string",
                            "description": "Absolute path to the Flutter project root"
                        },
                        **_CONFIG_PROPERTIES,
                    },
                    "required": ["project_path"]
                }
            ),
            Tool(
                name="health_check",
                description="Check server health status.",
                inputSchema={
                    "type": "object",
                    "properties": {}
                }
            ),
        ]

    async def _call_tool(self, name: str, arguments: dict) -> list[TextContent]:
        if name == "generate_asset_refs":
            return self._handle_generate(arguments)
        elif name == "get_asset_config":
            return self._handle_get_config(arguments)
        elif name == "update_asset_config":
            return self._handle_update_config(arguments)
        elif name == "health_check":
            return self._handle_health_check(arguments)
        else:
            return [TextContent(type="text", text=f"Unknown tool: {name}")]

    def _handle_generate(self, arguments: dict) -> list[TextContent]:
        """Handle generate_asset_refs tool call."""
        project_path = Path(arguments["project_path"])
        if not project_path.exists():
            return [TextContent(type="text", text=f"Path does not exist: {project_path}")]

        try:
            config = self._config_with_arguments(project_path, arguments)
        except ValueError as e:
            return [TextContent(type="text", text=str(e))]

        result = self._generator.run(project_path, config)
        payload = {**result.to_dict(), "message": result.message()}
        return [TextContent(type="text", text=json.dumps(payload, indent=2))]

    def _handle_get_config(self, arguments: dict) -> list[TextContent]:
        """Handle get_asset_config tool call."""
        project_path = Path(arguments["project_path"])
        try:
            config = AssetConfig.load(project_path)
        except ValueError as e:
            return [TextContent(type="text", text=str(e))]
        return [TextContent(type="text", text=json.dumps(config.to_dict(), indent=2))]

    def _handle_update_config(self, arguments: dict) -> list[TextContent]:
        """Handle update_asset_config tool call."""
        project_path = Path(arguments["project_path"])
        if not project_path.exists():
            return [TextContent(type="text", text=f"Path does not exist: {project_path}")]

        try:
            config = self._config_with_arguments(project_path, arguments)
        except ValueError as e:
            return [TextContent(type="text", text=str(e))]

        config_path = config.save(project_path)
        return [TextContent(type="text", text=json.dumps({
            "status": "saved",
            "config_file": str(config_path),
            "config": config.to_dict(),
        }, indent=2))]

    def _config_with_arguments(self, project_path: Path, arguments: dict) -> AssetConfig:
        return AssetConfig.load(project_path).with_overrides(
            generate_path=arguments.get("generate_path"),
            generate_file_name=arguments.get("generate_file_name"),
            exclude_path=arguments.get("exclude_path"),
        )

    def _handle_health_check(self, arguments: dict) -> list[TextContent]:
        """Returns server status."""
        result = {
            "status": "ok",
            "timestamp": datetime.now().isoformat(),
            "version": VERSION
        }
        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    async def run(self):
        async with stdio_server() as (read_stream, write_stream):
            await self._server.run(read_stream, write_stream, self._server.create_initialization_options())


def main():
    server = AssetRefsMCPServer()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
