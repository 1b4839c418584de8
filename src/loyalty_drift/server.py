"""Loyalty Drift MCP Server."""

import json
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Tool, TextContent

from .drift import impact_summary, targeting_summary
from .events import EventParseError, check_events, get_scenario, list_scenarios
from .store import ConfigError, JsonConfigStore, get_root_path

logger = logging.getLogger(__name__)


def get_store() -> JsonConfigStore:
    """Get the config store for the configured root."""
    return JsonConfigStore(get_root_path())


# Create the MCP server
server = Server("loyalty-drift")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List available tools."""
    return [
        Tool(
            name="check_drift",
            description="Compare two versions of a loyalty event and report added, removed, and changed tracked fields with an overall drift level (Low, Medium, High).",
            inputSchema={
                "type": "object",
                "properties": {
                    "event_v1": {
                        "type": "string",
                        "description": "Raw JSON text of the earlier event version.",
                    },
                    "event_v2": {
                        "type": "string",
                        "description": "Raw JSON text of the later event version.",
                    },
                    "scenario": {
                        "type": "string",
                        "description": "Name of a predefined scenario to check instead of raw events.",
                    },
                    "format": {
                        "type": "string",
                        "enum": ["text", "json"],
                        "description": "Output format. Defaults to 'text'.",
                        "default": "text",
                    },
                },
            },
        ),
        Tool(
            name="list_scenarios",
            description="List the predefined drift scenarios that can be passed to check_drift.",
            inputSchema={"type": "object", "properties": {}},
        ),
        Tool(
            name="read_tracked_fields",
            description="Read the ordered list of event fields that drift checks compare.",
            inputSchema={"type": "object", "properties": {}},
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    store = get_store()
    logger.debug("Tool call: %s", name)

    if name == "check_drift":
        return await handle_check_drift(store, arguments)
    elif name == "list_scenarios":
        return await handle_list_scenarios(arguments)
    elif name == "read_tracked_fields":
        return await handle_read_tracked_fields(store, arguments)
    else:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]


async def handle_check_drift(
    store: JsonConfigStore, arguments: dict
) -> list[TextContent]:
    """Handle check_drift tool call."""
    try:
        config = store.load_config()

        scenario_name = arguments.get("scenario")
        if scenario_name:
            scenario = get_scenario(scenario_name)
            raw_v1, raw_v2 = scenario.v1, scenario.v2
        else:
            raw_v1 = arguments.get("event_v1")
            raw_v2 = arguments.get("event_v2")

        report = check_events(raw_v1, raw_v2, config.tracked_fields)

        if arguments.get("format") == "json":
            return [TextContent(type="text", text=json.dumps(report.to_dict(), indent=2))]

        text = "\n\n".join(
            [report.format_result(), impact_summary(report), targeting_summary(report)]
        )
        return [TextContent(type="text", text=text)]

    except EventParseError as e:
        return [TextContent(type="text", text=str(e))]
    except KeyError as e:
        return [TextContent(type="text", text=f"Error: {e.args[0]}")]
    except ConfigError as e:
        return [TextContent(type="text", text=f"Config error: {e}")]
    except Exception as e:
        logger.exception("check_drift failed")
        return [TextContent(type="text", text=f"Error checking drift: {e}")]


async def handle_list_scenarios(arguments: dict) -> list[TextContent]:
    """Handle list_scenarios tool call."""
    lines = ["## Scenarios", ""]
    for scenario in list_scenarios():
        lines.append(f"- {scenario.format_display()}")
    return [TextContent(type="text", text="\n".join(lines))]


async def handle_read_tracked_fields(
    store: JsonConfigStore, arguments: dict
) -> list[TextContent]:
    """Handle read_tracked_fields tool call."""
    try:
        config = store.load_config()
    except ConfigError as e:
        return [TextContent(type="text", text=f"Config error: {e}")]

    lines = ["## Tracked fields", ""]
    lines.extend(f"{i}. {name}" for i, name in enumerate(config.tracked_fields, start=1))
    return [TextContent(type="text", text="\n".join(lines))]


async def run_server():
    """Run the MCP server."""
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def main():
    """Entry point for the MCP server."""
    import asyncio

    # stdout carries the protocol
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
