import json

import pytest
from fastmcp import Client

from core import mock_data
from core.canva import CanvaOperations
from core.dispatcher import RequestDispatcher
from tests.conftest import FakeCanva
from tools.mcp_server import create_server

TOOL_NAMES = {
    "get_design",
    "list_designs",
    "get_brand",
    "list_brands",
    "get_asset",
    "list_assets",
    "upload_image",
    "get_user",
    "list_users",
}


def _live_server(configured, remote: FakeCanva):
    return create_server(CanvaOperations(RequestDispatcher(configured, transport=remote.transport)))


@pytest.mark.asyncio
async def test_registers_every_tool(mock_ops):
    async with Client(create_server(mock_ops)) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    assert set(tools) == TOOL_NAMES
    limit = tools["list_assets"].inputSchema["properties"]["limit"]
    assert limit["minimum"] == 1
    assert limit["maximum"] == 100
    assert limit["default"] == 50
    assert "FONT" in json.dumps(tools["list_assets"].inputSchema["properties"]["type"])
    assert tools["upload_image"].inputSchema["required"] == ["url"]


@pytest.mark.asyncio
async def test_tool_arguments_use_camel_case_names(mock_ops):
    async with Client(create_server(mock_ops)) as client:
        tools = {tool.name: tool for tool in await client.list_tools()}

    def params(name):
        return set(tools[name].inputSchema["properties"])

    assert params("get_design") == {"designId"}
    assert params("get_brand") == {"brandId"}
    assert params("get_asset") == {"assetId"}
    assert params("get_user") == {"userId"}
    assert params("list_designs") == {"limit", "startAfter"}
    assert params("list_assets") == {"limit", "startAfter", "type"}
    assert params("upload_image") == {"url", "title", "brandId"}


@pytest.mark.asyncio
async def test_list_assets_forwards_camel_case_arguments(configured, fake_canva):
    async with Client(_live_server(configured, fake_canva)) as client:
        result = await client.call_tool_mcp(
            "list_assets", {"limit": 5, "startAfter": "tok", "type": "VIDEO"}
        )

    assert not result.isError
    assert fake_canva.last.url.path == "/v1/assets"
    assert dict(fake_canva.last.url.params) == {"limit": "5", "startAfter": "tok", "type": "VIDEO"}


@pytest.mark.asyncio
async def test_tool_result_is_indented_json(mock_ops):
    async with Client(create_server(mock_ops)) as client:
        result = await client.call_tool_mcp("list_designs", {"limit": 10})

    assert not result.isError
    text = result.content[0].text
    assert text == json.dumps(mock_data.lookup("/designs"), indent=2)


@pytest.mark.asyncio
async def test_get_design_in_mock_mode_ignores_requested_id(mock_ops, fake_canva):
    async with Client(create_server(mock_ops)) as client:
        result = await client.call_tool_mcp("get_design", {"designId": "DAF-real"})

    assert json.loads(result.content[0].text)["id"] == "mock-design-id"
    assert fake_canva.calls == 0


@pytest.mark.asyncio
async def test_remote_rejection_is_reported_as_tool_error(configured):
    remote = FakeCanva(status=404, text='{"error":"not_found"}')

    async with Client(_live_server(configured, remote)) as client:
        result = await client.call_tool_mcp("get_user", {"userId": "u1"})

    assert result.isError
    assert result.content[0].text == 'Error: Canva API Error: 404 - {"error":"not_found"}'


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name, arguments",
    [
        ("list_assets", {"limit": 150}),
        ("list_assets", {"limit": 0}),
        ("list_assets", {"type": "GIF"}),
        ("upload_image", {"url": "not a url"}),
    ],
)
async def test_invalid_arguments_rejected_before_dispatch(configured, fake_canva, name, arguments):
    async with Client(_live_server(configured, fake_canva)) as client:
        result = await client.call_tool_mcp(name, arguments)

    assert result.isError
    assert fake_canva.calls == 0


@pytest.mark.asyncio
async def test_upload_image_through_tool(configured, fake_canva):
    async with Client(_live_server(configured, fake_canva)) as client:
        result = await client.call_tool_mcp(
            "upload_image", {"url": "https://cdn.example.com/cat.png", "title": "Cat"}
        )

    assert not result.isError
    assert json.loads(fake_canva.last.content) == {"url": "https://cdn.example.com/cat.png", "title": "Cat"}


@pytest.mark.asyncio
async def test_documentation_resource(mock_ops):
    async with Client(create_server(mock_ops)) as client:
        known = await client.read_resource("canva://authentication")
        unknown = await client.read_resource("canva://pricing")

    assert known[0].text.startswith("# Authentication")
    assert unknown[0].text.startswith("Documentation section 'pricing' not found.")


@pytest.mark.asyncio
async def test_object_resources_in_mock_mode(mock_ops):
    async with Client(create_server(mock_ops)) as client:
        design = await client.read_resource("canva://design/d1")
        brand = await client.read_resource("canva://brand/b1")
        asset = await client.read_resource("canva://asset/a1")

    assert design[0].text.startswith("# Design: Mock Design")
    assert brand[0].text.startswith("# Brand: Mock Brand")
    assert asset[0].text.startswith("# Asset: Mock Asset")


@pytest.mark.asyncio
async def test_resource_absorbs_dispatch_errors(configured):
    remote = FakeCanva(status=403, text="forbidden")

    async with Client(_live_server(configured, remote)) as client:
        contents = await client.read_resource("canva://design/d1")

    assert contents[0].text == "Error retrieving design: Canva API Error: 403 - forbidden"


@pytest.mark.asyncio
async def test_upload_image_sends_url_as_given(configured, fake_canva):
    async with Client(_live_server(configured, fake_canva)) as client:
        result = await client.call_tool_mcp(
            "upload_image", {"url": "https://CDN.example.com", "brandId": "b9"}
        )

    assert not result.isError
    assert json.loads(fake_canva.last.content) == {"url": "https://CDN.example.com", "brandId": "b9"}
