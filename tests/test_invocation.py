import pytest

from mcp_adk_adapter.core.invocation import (
    INVALID_INPUT_MESSAGE,
    describe_failure,
    extract_result_text,
    parse_tool_input,
)
from mcp_adk_adapter.core.models import ContentItem, ToolCallResult


def test_invalid_input_message_is_fixed():
    assert INVALID_INPUT_MESSAGE == (
        "call the tool error: input must be valid json, retry tool calling with correct json"
    )


@pytest.mark.parametrize("text", ["not json", "", "{'url': 'x'}", "[1, 2]", '"url"', "42"])
def test_parse_rejects_anything_but_an_object(text):
    assert parse_tool_input(text) is None


def test_parse_object():
    assert parse_tool_input('{"url": "https://example.com", "depth": 2}') == {
        "url": "https://example.com",
        "depth": 2,
    }


def test_parse_null_means_no_arguments():
    assert parse_tool_input("null") == {}


def test_first_text_item_is_returned():
    result = ToolCallResult(
        content=[ContentItem(type="text", text="first"), ContentItem(type="text", text="second")]
    )
    assert extract_result_text(result) == "first"


def test_empty_text_is_returned_as_is():
    assert extract_result_text(ToolCallResult(content=[ContentItem(type="text", text="")])) == ""


def test_empty_content_is_a_diagnostic():
    assert extract_result_text(ToolCallResult(content=[])) == (
        "call the tool error: tool returned no content"
    )


def test_non_text_first_item_is_a_diagnostic():
    result = ToolCallResult(
        content=[ContentItem(type="image"), ContentItem(type="text", text="caption")]
    )
    assert extract_result_text(result) == 'call the tool error: unsupported content type "image"'


def test_reported_tool_error_embeds_its_text():
    result = ToolCallResult(
        content=[ContentItem(type="text", text="404 Not Found")], is_error=True
    )
    assert extract_result_text(result) == "call the tool error: 404 Not Found"


def test_reported_tool_error_without_text():
    result = ToolCallResult(content=[], is_error=True)
    assert extract_result_text(result) == "call the tool error: the tool reported an error"


def test_describe_failure_falls_back_to_exception_type():
    assert describe_failure(ConnectionResetError()) == "call the tool error: ConnectionResetError"
    assert describe_failure(RuntimeError("boom")) == "call the tool error: boom"
