"""Tests for the plugin request adapter."""

import json

import pytest

from smart_json2md.plugin import SUCCESS_MESSAGE, handle_request


def test_handle_request_success() -> None:
    """Test a valid request returns the Markdown."""
    request = json.dumps({"jsonData": json.dumps({"title": "My Document"})})

    response = handle_request(request)

    assert response == {
        "code": 200,
        "data": "# title\n\nMy Document\n",
        "message": SUCCESS_MESSAGE,
    }


def test_handle_request_with_options() -> None:
    """Test camelCase options are applied, with unset values defaulted."""
    response = handle_request(
        {
            "jsonData": '{"a": {"b": 1}}',
            "options": {
                "maxHeadingLevel": 1,
                "useOrderedLists": True,
                "minHeadingLevel": None,
            },
        }
    )

    assert response["code"] == 200
    assert response["data"] == "# a\n\n1. **b**: 1\n"


def test_handle_request_accepts_parsed_data() -> None:
    """Test jsonData may already be a decoded value."""
    response = handle_request({"jsonData": {"sections": [{"name": "Intro"}]}})

    assert response["code"] == 200
    assert response["data"] == "# sections\n\n## Intro\n"


@pytest.mark.parametrize(
    "request_payload,message",
    [
        ('{"jsonData": "{broken"}', "Unable to parse JSON string"),
        ("not a request", "Unable to parse request"),
        ({"data": "{}"}, "'jsonData'"),
        ({"jsonData": "{}", "options": [1]}, "'options' must be an object"),
        (
            {"jsonData": "{}", "options": {"minHeadingLevel": 4, "maxHeadingLevel": 2}},
            "Invalid options",
        ),
    ],
)
def test_handle_request_bad_input(request_payload: object, message: str) -> None:
    """Test unusable requests return code 400."""
    response = handle_request(request_payload)

    assert response["code"] == 400
    assert response["data"] is None
    assert message in str(response["message"])


def test_handle_request_render_failure() -> None:
    """Test rendering failures return code 500."""
    value: object = "leaf"
    for _ in range(10):
        value = {"k": value}

    response = handle_request({"jsonData": value, "options": {"maxDepth": 5}})

    assert response["code"] == 500
    assert response["data"] is None
    assert "maximum depth of 5" in str(response["message"])
