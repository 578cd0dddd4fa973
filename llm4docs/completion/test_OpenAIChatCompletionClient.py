import json

import httpx
import pytest

from .OpenAIChatCompletionClient import OpenAIChatCompletionClient
from ..config import CompletionConfig
from ..errors import CompletionError
from ..models import PromptRequest


def _client_returning(handler) -> OpenAIChatCompletionClient:
    config = CompletionConfig(api_key="sk-test", model="gpt-4o")
    return OpenAIChatCompletionClient(
        config, http_client=httpx.Client(transport=httpx.MockTransport(handler))
    )


def _request() -> PromptRequest:
    return PromptRequest(
        context="Be formal.",
        instruction="Rewrite formally:\n\nhey there",
        selected_text="hey there",
    )


def test_returns_trimmed_first_choice():
    client = _client_returning(
        lambda request: httpx.Response(
            200, json={"choices": [{"message": {"content": " Formal Text. "}}]}
        )
    )
    assert client.complete(_request()) == "Formal Text."


def test_request_body_and_headers():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "ok"}}]})

    _client_returning(handler).complete(_request())

    assert seen["method"] == "POST"
    assert seen["url"] == "https://api.openai.com/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"] == {
        "model": "gpt-4o",
        "messages": [
            {"role": "system", "content": "Be formal."},
            {"role": "user", "content": "Rewrite formally:\n\nhey there"},
        ],
        "temperature": 0.7,
        "max_tokens": 1000,
        "prediction": {"type": "content", "content": "hey there"},
    }


def test_server_error_raises_completion_error():
    client = _client_returning(
        lambda request: httpx.Response(500, text="Internal Server Error")
    )
    with pytest.raises(CompletionError, match="500"):
        client.complete(_request())


def test_malformed_json_raises_completion_error():
    client = _client_returning(lambda request: httpx.Response(200, text="{not json"))
    with pytest.raises(CompletionError):
        client.complete(_request())


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"choices": []},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": None}}]},
        ["not", "an", "object"],
    ],
)
def test_missing_fields_raise_completion_error(body):
    client = _client_returning(lambda request: httpx.Response(200, json=body))
    with pytest.raises(CompletionError):
        client.complete(_request())


def test_network_error_raises_completion_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CompletionError, match="connection refused"):
        _client_returning(handler).complete(_request())


def test_malformed_endpoint_raises_completion_error():
    config = CompletionConfig(api_key="sk-test", endpoint="http://[::1/v1")
    client = OpenAIChatCompletionClient(
        config,
        http_client=httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        ),
    )
    with pytest.raises(CompletionError, match="request failed"):
        client.complete(_request())


def test_unencodable_api_key_is_a_request_error():
    config = CompletionConfig(api_key="sk-–x")
    client = OpenAIChatCompletionClient(
        config,
        http_client=httpx.Client(
            transport=httpx.MockTransport(lambda request: httpx.Response(200))
        ),
    )
    with pytest.raises(CompletionError) as excinfo:
        client.complete(_request())
    assert "request failed" in str(excinfo.value)
    assert "JSON" not in str(excinfo.value)
