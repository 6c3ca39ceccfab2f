from __future__ import annotations

import asyncio
import json
import logging

import httpx

from text_similarity.clients import OllamaEmbeddingClient, fetch_embedding_or_none
from text_similarity.config.settings import Settings
from text_similarity.core.results import EmbeddingFailure, EmbeddingSuccess


def _settings(**overrides) -> Settings:
    values = {"ollama_base_url": "http://ollama.test", "ollama_embed_model": "qwen3-embedding:0.6b"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _fetch(handler, text: str = "hello", **client_kwargs):
    async def _run():
        client = OllamaEmbeddingClient(_settings(), transport=httpx.MockTransport(handler), **client_kwargs)
        async with client:
            return await client.fetch_embedding(text)

    return asyncio.run(_run())


def test_posts_model_and_prompt_to_embeddings_endpoint():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers.get("content-type")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"embedding": [0.1, 0.2, 0.3]})

    result = _fetch(handler, "some text")

    assert seen["method"] == "POST"
    assert seen["url"] == "http://ollama.test/api/embeddings"
    assert seen["content_type"] == "application/json"
    assert seen["body"] == {"model": "qwen3-embedding:0.6b", "prompt": "some text"}
    assert isinstance(result, EmbeddingSuccess)
    assert result.ok
    assert result.vector == [0.1, 0.2, 0.3]
    assert result.dimensions == 3
    assert result.model == "qwen3-embedding:0.6b"


def test_model_override_is_sent():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"embedding": [1, 2]})

    result = _fetch(handler, model="nomic-embed-text")

    assert bodies[0]["model"] == "nomic-embed-text"
    assert result.vector == [1.0, 2.0]


def test_non_ok_status_is_a_tagged_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "model not found"})

    result = _fetch(handler)

    assert isinstance(result, EmbeddingFailure)
    assert not result.ok
    assert result.reason == "Not Found"
    assert result.status_code == 404


def test_body_without_embedding_is_a_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"embeddings": [[1, 2]]})

    result = _fetch(handler)

    assert isinstance(result, EmbeddingFailure)
    assert result.status_code == 200
    assert "embedding" in result.reason


def test_non_json_body_is_a_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>proxy error</html>")

    result = _fetch(handler)

    assert isinstance(result, EmbeddingFailure)
    assert result.reason == "Malformed JSON response"


def test_unreachable_endpoint_logs_and_returns_absent_vector(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    caplog.set_level(logging.ERROR, logger="text_similarity.clients.ollama_client")
    result = _fetch(handler)

    assert isinstance(result, EmbeddingFailure)
    assert result.status_code is None
    assert result.reason == "Connection refused"
    assert "Connection refused" in caplog.text


def test_fetch_embedding_or_none_mirrors_loose_contract():
    def ok(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"embedding": [0.5, 0.5]})

    def down(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async def _run(handler):
        async with OllamaEmbeddingClient(_settings(), transport=httpx.MockTransport(handler)) as client:
            return await fetch_embedding_or_none(client, "text")

    assert asyncio.run(_run(ok)) == [0.5, 0.5]
    assert asyncio.run(_run(down)) is None


def test_non_numeric_embedding_is_a_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"embedding": ["a", "b"]})

    result = _fetch(handler)

    assert isinstance(result, EmbeddingFailure)
    assert result.reason == "Non-numeric 'embedding'"


def test_request_timeout_reaches_http_client():
    async def _timeouts():
        timeouts = []
        for value in (3.0, 0):
            async with OllamaEmbeddingClient(_settings(request_timeout=value)) as client:
                timeouts.append(client.client.timeout)
        return timeouts

    limited, unlimited = asyncio.run(_timeouts())

    assert limited == httpx.Timeout(3.0)
    assert unlimited == httpx.Timeout(None)
