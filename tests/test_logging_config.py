from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from text_similarity.clients import OllamaEmbeddingClient
from text_similarity.config.settings import Settings
from text_similarity.core.results import EmbeddingFailure
from text_similarity.logging_config import setup_logging


@pytest.fixture()
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    library_levels = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    try:
        yield
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)
        for name, lib_level in library_levels.items():
            logging.getLogger(name).setLevel(lib_level)


def test_transport_failure_is_logged_to_stdout(capsys, restore_logging):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    async def _run():
        settings = Settings(_env_file=None, ollama_base_url="http://ollama.test")
        async with OllamaEmbeddingClient(settings, transport=httpx.MockTransport(handler)) as client:
            return await client.fetch_embedding("hello")

    setup_logging("INFO")
    result = asyncio.run(_run())
    captured = capsys.readouterr()

    assert isinstance(result, EmbeddingFailure)
    assert "Connection refused" in captured.out
    assert "| ERROR    | text_similarity.clients.ollama_client |" in captured.out
    assert "Connection refused" not in captured.err


def test_setup_logging_quiets_http_libraries(restore_logging):
    setup_logging("DEBUG")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_setup_logging_does_not_stack_handlers(restore_logging):
    setup_logging("INFO")
    setup_logging("INFO")

    assert len(logging.getLogger().handlers) == 1
