from typing import Any

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.llm.fake_client import FakeLLMClient
from app.server import create_app

TEST_API_KEY = "test-mre-key"


class RecordingLLMClient(FakeLLMClient):
    """FakeLLMClient, der jeden Call für Assertions mitschreibt."""

    def __init__(self, reply: str | None = None):
        super().__init__(reply)
        self.calls: list[dict[str, Any]] = []

    def complete(self, prompt: str, *, system_prompt: str | None = None, **kwargs: Any) -> str:
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, **kwargs})
        return super().complete(prompt, system_prompt=system_prompt, **kwargs)


@pytest.fixture
def settings():
    # _env_file=None: keine lokale .env in Tests
    return Settings(
        _env_file=None,
        mre_api_key=TEST_API_KEY,
        openai_api_key="sk-test",
        oracle_fake_llm=False,
    )


@pytest.fixture
def fake_llm():
    return RecordingLLMClient()


@pytest.fixture
def client(settings, fake_llm):
    return TestClient(create_app(settings=settings, llm_client=fake_llm))


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {TEST_API_KEY}"}


@pytest.fixture
def eval_payload():
    return {
        "prompt": "Summarize the water cycle in one sentence.",
        "baseline_answer": "Water evaporates, condenses into clouds and falls back as precipitation.",
        "mre_answer": "Water evaporates, forms clouds and returns as rain or snow.",
    }
