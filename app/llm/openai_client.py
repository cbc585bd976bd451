import logging
from typing import Any

from openai import APIStatusError, OpenAI

from app.core.errors import UpstreamTransportError
from app.llm.llm_client import LLMClient

logger = logging.getLogger(__name__)


class OpenAIClient(LLMClient):
    def __init__(
        self,
        model_name: str,
        api_key: str,
        base_url: str | None = None,
        temperature: float = 0.0,
        max_tokens: int = 500,
    ):
        self.model_name = model_name
        self.api_key = api_key
        self.base_url = base_url
        self.temperature = temperature
        self.max_tokens = max_tokens
        # SDK-Client erst beim ersten Call: fehlende Keys meldet validate_startup_config
        self._client: OpenAI | None = None

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            # Keine SDK-Retries: ein Upstream-Fehler geht direkt an den Aufrufer
            self._client = OpenAI(api_key=self.api_key, base_url=self.base_url, max_retries=0)
        return self._client

    def complete(self, prompt: str, *, system_prompt: str | None = None, **kwargs: Any) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        try:
            response = self.client.chat.completions.create(
                model=kwargs.get("model") or self.model_name,
                messages=messages,
                temperature=kwargs.get("temperature", self.temperature),
                max_tokens=kwargs.get("max_tokens", self.max_tokens),
            )
        except APIStatusError as e:
            error_text = e.response.text
            logger.error("OpenAI API error (status=%s): %s", e.status_code, error_text)
            raise UpstreamTransportError(error_text) from e

        return response.choices[0].message.content or ""
