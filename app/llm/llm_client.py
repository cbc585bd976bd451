from abc import ABC, abstractmethod
from typing import Any

class LLMClient(ABC):
    @abstractmethod
    def complete(self, prompt: str, *, system_prompt: str | None = None, **kwargs: Any) -> str:
        """Sendet Prompt (optional mit System-Prompt) an ein LLM und gibt nur den Text-Output zurück."""
        raise NotImplementedError
