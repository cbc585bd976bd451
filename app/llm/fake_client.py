from typing import Any
from app.llm.llm_client import LLMClient


class FakeLLMClient(LLMClient):
    def __init__(self, reply: str | None = None):
        self.reply = reply

    def complete(self, prompt: str, *, system_prompt: str | None = None, **kwargs: Any) -> str:
        if self.reply is not None:
            return self.reply
        # Völlig deterministische Antwort: nahezu identische Antworten, kaum Halluzination.
        return """
        {
          "semantic_similarity": 0.9,
          "instruction_fidelity": 0.8,
          "factual_consistency": 0.7,
          "style_preservation": 0.6,
          "hallucination_risk": 0.1,
          "explanation": "Fake-Judge: MRE-Antwort deckt sich weitgehend mit der Baseline."
        }
        """
