"""
Oracle-Judge: vergleicht eine MRE-Antwort mit der Baseline-Antwort.

Ablauf pro Aufruf:
- Prompt bauen (System + User)
- genau ein LLM-Call, kein Retry
- JSON extrahieren, Scores koerzieren und validieren
- Oracle-Score aggregieren
"""

import logging

from app.llm.llm_client import LLMClient
from app.models.pydantic import EvaluationRequest, OracleScoreResult
from app.services.judges.parsing import extract_json, parse_oracle_scores
from app.services.judges.prompts import build_oracle_system_prompt, build_oracle_user_prompt
from app.services.judges.scoring import compute_oracle_score

logger = logging.getLogger(__name__)


class OracleJudge:
    """
    LLM-as-a-Judge für die Qualität komprimierter (MRE) Antworten.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        default_model: str = "gpt-4o-mini",
        default_prompt_version: str = "v1",
        default_temperature: float = 0.0,
        default_max_tokens: int = 500,
    ):
        self.llm = llm_client
        self.default_model = default_model
        self.default_prompt_version = default_prompt_version
        self.default_temperature = default_temperature
        self.default_max_tokens = default_max_tokens

    def judge(self, req: EvaluationRequest) -> OracleScoreResult:
        """
        Führt die Oracle-Bewertung durch.

        Raises:
            UpstreamTransportError: LLM-API antwortet mit Fehler
            ScoreParseError: Antwort enthält kein verwertbares JSON
            ScoreRangeError: Scores außerhalb von [0, 1]
        """
        system_prompt = build_oracle_system_prompt(self.default_prompt_version)
        user_prompt = build_oracle_user_prompt(
            req.prompt,
            req.baseline_answer,
            req.mre_answer,
            self.default_prompt_version,
        )

        raw_text = self.llm.complete(
            user_prompt,
            system_prompt=system_prompt,
            model=self.default_model,
            temperature=self.default_temperature,
            max_tokens=self.default_max_tokens,
        )

        data = extract_json(raw_text)
        scores, explanation, flags = parse_oracle_scores(data)
        oracle_score = compute_oracle_score(scores)

        logger.info(
            "Oracle-Bewertung fertig (model=%s, oracle_score=%.3f, flags=%s)",
            self.default_model,
            oracle_score,
            flags,
        )

        return OracleScoreResult(
            **scores.model_dump(),
            oracle_score=oracle_score,
            raw_model_explanation=explanation,
        )
