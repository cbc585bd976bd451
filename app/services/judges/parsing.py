"""
Robustes Parsing von Oracle-Judge-Outputs.

Features:
- Strict JSON parsing
- Fallback über Markdown-Codeblöcke und Klammer-Suche
- Koerzierung der fünf Scores + Range-Check (kein Clamping)
"""

import json
import logging
import math
from typing import Any, Callable

from app.core.errors import JSONExtractionError, ScoreParseError, ScoreRangeError
from app.models.pydantic import OracleSubScores

logger = logging.getLogger(__name__)

SCORE_FIELDS = (
    "semantic_similarity",
    "instruction_fidelity",
    "factual_consistency",
    "style_preservation",
    "hallucination_risk",
)
DEFAULT_EXPLANATION = "No explanation provided"

JSON_FENCE = "```json"
FENCE = "```"


def _try_loads(text: str) -> Any | None:
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None


def _fenced_body(text: str, opening: str) -> str | None:
    """Inhalt zwischen `opening` und dem nächsten schließenden Fence (ohne Fence: Rest)."""
    start = text.find(opening)
    if start == -1:
        return None
    start += len(opening)
    end = text.find(FENCE, start)
    if end == -1:
        end = len(text)
    return text[start:end].strip()


def _from_direct(text: str) -> Any | None:
    return _try_loads(text.strip())


def _from_json_fence(text: str) -> Any | None:
    body = _fenced_body(text, JSON_FENCE)
    return _try_loads(body) if body is not None else None


def _from_any_fence(text: str) -> Any | None:
    body = _fenced_body(text, FENCE)
    return _try_loads(body) if body is not None else None


def _from_braces(text: str) -> Any | None:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        return None
    return _try_loads(text[start:end + 1])


# Reihenfolge ist relevant: der erste Treffer gewinnt.
EXTRACTION_STRATEGIES: tuple[tuple[str, Callable[[str], Any | None]], ...] = (
    ("direct", _from_direct),
    ("json_fence", _from_json_fence),
    ("any_fence", _from_any_fence),
    ("braces", _from_braces),
)


def extract_json(raw_text: str) -> Any:
    """
    Extrahiert eine JSON-Struktur aus freiem LLM-Text.

    Raises:
        JSONExtractionError: wenn keine Strategie etwas Parsbares findet
    """
    for name, strategy in EXTRACTION_STRATEGIES:
        data = strategy(raw_text)
        if data is not None:
            if name != "direct":
                logger.debug("Judge-JSON via Fallback '%s' extrahiert", name)
            return data
    raise JSONExtractionError()


def _coerce_score(field: str, value: Any) -> float:
    # null / "" zählen wie ein fehlendes Feld
    if value is None or value == "":
        return 0.0
    if isinstance(value, bool):
        raise ScoreParseError(f"Non-numeric value for {field}: {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ScoreParseError(f"Non-numeric value for {field}: {value!r}") from e


def parse_oracle_scores(data: Any) -> tuple[OracleSubScores, str, list[str]]:
    """
    Liest die fünf Scores + explanation aus dem extrahierten JSON.

    Fehlende Scores werden als 0.0 gewertet und als Flag "missing:<feld>"
    gemeldet. Werte außerhalb von [0, 1] werden nicht geclampet.

    Returns:
        (sub_scores, explanation, flags)

    Raises:
        ScoreParseError: kein JSON-Objekt oder nicht-numerische Werte
        ScoreRangeError: mindestens ein Score außerhalb von [0, 1]
    """
    if not isinstance(data, dict):
        raise ScoreParseError(f"Judge reply is not a JSON object: {type(data).__name__}")

    flags: list[str] = []
    values: dict[str, float] = {}
    for field in SCORE_FIELDS:
        if data.get(field) is None:
            flags.append(f"missing:{field}")
        values[field] = _coerce_score(field, data.get(field))

    if flags:
        logger.warning("Judge-Antwort unvollständig, Default 0.0 für: %s", ", ".join(flags))

    out_of_range = {
        field: value
        for field, value in values.items()
        if not math.isfinite(value) or value < 0.0 or value > 1.0
    }
    if out_of_range:
        raise ScoreRangeError(out_of_range)

    explanation = data.get("explanation") or DEFAULT_EXPLANATION
    if not isinstance(explanation, str):
        explanation = json.dumps(explanation, ensure_ascii=False)

    return OracleSubScores(**values), explanation, flags
