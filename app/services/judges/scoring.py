"""
Aggregation der fünf Oracle-Sub-Scores zu einem Gesamt-Score.
"""

from app.models.pydantic import OracleSubScores


def compute_raw_oracle_score(scores: OracleSubScores) -> float:
    """
    Gewichtete Summe ohne Clamping.

    Die Gewichte summieren sich nicht auf 1 (0.4 + 0.25 + 0.2 + 0.15 - 0.3 = 0.7),
    der Rohwert kann daher < 0 oder > 1 werden.
    """
    return (
        0.4 * scores.semantic_similarity
        + 0.25 * scores.instruction_fidelity
        + 0.2 * scores.factual_consistency
        + 0.15 * scores.style_preservation
        - 0.3 * scores.hallucination_risk
    )


def compute_oracle_score(scores: OracleSubScores) -> float:
    """
    Berechnet den Oracle-Score.

    Returns:
        Gewichtete Summe, geclampet auf [0,1]
    """
    raw = compute_raw_oracle_score(scores)

    # Clamp auf [0,1]
    if raw < 0.0:
        return 0.0
    if raw > 1.0:
        return 1.0
    return raw
