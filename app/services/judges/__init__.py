"""
Oracle-Judge Modul für die Bewertung komprimierter (MRE) Antworten.

Unterstützt:
- Strict JSON Output mit fünf Dimensionen
- Robustes Parsing (direkt, Codeblock, Klammer-Suche)
- Gewichteter, geclampeter Oracle-Score
"""

from app.services.judges.oracle_judge import OracleJudge
from app.services.judges.parsing import extract_json, parse_oracle_scores
from app.services.judges.scoring import compute_oracle_score

__all__ = ["OracleJudge", "compute_oracle_score", "extract_json", "parse_oracle_scores"]
