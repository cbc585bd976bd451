from pydantic import BaseModel, ConfigDict, Field


class EvaluationRequest(BaseModel):
    """
    Request-Body für den /oracle/eval-Endpoint.
    Alle drei Felder sind Pflicht und dürfen nicht leer sein.
    """
    model_config = ConfigDict(frozen=True, strict=True)

    prompt: str = Field(min_length=1)
    baseline_answer: str = Field(min_length=1)
    mre_answer: str = Field(min_length=1)


class OracleSubScores(BaseModel):
    """
    Die fünf Teilbewertungen des Judges, jeweils in [0, 1].
    hallucination_risk ist die einzige "negative" Dimension (1 = starke Halluzination).
    """
    model_config = ConfigDict(frozen=True)

    semantic_similarity: float = Field(ge=0.0, le=1.0)
    instruction_fidelity: float = Field(ge=0.0, le=1.0)
    factual_consistency: float = Field(ge=0.0, le=1.0)
    style_preservation: float = Field(ge=0.0, le=1.0)
    hallucination_risk: float = Field(ge=0.0, le=1.0)


class OracleScoreResult(OracleSubScores):
    """
    Response-Body für den /oracle/eval-Endpoint.
    """
    oracle_score: float = Field(ge=0.0, le=1.0)
    raw_model_explanation: str
