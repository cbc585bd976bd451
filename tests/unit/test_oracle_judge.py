"""
Tests für den OracleJudge mit gemocktem LLM-Client.
"""

from unittest.mock import Mock

import pytest

from app.core.errors import JSONExtractionError, ScoreRangeError, UpstreamTransportError
from app.llm.fake_client import FakeLLMClient
from app.models.pydantic import EvaluationRequest, OracleScoreResult
from app.services.judges.oracle_judge import OracleJudge


@pytest.fixture
def req():
    return EvaluationRequest(
        prompt="What is 2 + 2?",
        baseline_answer="2 + 2 equals 4.",
        mre_answer="4",
    )


def test_judge_returns_weighted_result(req):
    judge = OracleJudge(llm_client=FakeLLMClient())

    result = judge.judge(req)

    assert isinstance(result, OracleScoreResult)
    assert result.semantic_similarity == 0.9
    assert result.hallucination_risk == 0.1
    assert result.oracle_score == pytest.approx(0.76)
    assert result.raw_model_explanation.startswith("Fake-Judge")


def test_judge_makes_exactly_one_deterministic_call(req, fake_llm):
    judge = OracleJudge(llm_client=fake_llm)

    judge.judge(req)

    assert len(fake_llm.calls) == 1
    call = fake_llm.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert call["temperature"] == 0.0
    assert call["max_tokens"] == 500
    assert "hallucination_risk" in call["system_prompt"]
    assert req.baseline_answer in call["prompt"]
    assert req.mre_answer in call["prompt"]


def test_judge_handles_fenced_reply(req):
    reply = (
        "```json\n"
        '{"semantic_similarity": 1, "instruction_fidelity": 1, "factual_consistency": 1,'
        ' "style_preservation": 1, "hallucination_risk": 0, "explanation": "identisch"}\n'
        "```"
    )
    result = OracleJudge(llm_client=FakeLLMClient(reply)).judge(req)

    assert result.oracle_score == pytest.approx(1.0)
    assert result.raw_model_explanation == "identisch"


def test_judge_raises_on_reply_without_json(req):
    judge = OracleJudge(llm_client=FakeLLMClient("I refuse."))

    with pytest.raises(JSONExtractionError):
        judge.judge(req)


def test_judge_raises_on_out_of_range_reply(req):
    judge = OracleJudge(llm_client=FakeLLMClient('{"semantic_similarity": 1.5}'))

    with pytest.raises(ScoreRangeError):
        judge.judge(req)


def test_judge_does_not_retry_upstream_errors(req):
    mock_llm = Mock()
    mock_llm.complete.side_effect = UpstreamTransportError('{"error": "rate limited"}')
    judge = OracleJudge(llm_client=mock_llm)

    with pytest.raises(UpstreamTransportError):
        judge.judge(req)

    assert mock_llm.complete.call_count == 1


def test_fake_client_keeps_no_call_history(req):
    llm = FakeLLMClient()
    judge = OracleJudge(llm_client=llm)

    for _ in range(3):
        judge.judge(req)

    assert not hasattr(llm, "calls")
