import pytest

from app.services.judges.parsing import SCORE_FIELDS
from app.services.judges.prompts import build_oracle_system_prompt, build_oracle_user_prompt


def test_system_prompt_names_all_keys():
    prompt = build_oracle_system_prompt()

    for field in SCORE_FIELDS:
        assert f'"{field}"' in prompt
    assert '"explanation"' in prompt
    assert "strict JSON" in prompt


def test_user_prompt_contains_texts_verbatim():
    prompt = build_oracle_user_prompt(
        "Original {braces} prompt",
        "Baseline\nmit Umbruch",
        "MRE: ```code```",
    )

    assert "Original {braces} prompt" in prompt
    assert "Baseline\nmit Umbruch" in prompt
    assert "MRE: ```code```" in prompt
    assert prompt.index("Baseline Answer:") < prompt.index("MRE Answer:")


def test_unknown_prompt_version_raises():
    with pytest.raises(ValueError):
        build_oracle_system_prompt("v9")
    with pytest.raises(ValueError):
        build_oracle_user_prompt("p", "b", "m", prompt_version="v9")
