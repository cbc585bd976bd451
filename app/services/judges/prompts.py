"""
Prompt-Templates für den Oracle-Judge.

System-Prompt definiert die fünf Dimensionen und erzwingt striktes JSON,
User-Prompt enthält Original-Prompt, Baseline- und MRE-Antwort unverändert.
"""


def build_oracle_system_prompt(prompt_version: str = "v1") -> str:
    """
    Baut den System-Prompt für den Vergleich Baseline vs. MRE.

    Output: JSON mit fünf Scores (0-1) und explanation
    """
    if prompt_version == "v1":
        return _ORACLE_SYSTEM_PROMPT_V1
    raise ValueError(f"Unbekannte Prompt-Version: {prompt_version}")


def build_oracle_user_prompt(
    prompt: str,
    baseline_answer: str,
    mre_answer: str,
    prompt_version: str = "v1",
) -> str:
    """Baut den User-Prompt; die drei Texte werden wörtlich eingesetzt."""
    if prompt_version == "v1":
        return _build_oracle_user_prompt_v1(prompt, baseline_answer, mre_answer)
    raise ValueError(f"Unbekannte Prompt-Version: {prompt_version}")


_ORACLE_SYSTEM_PROMPT_V1 = """You are an evaluation model. Your task is to compare two answers to the same user prompt.

You must output strict JSON, no prose, with numeric scores between 0 and 1.

Definitions:
- semantic_similarity: how close the two answers are in meaning (0 = completely different, 1 = identical meaning).
- instruction_fidelity: how well the MRE answer follows the original user instructions compared to baseline (0 = ignores instructions, 1 = perfectly follows).
- factual_consistency: does the MRE answer preserve the same factual claims as the baseline (0 = totally different/wrong facts, 1 = same correct facts).
- style_preservation: how similar the style, tone, and structure are (0 = totally different style, 1 = very similar style).
- hallucination_risk: if the MRE answer introduces unsupported claims or fabrications relative to the baseline and prompt (0 = no hallucinations, 1 = severe hallucinations).

Return strict JSON with this exact structure (no additional text):
{
  "semantic_similarity": <0-1>,
  "instruction_fidelity": <0-1>,
  "factual_consistency": <0-1>,
  "style_preservation": <0-1>,
  "hallucination_risk": <0-1>,
  "explanation": "<short justification>"
}"""


def _build_oracle_user_prompt_v1(prompt: str, baseline_answer: str, mre_answer: str) -> str:
    return f"""Original User Prompt:
{prompt}

Baseline Answer:
{baseline_answer}

MRE Answer:
{mre_answer}

Evaluate the MRE answer compared to the baseline answer. Output strict JSON only."""
