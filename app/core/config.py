from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # .env wird automatisch gelesen
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "OracleEvaluatorAPI"

    # Eingehender Key: Aufrufer müssen "Authorization: Bearer <MRE_API_KEY>" senden
    mre_api_key: str = ""

    # Ausgehender Key für den Judge (OpenAI)
    openai_api_key: str = ""
    openai_base_url: str | None = None

    oracle_model: str = "gpt-4o-mini"
    oracle_temperature: float = 0.0
    oracle_max_tokens: int = 500
    oracle_prompt_version: str = "v1"

    # Lokal ohne OpenAI-Zugang: deterministischer Fake-Judge
    oracle_fake_llm: bool = False


def validate_startup_config(settings: Settings) -> None:
    """Validiert kritische Secrets beim Startup (fail-fast)."""
    errors = []

    if not settings.mre_api_key:
        errors.append(
            "MRE_API_KEY is not set. "
            "Set it in .env file or as environment variable. "
            "Required to authenticate callers."
        )

    # Im Fake-Modus wird OpenAI nie aufgerufen
    if not settings.openai_api_key and not settings.oracle_fake_llm:
        errors.append(
            "OPENAI_API_KEY is not set. "
            "Set it in .env file or as environment variable. "
            "Required for LLM-based evaluation."
        )

    if errors:
        error_msg = "Startup validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)
