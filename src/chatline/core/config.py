from typing import ClassVar

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Core settings for chatline.
    Loads from .env file and environment variables.
    .env file values take precedence over system environment variables.
    """
    # System
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True

    # LLM
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str | None = None  # For DeepSeek/Local LLM
    DEFAULT_MODEL: str = "gpt-4o"

    # Prompt budget (estimated tokens, not real tokenizer output)
    CHARS_PER_TOKEN: int = 4
    MAX_PROMPT_TOKEN_LENGTH: int = 7000
    SOLUTION_TOKEN_LENGTH: int = 1000  # Reserved for the model's answer

    model_config: ClassVar[SettingsConfigDict] = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Allow extra fields for future compatibility
        extra="ignore"
    )

    @property
    def MAX_AVAILABLE_PROMPT_LENGTH(self) -> int:
        """Token ceiling for the prompt once the answer budget is reserved."""
        return self.MAX_PROMPT_TOKEN_LENGTH - self.SOLUTION_TOKEN_LENGTH

    @classmethod
    def settings_customise_sources(cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings):
        """Override source priority: .env file takes precedence over system environment variables."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)


# Global settings instance
settings = Settings()
