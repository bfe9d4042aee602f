"""
ResumeRover - Application configuration.

Centralized configuration using Pydantic Settings for environment variable management.

Environment Variables:
    All settings can be overridden via environment variables with RESUMEROVER_ prefix.

    Engine Settings:
        RESUMEROVER_MAX_FILE_SIZE=5242880       - Upload ceiling in bytes
        RESUMEROVER_KEYWORD_WEIGHT=0.6          - Share of keywordScore in atsScore
        RESUMEROVER_SKILLS_WEIGHT=0.4           - Share of skillsScore in atsScore
        RESUMEROVER_LOW_COVERAGE_THRESHOLD=50   - Skill coverage below this gets a recommendation

    App Settings:
        RESUMEROVER_DATABASE_URL=...            - SQLAlchemy database URL
        RESUMEROVER_RATE_LIMIT_ENABLED=true     - Toggle slowapi rate limiting
"""
from pydantic_settings import BaseSettings


class EngineSettings(BaseSettings):
    """
    Matching engine policy.

    The weights and thresholds are a documented default policy rather than a
    reproduction of any commercial ATS. Tune them per deployment.
    """
    # Extraction
    max_file_size: int = 5 * 1024 * 1024  # 5MB
    max_text_length: int = 100_000

    # Tokenizer
    max_ngram: int = 3

    # Keyword extraction
    title_window: int = 12
    max_keywords: int = 25
    phrase_min_count: int = 2
    position_boost: float = 2.0
    skill_boost: float = 1.0

    # Scoring
    high_weight: int = 3
    medium_weight: int = 2
    low_weight: int = 1
    keyword_weight: float = 0.6
    skills_weight: float = 0.4

    # Recommendations
    low_coverage_threshold: int = 50
    max_recommendations: int = 10

    class Config:
        env_prefix = "RESUMEROVER_"
        env_file = ".env"
        extra = "ignore"


class Settings(BaseSettings):
    """Combined application settings."""
    engine: EngineSettings = EngineSettings()

    # CORS allowed origins (comma-separated, e.g. "http://localhost:5173,https://myapp.com")
    allowed_origins: str = "*"

    # Database
    database_url: str = "sqlite:///./data/resumerover.db"

    # Database retry settings
    db_retry_max_attempts: int = 3
    db_retry_base_delay: float = 0.1

    # Run `alembic upgrade head` on startup instead of create_all
    run_migrations: bool = False

    rate_limit_enabled: bool = True

    class Config:
        env_prefix = "RESUMEROVER_"
        env_file = ".env"
        extra = "ignore"


# Global settings instance
settings = Settings()
