from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    secret_key: str = "dev-secret-change-in-production"

    redis_url: str = "redis://localhost:6379/0"
    job_queue_name: str = "processing"
    job_poll_interval_seconds: int = 5

    storage_backend: str = "local"
    local_storage_dir: str = "./storage"
    s3_bucket: str = ""
    s3_endpoint: str = ""
    s3_region: str = ""
    s3_access_key: str = ""
    s3_secret_key: str = ""
    s3_public_base_url: str = ""

    extraction_provider: str = "openai"
    extraction_model_name: str = "gpt-4o-mini"
    extraction_timeout_seconds: int = 120
    source_fetch_timeout_seconds: int = 60

    cleanup_provider: str = "openai"
    cleanup_model_name: str = "gpt-4o-mini"
    cleanup_temperature: float = 0.2
    cleanup_timeout_seconds: int = 120

    openai_api_key: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_base_url: str = ""
    openrouter_api_key: str = ""
    gemini_api_key: str = ""

    synthesis_primary_url: str = ""
    synthesis_primary_timeout_seconds: int = 120
    synthesis_secondary_model: str = "tts-1"
    synthesis_secondary_voice: str = "alloy"
    synthesis_timeout_seconds: int = 120

    default_voice_id: str = "Joanna"
    max_upload_bytes: int = 50 * 1024 * 1024

    poll_interval_seconds: float = 5.0
    poll_max_attempts: int = 60
