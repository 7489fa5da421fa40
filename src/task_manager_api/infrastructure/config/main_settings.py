from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings, read from ``TASK_API_*`` environment variables
    (or a local ``.env`` file).
    """

    app_name: str = "Task Management API"
    app_version: str = "1.0.0"
    env: str = Field(default="local", description="Environment label: local, qa, staging, prod")

    host: str = "0.0.0.0"
    port: int = 8080

    log_level: str = "INFO"
    log_format: str = Field(default="", description="json | console | empty to pick by env")

    seed_sample_task: bool = Field(default=True, description="Create the sample task at startup")
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    metrics_enabled: bool = True
    tracing_enabled: bool = False

    model_config = SettingsConfigDict(env_prefix="TASK_API_", env_file=".env", extra="ignore")
