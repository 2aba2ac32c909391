from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / ".jobboard"
    api_prefix: str = "/api"
    session_cookie_name: str = "jobboard_session"
    session_ttl_seconds: int = 7 * 24 * 3600  # 7 days
    session_cookie_secure: bool = False
    cors_origins: list[str] = [
        "http://127.0.0.1:5173",
        "http://localhost:5173",
    ]
    # Admin accounts come from the seed script unless self-registration is enabled.
    allow_admin_registration: bool = False
    log_level: str = "INFO"
    log_file: Path | None = None
    # Stored on every new application; no scoring algorithm exists yet.
    compatibility_placeholder: float = 75.5

    @property
    def db_path(self) -> Path:
        return self.data_dir / "jobboard.sqlite"

    model_config = {"env_prefix": "JOBBOARD_"}


settings = Settings()
