from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    app_name: str = "Student Reports"
    debug: bool = False

    # Student data source
    students_api_url: str = "https://api.example.com/students"
    request_timeout: Optional[float] = None

    # Application settings
    log_level: str = "INFO"
    log_dir: str = "logs"
    report_log_enabled: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
