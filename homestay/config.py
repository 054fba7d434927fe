from pydantic_settings import BaseSettings

# Guests book in local time; the app sends dates as UTC ISO timestamps
DEFAULT_TIMEZONE = "Asia/Ho_Chi_Minh"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    api_base_url: str
    api_timeout_seconds: float = 30.0
    log_level: str = "INFO"
    timezone: str = DEFAULT_TIMEZONE
    catalog_page_size: int = 10
    extra_guest_allowance: int = 2
