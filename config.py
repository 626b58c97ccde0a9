import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Book Catalog")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")

    # Logging settings
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "DEBUG" if _env_flag("DEBUG") else "WARNING").upper()
    )

    # CLI settings: plain | json | rich
    default_output: str = os.getenv("LIB_CLI_OUTPUT", "plain")


settings = Settings()
