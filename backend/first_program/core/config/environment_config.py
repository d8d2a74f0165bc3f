import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


# .env values override any empty defaults from the container environment.
try:
    load_dotenv(dotenv_path=os.path.join(os.getcwd(), ".env"), override=True)
except OSError:
    # Fallback to default behavior
    load_dotenv(override=True)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class EnvironmentConfig:
    app_env: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))
    # Shown in the console welcome banner and the API title
    app_name: str = field(default_factory=lambda: os.getenv("APP_NAME", "MyFirstProgram"))
    app_version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    # Feature flags gate the console demos and the API routers
    enable_type_conversion: bool = field(default_factory=lambda: _env_flag("FEATURE_TYPE_CONVERSION", "true"))
    enable_oracle_service: bool = field(default_factory=lambda: _env_flag("FEATURE_ORACLE_SERVICE", "true"))
    # Logging sinks
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_dir: str = field(default_factory=lambda: os.getenv("LOG_DIR", "logs"))
    log_to_file: bool = field(default_factory=lambda: _env_flag("LOG_TO_FILE", "true"))

    def validate(self) -> "EnvironmentConfig":
        """Raise ValueError when required application settings are blank."""
        if not self.app_name or not self.app_name.strip():
            raise ValueError("Application configuration is missing: APP_NAME is empty")
        if not self.app_version or not self.app_version.strip():
            raise ValueError("Application configuration is missing: APP_VERSION is empty")
        return self
