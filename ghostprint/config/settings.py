from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    protocol_prefix: str = "ghostprint://payload="
    payload_delimiter: str = Field(default="/", min_length=1, max_length=1)

    downloads_dir: Path = Path.home() / "Downloads"
    document_extension: str = ".pdf"
    fetch_timeout_seconds: float = Field(default=60.0, gt=0)
    fetch_verify_tls: bool = True

    java_path: Path = Path("print/win-jre/bin/java.exe")
    jar_path: Path = Path("print/app-lib/printpdf-1.0-jar-with-dependencies.jar")
    print_timeout_seconds: float = Field(default=120.0, gt=0)

    printer_backend: str = "cups"
    printer_enumeration_timeout_seconds: float = Field(default=15.0, gt=0)
    static_printers: list[str] = Field(default_factory=list)
