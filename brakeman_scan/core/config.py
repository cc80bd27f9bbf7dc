import os

from pydantic import BaseModel

VERSION = "0.1.0"


class Settings(BaseModel):
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Reports larger than this are not parsed (0 disables the cap)
    MAX_REPORT_BYTES: int = int(os.getenv("MAX_REPORT_BYTES", str(50 * 1024 * 1024)))

    # Report location
    WORKSPACE_DIR: str = os.getenv("WORKSPACE_DIR", ".")
    DEFAULT_OUTPUT_FILE: str = os.getenv("DEFAULT_OUTPUT_FILE", "brakeman-output.json")
    REPORT_ENCODING: str = os.getenv("REPORT_ENCODING", "utf-8")


settings = Settings()
