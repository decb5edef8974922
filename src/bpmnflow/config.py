"""Configuration management."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Config:
    """Application configuration."""

    # Input
    DEFAULT_BPMN_FILE: str = os.getenv("BPMN_DEFAULT_FILE", "process.bpmn")
    BPMN_NAMESPACE: str = "http://www.omg.org/spec/BPMN/20100524/MODEL"

    # Paths
    BASE_DIR: Path = Path(__file__).parent.parent.parent
    OUTPUT_DIR: Path = Path(os.getenv("BPMN_OUTPUT_DIR", str(BASE_DIR / "output")))

    # Logging
    LOG_LEVEL: str = os.getenv("BPMN_LOG_LEVEL", "WARNING")

    # API
    MAX_UPLOAD_BYTES: int = int(os.getenv("BPMN_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
    ALLOWED_UPLOAD_SUFFIXES: tuple[str, ...] = (".bpmn", ".xml")

    # Parsing
    UNKNOWN_SIGNAL_TEMPLATE: str = "Unknown signal reference: {ref}"

    @classmethod
    def ensure_dirs(cls):
        """Ensure output directories exist."""
        cls.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
