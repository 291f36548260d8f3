"""
config.py
---------
Central configuration for the journey editor backend.
All values come from environment variables, with a backend/.env file
picked up when present. Nothing secret is hard-coded.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the backend directory (if it exists). Won't override vars
# already set in the shell.
_env_path = Path(__file__).parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path, override=False)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


# ── Journey backend (submission target) ──────────────────────────────────────
# The createJourney endpoint lives at  {JOURNEY_API_BASE_URL}/journeys
JOURNEY_API_BASE_URL: str = os.getenv("JOURNEY_API_BASE_URL", "http://localhost:3001/api")
# Timeout in seconds for the submission POST
JOURNEY_API_TIMEOUT: float = float(os.getenv("JOURNEY_API_TIMEOUT", "30"))

# ── Editor event log ─────────────────────────────────────────────────────────
# One .jsonl file per draft, written by modules.observability.logger
EDITOR_EVENT_LOG: bool = _flag("EDITOR_EVENT_LOG", "false")
EDITOR_LOG_DIR: Path = Path(
    os.getenv("EDITOR_LOG_DIR", str(Path(__file__).resolve().parent / "logs"))
)

# ── HTTP surface ─────────────────────────────────────────────────────────────
API_HOST: str = os.getenv("API_HOST", "0.0.0.0")
API_PORT: int = int(os.getenv("API_PORT", "8000"))
