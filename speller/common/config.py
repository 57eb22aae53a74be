import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    snapshot_path: str = os.getenv("SPELLER_SNAPSHOT_PATH", "/tmp/speller_snapshot.json")
    preserve_whitespace: bool = _env_flag("SPELLER_PRESERVE_WHITESPACE", "true")
    request_timeout_s: int = int(os.getenv("SPELLER_REQUEST_TIMEOUT_S", "8"))
    wordlist_limit: int = int(os.getenv("SPELLER_WORDLIST_LIMIT", "50000"))


settings = Settings()
