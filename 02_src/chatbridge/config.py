"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass, field
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

DEFAULT_TRIGGERS = ("human", "agent", "operator", "real person", "representative")


def _int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def parse_triggers(raw: str | None) -> tuple[str, ...]:
    """Parse a comma separated trigger list, falling back to the defaults."""
    if not raw:
        return DEFAULT_TRIGGERS
    phrases = tuple(p.strip().lower() for p in raw.split(",") if p.strip())
    return phrases or DEFAULT_TRIGGERS


@dataclass(frozen=True)
class ChannelSettings:
    """Connection settings for the Chatwoot helpdesk."""

    base_url: str = "https://app.chatwoot.com"
    account_id: str = ""
    api_key: str = ""
    inbox_id: int = 0
    timeout: float = 10.0
    contact_email_domain: str = "example.com"

    @classmethod
    def from_env(cls) -> "ChannelSettings":
        return cls(
            base_url=os.getenv("CHATWOOT_BASE_URL", "https://app.chatwoot.com").rstrip("/"),
            account_id=os.getenv("CHATWOOT_ACCOUNT_ID", ""),
            api_key=os.getenv("CHATWOOT_API_KEY", ""),
            inbox_id=_int("CHATWOOT_INBOX_ID", 0),
            timeout=_float("CHATWOOT_TIMEOUT", 10.0),
            contact_email_domain=os.getenv("CONTACT_EMAIL_DOMAIN", "example.com"),
        )


@dataclass(frozen=True)
class Settings:
    """Top-level service settings."""

    channel: ChannelSettings = field(default_factory=ChannelSettings)
    triggers: tuple[str, ...] = DEFAULT_TRIGGERS
    responder: str = "echo"  # "echo" or "llm"
    api_host: str = "localhost"
    api_port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            channel=ChannelSettings.from_env(),
            triggers=parse_triggers(os.getenv("HANDOFF_TRIGGERS")),
            responder=os.getenv("RESPONDER", "echo").strip().lower(),
            api_host=os.getenv("API_HOST", "localhost"),
            api_port=_int("API_PORT", 8000),
        )
