import os
import logging
from pathlib import Path

from dotenv import load_dotenv

loaded = load_dotenv()
if not loaded and Path(".env").exists():
	raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def database_url() -> str:
	return get_str_env("DATABASE_URL", "sqlite:///data/quotes.db")


def scrape_delay_ms() -> int:
	return get_int_env("SCRAPE_DELAY_MS", 1500)


def server_port() -> int:
	return get_int_env("SERVER_PORT", 3001)


def cors_origins() -> list[str]:
	raw = get_str_env("CORS_ORIGINS", "*")
	return [o.strip() for o in raw.split(",") if o.strip()]
