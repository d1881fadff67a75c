import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class Core:
    def __init__(self, config: dict | None = None) -> None:
        cfg = (config or {}).get("pugliabot", {})
        telegram_cfg = cfg.get("telegram", {})
        runtime_cfg = cfg.get("runtime", {})

        token_env = str(telegram_cfg.get("token_env", "TELEGRAM_BOT_TOKEN"))

        self.TELEGRAM_BOT_TOKEN: str | None = os.getenv(token_env)
        self.TELEGRAM_API_ID: int = int(telegram_cfg.get("api_id") or os.getenv("TELEGRAM_API_ID", "0"))
        self.TELEGRAM_API_HASH: str | None = telegram_cfg.get("api_hash") or os.getenv("TELEGRAM_API_HASH")
        self.SESSION_NAME: str = str(telegram_cfg.get("session_name", os.getenv("SESSION_NAME", "puglia_bot")))

        self.HTTP_PORT: int = int(runtime_cfg.get("http_port", os.getenv("HTTP_PORT", "8080")))
        self.LOG_LEVEL: str = str(runtime_cfg.get("log_level", os.getenv("LOG_LEVEL", "info")))
        self.SHUTDOWN_GRACE: float = float(runtime_cfg.get("shutdown_grace", os.getenv("SHUTDOWN_GRACE", "10")))
        self.MANIFESTO_FILE: str = str(
            cfg.get("manifesto_file", os.getenv("MANIFESTO_FILE", "data/manifesto.txt"))
        )

        required = [
            ("TELEGRAM_BOT_TOKEN", self.TELEGRAM_BOT_TOKEN),
            ("TELEGRAM_API_ID", self.TELEGRAM_API_ID),
            ("TELEGRAM_API_HASH", self.TELEGRAM_API_HASH),
        ]
        missing = [name for name, val in required if not val]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")

        self.manifesto: str = self._load_manifesto()

    def _load_manifesto(self) -> str:
        """Load the manifesto text from the configured file."""

        file_path = (self.MANIFESTO_FILE or "").strip()
        if not file_path:
            return ""

        path = Path(file_path)
        if not path.is_file():
            logger.warning("Manifesto file %s not found; answers will rely on events only.", path)
            return ""

        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            logger.warning("Failed to read manifesto file %s: %s", path, exc)
            return ""
