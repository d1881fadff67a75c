import os
import warnings

# Ensure required environment variables for config.Core
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:test-token")
os.environ.setdefault("TELEGRAM_API_ID", "1")
os.environ.setdefault("TELEGRAM_API_HASH", "test-hash")
os.environ.setdefault("SESSION_NAME", "puglia_bot_test")

# Silence deprecation warnings surfaced from third-party dependencies during tests
warnings.filterwarnings("ignore", category=DeprecationWarning, module=r"^telethon\.")


def pytest_configure(config):
    warnings.filterwarnings("ignore", category=DeprecationWarning, module=r"^telethon\.")
