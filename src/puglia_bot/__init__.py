"""PugliaTechs community assistant for Telegram."""

__version__ = "1.0.2"
