import os

DEFAULT_LUMA_URL = (
    "https://api.lu.ma/calendar/get-items"
    "?calendar_api_id=cal-slXbDWpGDzDpbwS&period=future&pagination_limit=20"
)


class Events:
    def __init__(self, config: dict | None = None) -> None:
        events_cfg = (config or {}).get("pugliabot", {}).get("events", {})
        self.LUMA_URL: str = str(events_cfg.get("luma_url", os.getenv("LUMA_URL") or DEFAULT_LUMA_URL))
        self.REQUEST_TIMEOUT: float = float(events_cfg.get("request_timeout", os.getenv("EVENTS_TIMEOUT", "15")))
