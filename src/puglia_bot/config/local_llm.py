import os


class LocalLLM:
    def __init__(self, config: dict | None = None) -> None:
        llm_cfg = (config or {}).get("pugliabot", {}).get("local_llm", {})
        self.OLLAMA_HOST: str = str(llm_cfg.get("host", os.getenv("OLLAMA_HOST") or "http://localhost:11411"))
        self.OLLAMA_MODEL: str = str(llm_cfg.get("model", os.getenv("OLLAMA_MODEL") or "llama3.2:1b"))
        self.REQUEST_TIMEOUT: float = float(llm_cfg.get("request_timeout", os.getenv("OLLAMA_TIMEOUT", "60")))
