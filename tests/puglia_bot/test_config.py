import pytest

from puglia_bot.config.core import Core
from puglia_bot.config.events import DEFAULT_LUMA_URL, Events
from puglia_bot.config.loader import load_raw_config, resolve_config_path
from puglia_bot.config.local_llm import LocalLLM


def test_load_raw_config_missing_default_returns_empty(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PUGLIA_BOT_CONFIG", raising=False)

    assert load_raw_config() == {}


def test_load_raw_config_missing_explicit_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_raw_config(tmp_path / "absent.toml")


def test_load_raw_config_reads_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[pugliabot.local_llm]\nmodel = "llama3.1:8b"\n', encoding="utf-8")

    assert load_raw_config(path) == {"pugliabot": {"local_llm": {"model": "llama3.1:8b"}}}


def test_config_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "bot.toml"
    path.write_text('[pugliabot.core]\nhttp_port = 9090\n', encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PUGLIA_BOT_CONFIG", str(path))

    assert resolve_config_path() == (path, True)
    assert load_raw_config() == {"pugliabot": {"core": {"http_port": 9090}}}


def test_config_path_from_environment_must_exist(tmp_path, monkeypatch):
    monkeypatch.setenv("PUGLIA_BOT_CONFIG", str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError, match="missing.toml"):
        load_raw_config()


def test_explicit_path_beats_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("PUGLIA_BOT_CONFIG", str(tmp_path / "ignored.toml"))

    assert resolve_config_path(tmp_path / "chosen.toml") == (tmp_path / "chosen.toml", True)


def test_invalid_toml_names_the_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[pugliabot.core\n", encoding="utf-8")

    with pytest.raises(ValueError, match="config.toml"):
        load_raw_config(path)


def test_local_llm_defaults(monkeypatch):
    monkeypatch.delenv("OLLAMA_HOST", raising=False)
    monkeypatch.delenv("OLLAMA_MODEL", raising=False)

    llm = LocalLLM({})

    assert llm.OLLAMA_HOST == "http://localhost:11411"
    assert llm.OLLAMA_MODEL == "llama3.2:1b"


def test_toml_overrides_environment(monkeypatch):
    monkeypatch.setenv("OLLAMA_MODEL", "from-env")

    llm = LocalLLM({"pugliabot": {"local_llm": {"model": "from-toml"}}})
    assert llm.OLLAMA_MODEL == "from-toml"

    assert LocalLLM({}).OLLAMA_MODEL == "from-env"


def test_events_default_url(monkeypatch):
    monkeypatch.delenv("LUMA_URL", raising=False)
    assert Events({}).LUMA_URL == DEFAULT_LUMA_URL


def test_core_requires_telegram_credentials(monkeypatch):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)

    with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
        Core({})


def test_core_loads_manifesto_once(tmp_path, monkeypatch):
    manifesto = tmp_path / "manifesto.txt"
    manifesto.write_text("  Siamo PugliaTechs.\n", encoding="utf-8")
    monkeypatch.setenv("MANIFESTO_FILE", str(manifesto))

    core = Core({})
    manifesto.write_text("changed", encoding="utf-8")

    assert core.manifesto == "Siamo PugliaTechs."


def test_core_missing_manifesto_is_empty(tmp_path, monkeypatch):
    monkeypatch.setenv("MANIFESTO_FILE", str(tmp_path / "nope.txt"))

    assert Core({}).manifesto == ""
