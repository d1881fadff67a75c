import asyncio

import pytest

from puglia_bot.exceptions import ProtocolError
from puglia_bot.welcome import classifier


@pytest.mark.parametrize(
    "raw",
    ["ITALIAN", "Likely ITALIAN.", "italian!", "  Italian\n", "Answer: ITALIAN (confident)"],
)
def test_reduce_verdict_positive(raw):
    assert classifier.reduce_verdict(raw) is True


@pytest.mark.parametrize("raw", ["FOREIGN", "foreign.", "", "   ", "Spanish"])
def test_reduce_verdict_negative(raw):
    assert classifier.reduce_verdict(raw) is False


def test_build_prompt_embeds_name_verbatim():
    prompt = classifier.build_prompt('Zoë "Z" Ångström')

    assert 'The name is: "Zoë "Z" Ångström".' in prompt
    assert "'ITALIAN'" in prompt and "'FOREIGN'" in prompt
    assert prompt.endswith("Answer:")


def test_classify_name_uses_deterministic_options(monkeypatch):
    calls = []

    async def fake_generate(prompt, model=None, options=None, **kwargs):
        calls.append((prompt, options))
        return " Likely ITALIAN. "

    monkeypatch.setattr(classifier.ollama, "generate", fake_generate)

    result = asyncio.run(classifier.classify_name("Giuseppe"))

    assert result.is_match is True
    assert result.raw_text == " Likely ITALIAN. "
    prompt, options = calls[0]
    assert '"Giuseppe"' in prompt
    assert options == {"temperature": 0, "top_p": 1}


def test_classify_name_negative(monkeypatch):
    async def fake_generate(prompt, model=None, options=None, **kwargs):
        return "FOREIGN"

    monkeypatch.setattr(classifier.ollama, "generate", fake_generate)

    assert asyncio.run(classifier.is_likely_italian("John")) is False


def test_classify_name_propagates_errors(monkeypatch):
    async def fake_generate(*args, **kwargs):
        raise ProtocolError(500, "boom", service="ollama")

    monkeypatch.setattr(classifier.ollama, "generate", fake_generate)

    with pytest.raises(ProtocolError):
        asyncio.run(classifier.is_likely_italian("Maria"))
