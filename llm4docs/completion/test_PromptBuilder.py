import pytest

from .CompletionClient import StaticCompletionClient
from .PromptBuilder import build_custom_prompt, build_preset_prompt
from .prompts import Presets


def test_preset_prompt_contains_selected_text():
    request = build_preset_prompt("formal", "hey, what's up", context="Be nice.")
    assert request.context == "Be nice."
    assert request.selected_text == "hey, what's up"
    assert request.instruction.endswith("hey, what's up")
    assert "formal" in request.instruction


def test_custom_prompt_appends_text():
    request = build_custom_prompt("Translate to French", "Good morning")
    assert request.instruction == "Translate to French\n\nGood morning"
    assert request.context == ""


def test_empty_inputs_are_accepted():
    request = build_custom_prompt("", "", context="")
    assert request.instruction == "\n\n"


def test_unknown_preset():
    with pytest.raises(KeyError):
        build_preset_prompt("pirate", "Ahoy")


def test_all_presets_are_templates():
    assert "formal" in Presets.names()
    assert "get" not in Presets.names()
    for name in Presets.names():
        assert "{text}" in Presets.get(name)


def test_static_client_records_requests():
    client = StaticCompletionClient(lambda request: request.selected_text.upper())
    request = build_custom_prompt("Shout", "quiet words")
    assert client.complete(request) == "QUIET WORDS"
    assert client.requests == [request]
