from gemini_rest_client.models.api_models import GenerationConfigPy, HistoryMessage, InlinePart, TextPart
from gemini_rest_client.services.request_builder import (
    build_generation_config,
    build_target_url,
    convert_history_to_rest_contents,
    prepare_gemini_rest_api_request,
)


def test_target_url_carries_model_and_key():
    url = build_target_url("gemini-1.5-flash", "k123", base_url="https://generativelanguage.googleapis.com/")

    assert url == "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-flash:generateContent?key=k123"


def test_target_url_accepts_full_endpoint():
    url = build_target_url("ignored", "k", base_url="https://proxy.local/v1beta/models/m:generateContent")

    assert url == "https://proxy.local/v1beta/models/m:generateContent?key=k"


def test_generation_config_defaults():
    assert build_generation_config("gemini-1.5-flash", thinking_model_ids=[]) == {
        "temperature": 1,
        "responseMimeType": "text/plain",
        "topP": 0.95,
    }


def test_thinking_model_gets_thinking_budget():
    config = build_generation_config(
        "gemini-2.5-flash-preview-04-17",
        thinking_model_ids=["gemini-2.5-flash-preview-04-17"],
    )

    assert config["thinkingConfig"] == {"thinkingBudget": 8000}


def test_overrides_apply_and_budget_is_configurable():
    overrides = GenerationConfigPy(temperature=0.2, topP=0.5, thinking_budget=1024)

    config = build_generation_config("thinker", overrides, thinking_model_ids=["thinker"])

    assert config["temperature"] == 0.2
    assert config["topP"] == 0.5
    assert config["responseMimeType"] == "text/plain"
    assert config["thinkingConfig"] == {"thinkingBudget": 1024}


def test_history_replays_one_turn_per_message():
    history = [
        HistoryMessage(role="user", content=TextPart(text="Hi")),
        HistoryMessage(role="user", content=InlinePart(mime_type="image/png", base64_data="AAAA")),
        HistoryMessage(role="model", content=TextPart(text="Hello")),
    ]

    assert convert_history_to_rest_contents(history) == [
        {"role": "user", "parts": [{"text": "Hi"}]},
        {"role": "user", "parts": [{"inlineData": {"mimeType": "image/png", "data": "AAAA"}}]},
        {"role": "model", "parts": [{"text": "Hello"}]},
    ]


def test_every_stored_message_is_replayed_including_empty_replies():
    history = [
        HistoryMessage(role="user", content=TextPart(text="Hi")),
        HistoryMessage(role="model"),
        HistoryMessage(role="user", content=TextPart(text="Still there?")),
        HistoryMessage(role="model", content=TextPart(text="")),
    ]

    assert convert_history_to_rest_contents(history) == [
        {"role": "user", "parts": [{"text": "Hi"}]},
        {"role": "model", "parts": []},
        {"role": "user", "parts": [{"text": "Still there?"}]},
        {"role": "model", "parts": [{"text": ""}]},
    ]


def test_prepare_request_puts_current_turn_last():
    history = [HistoryMessage(role="user", content=TextPart(text="Hi")),
               HistoryMessage(role="model", content=TextPart(text="Hello"))]
    current = [TextPart(text="Look"), InlinePart(mime_type="application/pdf", base64_data="JVBE")]

    url, headers, payload = prepare_gemini_rest_api_request(current, history, "gemini-1.5-flash", "secret")

    assert url.endswith("/models/gemini-1.5-flash:generateContent?key=secret")
    assert headers == {"Content-Type": "application/json"}
    assert payload["contents"][-1] == {
        "role": "user",
        "parts": [{"text": "Look"}, {"inlineData": {"mimeType": "application/pdf", "data": "JVBE"}}],
    }
    assert len(payload["contents"]) == 3
    assert set(payload) == {"contents", "generationConfig"}


def test_prepare_request_without_history_has_single_turn():
    _, _, payload = prepare_gemini_rest_api_request([TextPart(text="Bye")], (), "gemini-1.5-flash", "k")

    assert payload["contents"] == [{"role": "user", "parts": [{"text": "Bye"}]}]
