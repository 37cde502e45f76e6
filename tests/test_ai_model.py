import pytest

from app.core import ai_model
from app.core.config import get_settings


@pytest.fixture
def settings(monkeypatch):
    settings = get_settings()
    monkeypatch.setattr(settings, "GROQ_API_KEY", "test-key")
    monkeypatch.setattr(ai_model, "_model", None)
    return settings


def test_build_chat_model_request_parameters(settings):
    llm = ai_model.build_chat_model(settings)

    assert llm.model_name == "meta-llama/llama-4-scout-17b-16e-instruct"
    assert llm.temperature == 0
    assert llm.top_p == 1
    assert llm.max_tokens == 4870
    assert llm.streaming is False
    assert llm.model_kwargs["response_format"] == {"type": "json_object"}
    assert llm.openai_api_base == "https://api.groq.com/openai/v1"


def test_model_instance_is_built_once(settings):
    first = ai_model.get_model_instance()
    second = ai_model.get_model_instance()

    assert first is second


def test_get_vision_llm_returns_shared_instance(settings):
    assert ai_model.get_vision_llm() is ai_model.get_model_instance()
