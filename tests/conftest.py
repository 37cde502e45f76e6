import pytest
from fastapi.testclient import TestClient
from langchain_core.messages import AIMessage

from app.core.ai_model import get_vision_llm
from app.core.config import get_settings
from app.main import app


class FakeVisionLLM:
    """ChatOpenAI 대신 사용하는 가짜 클라이언트. 받은 메시지를 기록합니다."""

    def __init__(self, content: str = "{}", error: Exception = None):
        self.content = content
        self.error = error
        self.calls = []

    async def ainvoke(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.content)


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(get_settings(), "UPLOAD_DIR", path)
    return path


@pytest.fixture
def fake_llm():
    return FakeVisionLLM()


@pytest.fixture
def client(fake_llm, upload_dir):
    app.dependency_overrides[get_vision_llm] = lambda: fake_llm
    yield TestClient(app)
    app.dependency_overrides.clear()
