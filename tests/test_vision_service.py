import asyncio
import base64
import io
from pathlib import Path

import pytest
from starlette.datastructures import UploadFile

from app.core.config import Settings
from app.core.errors import ModelOutputError
from app.core.prompts import ENDPOINT_PROMPTS, DISH_PROMPT, MENU_PROMPT
from app.services.upload_store import read_and_discard, save_upload, to_data_url
from app.services.vision_service import build_messages, parse_model_output


def test_to_data_url_uses_mime_subtype():
    url = to_data_url(b"abc", "image/jpeg")
    assert url == "data:image/jpeg;base64," + base64.b64encode(b"abc").decode()


def test_to_data_url_without_content_type():
    assert to_data_url(b"abc", None).startswith("data:image/octet-stream;base64,")


def test_to_data_url_content_type_without_slash():
    assert to_data_url(b"abc", "png").startswith("data:image/png;base64,")


def test_read_and_discard_removes_file(tmp_path):
    path = tmp_path / "upload"
    path.write_bytes(b"image")

    assert read_and_discard(path) == b"image"
    assert not path.exists()


def test_parse_model_output_plain_json():
    assert parse_model_output('{"health_level": 3}') == {"health_level": 3}


def test_parse_model_output_strips_markdown_fence():
    text = '```json\n{"summary": "ok"}\n```'
    assert parse_model_output(text) == {"summary": "ok"}


def test_parse_model_output_rejects_prose():
    with pytest.raises(ModelOutputError):
        parse_model_output("This dish looks healthy.")


def test_build_messages_shape():
    system, user = build_messages("PROMPT", "data:image/png;base64,AAAA")

    assert system.content == "PROMPT"
    assert user.content[1] == {
        "type": "image_url",
        "image_url": {"url": "data:image/png;base64,AAAA"},
    }


def test_endpoint_prompts():
    assert ENDPOINT_PROMPTS["analyze"] is DISH_PROMPT
    assert ENDPOINT_PROMPTS["recommend"] is DISH_PROMPT
    assert ENDPOINT_PROMPTS["menu"] is MENU_PROMPT


def test_cors_origin_list(monkeypatch):
    settings = Settings()
    monkeypatch.setattr(settings, "CORS_ORIGINS", "http://a.test, http://b.test,")
    assert settings.cors_origin_list == ["http://a.test", "http://b.test"]


def test_parse_model_output_keeps_backticks_inside_values():
    text = '{"summary": "menu lists ```fried``` items"}'
    assert parse_model_output(text) == {"summary": "menu lists ```fried``` items"}


def test_parse_model_output_fenced_with_backticks_inside_values():
    text = '```json\n{"summary": "uses `ghee` and ```cream```"}\n```'
    assert parse_model_output(text) == {"summary": "uses `ghee` and ```cream```"}


def test_save_upload_removes_partial_file_on_write_error(tmp_path, monkeypatch):
    def failing_write(self, data):
        with open(self, "wb") as f:
            f.write(data[:3])
        raise OSError("No space left on device")

    monkeypatch.setattr(Path, "write_bytes", failing_write)
    upload = UploadFile(file=io.BytesIO(b"image-bytes"), filename="dish.png")

    with pytest.raises(OSError):
        asyncio.run(save_upload(upload, tmp_path))

    assert list(tmp_path.iterdir()) == []
