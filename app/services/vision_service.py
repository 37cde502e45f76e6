import json
import re
from typing import Any
from typing import Any
from langchain_core.messages import HumanMessage, SystemMessage
from starlette.datastructures import UploadFile
from app.core.errors import ModelOutputError
from app.core.prompts import USER_TEXT
from app.services.upload_store import save_upload, read_and_discard, to_data_url

def build_messages(prompt: str, data_url: str) -> list:
    """시스템 프롬프트 + (안내 문구, 이미지) user 메시지"""
    return [
        SystemMessage(content=prompt),
        HumanMessage(
            content=[
                {"type": "text", "text": USER_TEXT},
                {"type": "image_url", "image_url": {"url": data_url}},
            ]
        ),
    ]

_FENCED = re.compile(r"```(?:json)?\s*(.*?)\s*```", re.DOTALL)

def parse_model_output(output_text: str) -> Any:
    # 앞뒤를 감싼 마크다운 기호(```json ... ```)만 제거 후 파싱. 스키마 검증은 하지 않습니다.
    clean_text = output_text.strip()
    fenced = _FENCED.fullmatch(clean_text)
    if fenced:
        clean_text = fenced.group(1)
    try:
        return json.loads(clean_text)
    except json.JSONDecodeError as e:
        raise ModelOutputError(f"모델 응답이 JSON이 아닙니다: {clean_text[:100]}") from e

async def analyze_image(file: UploadFile, prompt: str, llm) -> Any:
    # 1. 업로드 파일 디스크 저장 -> 읽고 바로 삭제
    path = await save_upload(file)
    image_bytes = read_and_discard(path)

    # 2. data URL 변환 및 메시지 구성
    data_url = to_data_url(image_bytes, file.content_type)
    messages = build_messages(prompt, data_url)

    # 3. 추론 (외부 API 호출)
    response = await llm.ainvoke(messages)

    # 4. JSON 파싱 및 반환
    return parse_model_output(response.content)
