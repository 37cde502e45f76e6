# 업로드 파일 임시 저장/삭제 (디스크 기반, 사용 직후 삭제)

import base64
import uuid
from pathlib import Path
from starlette.datastructures import UploadFile
from app.core.config import get_settings

DEFAULT_CONTENT_TYPE = "application/octet-stream"

async def save_upload(upload: UploadFile, upload_dir: Path = None) -> Path:
    """업로드된 파일을 UPLOAD_DIR 아래에 랜덤 이름으로 저장하고 경로를 반환합니다."""
    upload_dir = Path(upload_dir or get_settings().UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)

    path = upload_dir / uuid.uuid4().hex
    data = await upload.read()
    try:
        path.write_bytes(data)
    except OSError:
        # 쓰다 만 파일은 남기지 않습니다.
        path.unlink(missing_ok=True)
        raise
    return path

def read_and_discard(path: Path) -> bytes:
    """파일을 읽고 삭제합니다. 읽기에 실패해도 파일은 지웁니다."""
    try:
        return path.read_bytes()
    finally:
        path.unlink(missing_ok=True)

def to_data_url(data: bytes, content_type: str = None) -> str:
    """
    이미지 바이트를 data URL로 변환합니다.
    MIME 타입의 '/' 뒤 부분을 그대로 image/<subtype>으로 사용합니다. (예: image/png -> png)
    """
    subtype = (content_type or DEFAULT_CONTENT_TYPE).split("/")[-1]
    encoded = base64.b64encode(data).decode("utf-8")
    return f"data:image/{subtype};base64,{encoded}"
