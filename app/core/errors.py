# 클라이언트에 {"error": "..."} 형태로 내려가는 예외들

from fastapi import Request
from fastapi.responses import JSONResponse


class RelayError(Exception):
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NoImageUploaded(RelayError):
    status_code = 400
    message = "No image file uploaded"


class AnalysisFailed(RelayError):
    status_code = 500
    message = "Failed to analyze image"


class ModelOutputError(ValueError):
    """모델 응답이 올바른 JSON이 아닐 때 발생합니다."""


async def relay_error_handler(request: Request, exc: RelayError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
