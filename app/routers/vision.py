# 이미지 분석 API (/analyze, /menu, /recommend)

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile
from app.core.ai_model import get_vision_llm
from app.core.errors import NoImageUploaded, AnalysisFailed
from app.core.prompts import ENDPOINT_PROMPTS
from app.schemas.dtos import DishAnalysis, MenuAnalysis, ErrorResponse
from app.services.vision_service import analyze_image

router = APIRouter(tags=["Vision AI"])

RESPONSE_MODELS = {
    "analyze": DishAnalysis,
    "menu": MenuAnalysis,
    "recommend": DishAnalysis,
}

async def first_uploaded_file(request: Request):
    """필드 이름과 관계없이 multipart 요청의 첫 번째 파일을 반환합니다."""
    try:
        form = await request.form()
    except Exception as e:
        print(f"💡 multipart 파싱 실패: {e}")
        return None
    for _, value in form.multi_items():
        if isinstance(value, UploadFile):
            return value
    return None

def make_analyze_endpoint(name: str, prompt: str):
    async def endpoint(request: Request, llm=Depends(get_vision_llm)):
        file = await first_uploaded_file(request)
        if file is None:
            raise NoImageUploaded()

        try:
            if llm is None:
                raise RuntimeError("비전 모델 클라이언트가 준비되지 않았습니다.")
            return await analyze_image(file, prompt, llm)
        except Exception as e:
            print(f"❌ Vision API error (/{name}): {e}")
            raise AnalysisFailed() from e

    endpoint.__name__ = f"{name}_image"
    endpoint.__doc__ = f"이미지를 업로드하면 /{name} 프롬프트로 분석한 JSON을 반환합니다."
    return endpoint

for _name, _prompt in ENDPOINT_PROMPTS.items():
    router.add_api_route(
        f"/{_name}",
        make_analyze_endpoint(_name, _prompt),
        methods=["POST"],
        responses={
            200: {"model": RESPONSE_MODELS[_name]},
            400: {"model": ErrorResponse},
            500: {"model": ErrorResponse},
        },
    )
