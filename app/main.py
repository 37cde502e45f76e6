import uvicorn
from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from app.core.ai_model import load_model
from app.core.config import get_settings
from app.core.errors import RelayError, relay_error_handler
from app.routers import vision
from app.schemas.dtos import HealthResponse

# 1. 수명 주기(Lifespan) 관리: 서버 켜질 때 LLM 클라이언트 준비
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    print("🚀 FoodLens AI 서버 시작 중...")

    try:
        load_model()
    except Exception as e:
        # 요청 시점에 다시 생성을 시도합니다.
        print(f"❌ 비전 모델 클라이언트 생성 실패: {e}")

    print(f"✅ Server running at http://localhost:{settings.PORT}")
    yield
    print("👋 AI 서버가 종료됩니다.")

# 2. 앱 생성
app = FastAPI(
    title="FoodLens AI Server",
    description="Image -> multimodal LLM (Groq) food & menu analysis relay",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RelayError, relay_error_handler)

# 3. 라우터 등록
app.include_router(vision.router)


@app.get("/", response_model=HealthResponse)
def health_check():
    return {"status": "ok", "msg": "FoodLens AI Ready"}


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
