from langchain_openai import ChatOpenAI
from app.core.config import get_settings

# 전역 변수 (싱글톤 패턴)
_model = None

def build_chat_model(settings=None) -> ChatOpenAI:
    """
    Groq의 OpenAI 호환 엔드포인트를 바라보는 비전 LLM 클라이언트를 생성합니다.
    응답은 항상 JSON 객체로 강제합니다 (response_format=json_object).
    """
    settings = settings or get_settings()
    return ChatOpenAI(
        model=settings.VISION_MODEL,
        temperature=settings.VISION_TEMPERATURE,
        top_p=settings.VISION_TOP_P,
        max_tokens=settings.VISION_MAX_TOKENS,
        streaming=False,
        api_key=settings.GROQ_API_KEY,
        base_url=settings.GROQ_API_BASE,
        model_kwargs={"response_format": {"type": "json_object"}},
    )

def load_model():
    """서버 시작 시 LLM 클라이언트를 준비합니다."""
    global _model

    settings = get_settings()
    if not settings.GROQ_API_KEY:
        print("⚠️ 경고: GROQ_API_KEY가 설정되지 않았습니다!")
        print("   -> 분석 요청은 500으로 실패합니다.")

    print(f"🔄 비전 모델 클라이언트 생성 중... (Model: {settings.VISION_MODEL})")
    _model = build_chat_model(settings)
    print("✅ 비전 모델 클라이언트 준비 완료")

def get_model_instance() -> ChatOpenAI:
    """라우터(Depends)에서 모델을 가져올 때 사용합니다. 아직 없으면 생성합니다."""
    if _model is None:
        load_model()
    return _model

def get_vision_llm():
    """
    FastAPI 의존성. 클라이언트 생성 실패 시 None을 돌려주고,
    실패 처리(500)는 엔드포인트에서 합니다.
    """
    try:
        return get_model_instance()
    except Exception as e:
        print(f"❌ 비전 모델 클라이언트 생성 실패: {e}")
        return None
