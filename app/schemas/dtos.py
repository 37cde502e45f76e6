# 응답 형태(DTO) 정의 - API 문서용입니다. 모델 응답을 검증하지 않습니다.

from pydantic import BaseModel
from typing import List

# [/analyze, /recommend] 요리 분석 결과
class DishAnalysis(BaseModel):
    ingredients: List[str]       # ["paneer", "yogurt", "spices"]
    protein_sources: List[str]   # ["paneer", "yogurt"]
    health_level: int            # 0 ~ 5
    benefits: List[str]
    disadvantages: List[str]
    personAvoid: List[str]       # ["Diabetic"]
    personPrefer: List[str]      # ["Asthma"]

# [/menu] 메뉴판 분석 결과
class MenuItemScore(BaseModel):
    name: str
    health_score: int  # 0 ~ 10

class MenuAnalysis(BaseModel):
    menu_items: List[MenuItemScore]
    overall_health_score: int  # 0 ~ 10
    summary: str

class ErrorResponse(BaseModel):
    error: str

class HealthResponse(BaseModel):
    status: str
    msg: str
