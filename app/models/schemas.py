from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional, List


class StyleOption(BaseModel):
    """선택 가능한 옵션 (스타일, 변경 항목, 자재 등)"""
    id: str
    name: str
    description: str


class OptionsCatalog(BaseModel):
    """위저드 화면에서 사용하는 전체 옵션 목록"""
    modes: List[StyleOption]
    styles: List[StyleOption]
    changes: List[StyleOption]
    cabinet_colors: List[StyleOption]
    countertop_materials: List[StyleOption]
    wall_colors: List[StyleOption]
    default_style: str
    default_mode: str
    default_intensity: float


class TransformRequest(BaseModel):
    """이미지 변환 요청 (프론트엔드는 camelCase 로 전송)

    사진 외의 옵션은 타입이 틀려도 요청을 거절하지 않는다.
    잘못된 값은 None 으로 바꾸고 기본값 처리는 normalizer 에 맡긴다.
    """
    model_config = ConfigDict(populate_by_name=True)

    current_room: Optional[str] = Field(default=None, alias="currentRoom")
    style: Optional[str] = None
    mode: Optional[str] = None
    intensity: Optional[float] = None
    changes: Optional[List[str]] = None
    cabinet_color: Optional[str] = Field(default=None, alias="cabinetColor")
    countertop_material: Optional[str] = Field(default=None, alias="countertopMaterial")
    wall_color: Optional[str] = Field(default=None, alias="wallColor")

    @field_validator("style", "mode", "cabinet_color", "countertop_material", "wall_color", mode="before")
    @classmethod
    def lenient_text(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("intensity", mode="before")
    @classmethod
    def lenient_intensity(cls, value: Any) -> Optional[float]:
        # bool 은 int 의 하위 타입이라 따로 제외
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str):
            try:
                return float(value)
            except ValueError:
                return None
        return None

    @field_validator("changes", mode="before")
    @classmethod
    def lenient_changes(cls, value: Any) -> Optional[List[str]]:
        """문자열 하나는 목록으로, 문자열이 아닌 항목은 제외"""
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [item for item in value if isinstance(item, str)]
        return None


class NormalizedParameters(BaseModel):
    """기본값 적용 및 범위 보정이 끝난 파라미터"""
    model_config = ConfigDict(frozen=True)

    style: str
    mode: str
    intensity: float
    preservation_strength: float
    changes: List[str] = Field(default_factory=list)
    cabinet_color: Optional[str] = None
    countertop_material: Optional[str] = None
    wall_color: Optional[str] = None


class DerivedParameters(BaseModel):
    """Stability API 로 전송할 프롬프트와 수치 파라미터"""
    model_config = ConfigDict(frozen=True)

    preservation_strength: float
    positive_prompt: str
    negative_prompt: str
    cfg_scale: int
    steps: int
    samples: int


class GenerationResult(BaseModel):
    """Stability API 가 돌려준 첫 번째 결과물"""
    image_base64: str
    finish_reason: Optional[str] = None
    seed: Optional[int] = None

    @property
    def data_uri(self) -> str:
        return f"data:image/png;base64,{self.image_base64}"
