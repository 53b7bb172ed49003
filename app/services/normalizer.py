"""사용자 입력 정규화

어떤 입력이 와도 실패하지 않는다. 잘못된 값은 기본값으로 대체된다.
"""
import math
from types import MappingProxyType
from typing import Iterable, Optional

from ..models.schemas import NormalizedParameters
from .style_catalog import (
    CHANGES,
    DEFAULT_INTENSITY,
    DEFAULT_MODE,
    MODES,
    normalize_key,
    resolve_style,
)

# (기준값, 강도 계수, 최소, 최대)
# staging 은 원본 구조를 대부분 유지, remodel 은 대부분 버린다
STRENGTH_FORMULAS = MappingProxyType({
    "staging": (0.75, 0.20, 0.55, 0.75),
    "remodel": (0.30, 0.22, 0.08, 0.30),
})


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def resolve_mode(mode: Optional[str]) -> str:
    key = normalize_key(mode)
    return key if key in MODES else DEFAULT_MODE


def resolve_intensity(intensity: Optional[float]) -> float:
    """None / NaN / inf 는 기본값, 나머지는 [0, 1] 로 보정"""
    if intensity is None:
        return DEFAULT_INTENSITY
    try:
        value = float(intensity)
    except (TypeError, ValueError):
        return DEFAULT_INTENSITY
    if not math.isfinite(value):
        return DEFAULT_INTENSITY
    return clamp(value, 0.0, 1.0)


def preservation_strength(mode: str, intensity: float) -> float:
    """원본 이미지 유지 비율 (낮을수록 변화가 큼)"""
    base, factor, lower, upper = STRENGTH_FORMULAS.get(mode, STRENGTH_FORMULAS[DEFAULT_MODE])
    return clamp(base - resolve_intensity(intensity) * factor, lower, upper)


def resolve_changes(changes: Optional[Iterable[str]]) -> list:
    """알려진 변경 항목만 원래 순서대로 (중복 제거)"""
    resolved = []
    for change in changes or []:
        key = normalize_key(change)
        if key in CHANGES and key not in resolved:
            resolved.append(key)
    return resolved


def _material_key(value: Optional[str]) -> Optional[str]:
    key = normalize_key(value)
    return key or None


def normalize_parameters(
    style: Optional[str] = None,
    mode: Optional[str] = None,
    intensity: Optional[float] = None,
    changes: Optional[Iterable[str]] = None,
    cabinet_color: Optional[str] = None,
    countertop_material: Optional[str] = None,
    wall_color: Optional[str] = None,
) -> NormalizedParameters:
    resolved_mode = resolve_mode(mode)
    resolved_intensity = resolve_intensity(intensity)

    params = {
        "style": resolve_style(style),
        "mode": resolved_mode,
        "intensity": resolved_intensity,
        "preservation_strength": preservation_strength(resolved_mode, resolved_intensity),
    }

    # 자재/변경 항목은 remodel 에서만 의미가 있음
    if resolved_mode == "remodel":
        params.update(
            changes=resolve_changes(changes),
            cabinet_color=_material_key(cabinet_color),
            countertop_material=_material_key(countertop_material),
            wall_color=_material_key(wall_color),
        )

    return NormalizedParameters(**params)
