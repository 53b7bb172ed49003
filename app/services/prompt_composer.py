"""프롬프트 조합

정규화된 파라미터만 받아서 문자열을 만드는 순수 함수. 네트워크 호출 없음.
"""
from types import MappingProxyType

from ..models.schemas import DerivedParameters, NormalizedParameters
from .style_catalog import (
    CABINET_COLORS,
    CABINET_FALLBACK,
    CHANGES,
    COUNTERTOP_FALLBACK,
    COUNTERTOP_MATERIALS,
    DEFAULT_STYLE,
    REMODEL_STYLES,
    STAGING_STYLES,
    WALL_COLORS,
    WALL_FALLBACK,
    lookup,
    resolve_material,
)

BASE_NEGATIVE_PROMPT = "blurry, bad quality, distorted, ugly, deformed, cluttered, messy, dirty"

# 낮은 strength 에서도 변화가 약하게 나오는 경향을 억제
REMODEL_NEGATIVE_CLAUSE = (
    "no transformation, same cabinets, old kitchen, minimal changes, "
    "same as original, outdated finishes"
)

STAGING_TEMPLATE = (
    "Professional interior staging photography, {style}, "
    "only add furniture and decorative items, keep all existing walls floors and architecture intact, "
    "photorealistic, 8k, magazine quality"
)

REMODEL_TEMPLATE = (
    "Professional architectural photography of completely renovated kitchen, {details}, "
    "dramatic before and after transformation, magazine quality, architectural digest, "
    "8k resolution, photorealistic, professional lighting, wide angle"
)

# 모드별 (cfg_scale, steps, samples)
MODE_KNOBS = MappingProxyType({
    "staging": (9, 50, 1),
    "remodel": (9, 50, 1),
})


def remodel_details(params: NormalizedParameters) -> list:
    """cabinet → countertop → wall → 변경 항목 순서"""
    details = [
        resolve_material(CABINET_COLORS, params.cabinet_color, CABINET_FALLBACK),
        resolve_material(COUNTERTOP_MATERIALS, params.countertop_material, COUNTERTOP_FALLBACK),
        resolve_material(WALL_COLORS, params.wall_color, WALL_FALLBACK),
    ]
    details.extend(CHANGES[change] for change in params.changes if change in CHANGES)
    return [detail for detail in details if detail]


def build_staging_prompts(params: NormalizedParameters) -> tuple:
    staging_phrase = lookup(STAGING_STYLES, params.style, DEFAULT_STYLE)
    return STAGING_TEMPLATE.format(style=staging_phrase), BASE_NEGATIVE_PROMPT


def build_remodel_prompts(params: NormalizedParameters) -> tuple:
    base_phrase = lookup(REMODEL_STYLES, params.style, DEFAULT_STYLE)
    details = ", ".join([base_phrase] + remodel_details(params))
    negative = f"{BASE_NEGATIVE_PROMPT}, {REMODEL_NEGATIVE_CLAUSE}"
    return REMODEL_TEMPLATE.format(details=details), negative


def compose_prompts(params: NormalizedParameters) -> DerivedParameters:
    if params.mode == "staging":
        positive, negative = build_staging_prompts(params)
    else:
        positive, negative = build_remodel_prompts(params)

    cfg_scale, steps, samples = MODE_KNOBS.get(params.mode, MODE_KNOBS["remodel"])

    return DerivedParameters(
        preservation_strength=params.preservation_strength,
        positive_prompt=positive,
        negative_prompt=negative,
        cfg_scale=cfg_scale,
        steps=steps,
        samples=samples,
    )
