"""스타일 / 자재 / 변경 항목 문구 테이블

모든 테이블은 import 시점에 한 번 만들어지는 읽기 전용 매핑이다.
없는 키는 예외 대신 lookup() 의 기본값으로 처리한다.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from ..models.schemas import OptionsCatalog, StyleOption

DEFAULT_STYLE = "modern minimalist"
DEFAULT_MODE = "remodel"
DEFAULT_INTENSITY = 0.5

MODES = MappingProxyType({
    "remodel": "Complete renovation: new cabinets, counters, walls and layout",
    "staging": "Virtual staging: add furniture and decor, keep the architecture",
})

# 스타일 표시명
STYLE_LABELS = MappingProxyType({
    "modern minimalist": "Modern Minimalist",
    "traditional": "Traditional",
    "contemporary": "Contemporary",
    "rustic farmhouse": "Rustic Farmhouse",
    "industrial": "Industrial",
    "scandinavian": "Scandinavian",
    "mediterranean": "Mediterranean",
    "luxury": "Luxury",
})

# 리모델링: 구조 자체를 바꾸는 문구
REMODEL_STYLES = MappingProxyType({
    "modern minimalist": "complete modern minimalist kitchen renovation, sleek white flat-panel cabinets, "
                         "quartz countertops, minimalist hardware, subway tile backsplash, "
                         "stainless appliances, recessed lighting",
    "traditional": "complete traditional kitchen remodel, raised panel wood cabinets, granite countertops, "
                   "ornate hardware, classic tile backsplash, warm wood tones, pendant lighting",
    "contemporary": "complete contemporary kitchen transformation, two-tone cabinets, waterfall countertops, "
                    "modern hardware, geometric backsplash, integrated appliances, track lighting",
    "rustic farmhouse": "complete farmhouse kitchen renovation, shaker cabinets, butcher block counters, "
                        "vintage hardware, subway tile, farmhouse sink, open shelving, pendant lights",
    "industrial": "complete industrial kitchen remodel, dark cabinets, concrete countertops, exposed hardware, "
                  "brick backsplash, stainless appliances, exposed ductwork, industrial pendant lights",
    "scandinavian": "complete Scandinavian kitchen transformation, light wood cabinets, white countertops, "
                    "minimalist hardware, white tile, integrated appliances, natural light",
    "mediterranean": "complete Mediterranean kitchen renovation, warm wood cabinets, terra cotta accents, "
                     "decorative tile backsplash, arched details, warm lighting",
    "luxury": "complete luxury kitchen remodel, custom high-end cabinets, marble countertops, "
              "designer hardware, premium tile, professional appliances, statement lighting",
})

# 스테이징: 기존 공간에 가구만 추가하는 문구 (구조 변경 표현 금지)
STAGING_STYLES = MappingProxyType({
    "modern minimalist": "beautifully staged with modern minimalist furniture, sleek sofa, minimalist coffee table, "
                         "contemporary art, neutral tones, designer lighting",
    "traditional": "elegantly staged with traditional furniture, classic sofa, ornate coffee table, "
                   "decorative accessories, warm lighting, rich textures",
    "contemporary": "professionally staged with contemporary furniture, stylish seating, modern decor, "
                    "accent pieces, balanced color palette",
    "rustic farmhouse": "warmly staged with farmhouse furniture, comfortable sofa, rustic wood table, "
                        "vintage accessories, cozy textiles, warm lighting",
    "industrial": "stylishly staged with industrial furniture, leather seating, metal accents, "
                  "urban accessories, Edison bulb lamps",
    "scandinavian": "cozily staged with Scandinavian furniture, light wood pieces, white and gray textiles, "
                    "minimal decor, hygge atmosphere",
    "mediterranean": "beautifully staged with Mediterranean furniture, terracotta accents, warm textiles, "
                     "natural materials, woven baskets",
    "luxury": "luxuriously staged with high-end furniture, designer pieces, premium fabrics, "
              "elegant accessories, sophisticated lamps",
})

CHANGE_LABELS = MappingProxyType({
    "island": "Add Kitchen Island",
    "cabinets": "New Cabinets",
    "walls": "Open Up Walls",
    "flooring": "New Flooring",
    "lighting": "Upgrade Lighting",
    "backsplash": "New Backsplash",
    "countertops": "New Countertops",
    "appliances": "New Appliances",
})

CHANGES = MappingProxyType({
    "island": "large kitchen island with seating, waterfall countertop",
    "cabinets": "completely new cabinet design and color",
    "walls": "opened up walls, removed barriers, open floor plan",
    "flooring": "new modern flooring throughout",
    "lighting": "upgraded modern lighting fixtures, pendant lights, recessed lighting",
    "backsplash": "stunning new backsplash design",
    "countertops": "premium new countertop material and design",
    "appliances": "new high-end stainless steel appliances",
})

CABINET_COLORS = MappingProxyType({
    "white": "crisp white painted cabinets",
    "navy": "deep navy blue painted cabinets with brass hardware",
    "gray": "soft gray shaker cabinets",
    "black": "matte black cabinets with gold hardware",
    "sage": "sage green painted cabinets",
    "wood": "natural oak wood cabinets",
    "espresso": "dark espresso stained cabinets",
    "two-tone": "two-tone cabinets, navy lower cabinets and white upper cabinets",
})
CABINET_FALLBACK = "new modern cabinets"

COUNTERTOP_MATERIALS = MappingProxyType({
    "quartz": "white quartz countertops",
    "marble": "Calacatta marble countertops with dramatic veining",
    "granite": "polished granite countertops",
    "butcher-block": "warm butcher block wood countertops",
    "concrete": "polished concrete countertops",
    "quartzite": "natural quartzite countertops",
    "soapstone": "honed black soapstone countertops",
})
COUNTERTOP_FALLBACK = "new premium countertops"

WALL_COLORS = MappingProxyType({
    "white": "bright white walls",
    "warm-white": "warm white walls",
    "light-gray": "light gray walls",
    "greige": "warm greige walls",
    "sage": "soft sage green walls",
    "navy": "navy blue accent wall",
    "charcoal": "dramatic charcoal walls",
    "cream": "creamy off-white walls",
})
WALL_FALLBACK = "fresh modern wall color"


def normalize_key(value: Optional[str]) -> str:
    """비교용 키 정규화 (앞뒤 공백 제거 + 소문자)"""
    if value is None:
        return ""
    return str(value).strip().lower()


def lookup(table: Mapping[str, str], key: Optional[str], default_key: str) -> str:
    """테이블 조회. 없는 키면 default_key 의 값을 반환"""
    value = table.get(normalize_key(key))
    if value is None:
        return table[default_key]
    return value


def resolve_style(style: Optional[str]) -> str:
    """알 수 없는 스타일은 modern minimalist 로 대체"""
    key = normalize_key(style)
    return key if key in REMODEL_STYLES else DEFAULT_STYLE


def resolve_material(table: Mapping[str, str], key: Optional[str], fallback: str) -> Optional[str]:
    """자재/색상 문구 조회

    값이 없으면 None (프롬프트에 아무것도 넣지 않음),
    값이 있지만 모르는 키면 카테고리별 일반 문구를 반환한다.
    """
    normalized = normalize_key(key)
    if not normalized:
        return None
    return table.get(normalized, fallback)


def _options(table: Mapping[str, str], labels: Optional[Mapping[str, str]] = None) -> list:
    return [
        StyleOption(
            id=key,
            name=labels[key] if labels else key.replace("-", " ").title(),
            description=phrase,
        )
        for key, phrase in table.items()
    ]


def build_options_catalog() -> OptionsCatalog:
    """GET /api/styles 응답"""
    return OptionsCatalog(
        modes=_options(MODES),
        styles=_options(REMODEL_STYLES, STYLE_LABELS),
        changes=_options(CHANGES, CHANGE_LABELS),
        cabinet_colors=_options(CABINET_COLORS),
        countertop_materials=_options(COUNTERTOP_MATERIALS),
        wall_colors=_options(WALL_COLORS),
        default_style=DEFAULT_STYLE,
        default_mode=DEFAULT_MODE,
        default_intensity=DEFAULT_INTENSITY,
    )
