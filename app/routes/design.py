from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..models.schemas import OptionsCatalog, TransformRequest
from ..services.exceptions import GenerationError
from ..services.normalizer import normalize_parameters
from ..services.prompt_composer import compose_prompts
from ..services.stability_service import get_stability_service
from ..services.style_catalog import build_options_catalog
from ..utils.image import decode_room_image
from ..utils.logger import logger

router = APIRouter(prefix="/api", tags=["design"])


def failure_response(message: str, status_code: int = 500) -> JSONResponse:
    """실패 응답 형식 통일: {success: false, error}"""
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@router.get("/styles", response_model=OptionsCatalog)
async def get_styles():
    """스타일, 변경 항목, 자재 옵션 목록 반환"""
    return build_options_catalog()


@router.post("/generate-image")
async def generate_image(request: TransformRequest):
    """방 사진 + 선택 옵션 → Stability 이미지 변환"""
    try:
        image_bytes, mime_type = decode_room_image(request.current_room)

        params = normalize_parameters(
            style=request.style,
            mode=request.mode,
            intensity=request.intensity,
            changes=request.changes,
            cabinet_color=request.cabinet_color,
            countertop_material=request.countertop_material,
            wall_color=request.wall_color,
        )
        derived = compose_prompts(params)

        logger.info(
            f"Generating {params.mode} image: style={params.style}, "
            f"intensity={params.intensity:.2f}, strength={derived.preservation_strength:.3f}, "
            f"changes={params.changes}"
        )

        stability = get_stability_service()
        result = await stability.generate_image(image_bytes, derived, mime_type)

        logger.info(f"{params.style} {params.mode} image generated (seed={result.seed})")

        return JSONResponse(content={
            "success": True,
            "image": result.data_uri,
            "style": params.style,
            "mode": params.mode,
            "strength": derived.preservation_strength,
        })

    except GenerationError as e:
        logger.warning(f"Generation failed ({type(e).__name__}): {e.message}")
        return failure_response(e.message, e.status_code)
    except Exception as e:
        logger.error(f"Generation error: {str(e)}", exc_info=True)
        return failure_response("Failed to generate image")
