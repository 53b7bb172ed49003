from typing import Any, Dict, Optional

import httpx

from ..config import settings
from ..models.schemas import DerivedParameters, GenerationResult
from ..utils.logger import logger
from .exceptions import ConfigurationError, UpstreamError


class StabilityService:
    """Stability AI image-to-image API 서비스"""

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_host: Optional[str] = None,
        engine_id: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.stability_api_key
        if not self.api_key:
            raise ConfigurationError("API key not configured")

        self.api_host = (api_host or settings.stability_api_host).rstrip("/")
        self.engine_id = engine_id or settings.stability_engine_id
        self.timeout_seconds = timeout_seconds or settings.stability_timeout_seconds
        # 테스트에서 MockTransport 주입용
        self.transport = transport

        logger.info(f"StabilityService initialized (engine={self.engine_id})")

    @property
    def endpoint(self) -> str:
        return f"{self.api_host}/v1/generation/{self.engine_id}/image-to-image"

    def build_form(self, derived: DerivedParameters) -> Dict[str, str]:
        """multipart 폼 필드 (이미지 제외)"""
        return {
            "init_image_mode": "IMAGE_STRENGTH",
            "image_strength": str(round(derived.preservation_strength, 4)),
            "text_prompts[0][text]": derived.positive_prompt,
            "text_prompts[0][weight]": "1",
            "text_prompts[1][text]": derived.negative_prompt,
            "text_prompts[1][weight]": "-1",
            "cfg_scale": str(derived.cfg_scale),
            "samples": str(derived.samples),
            "steps": str(derived.steps),
        }

    async def generate_image(
        self,
        image_bytes: bytes,
        derived: DerivedParameters,
        mime_type: str = "image/jpeg",
    ) -> GenerationResult:
        """원본 이미지 + 프롬프트로 변환 이미지 생성 (재시도 없음)"""
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        files = {"init_image": ("room", image_bytes, mime_type)}

        logger.info(f"Calling Stability image-to-image (strength={derived.preservation_strength:.3f})")

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.post(
                    self.endpoint,
                    headers=headers,
                    data=self.build_form(derived),
                    files=files,
                )
        except httpx.TimeoutException:
            logger.error(f"Stability request timed out after {self.timeout_seconds}s")
            raise UpstreamError(f"Image generation timed out after {self.timeout_seconds:g} seconds")
        except httpx.HTTPError as e:
            logger.error(f"Stability request failed: {type(e).__name__}: {str(e)}")
            raise UpstreamError(f"Image generation request failed: {str(e)}")

        logger.info(f"Stability response: HTTP {response.status_code}")

        if response.is_error:
            message = self._error_message(response)
            logger.warning(f"Stability API error {response.status_code}: {message}")
            raise UpstreamError(message, upstream_status=response.status_code)

        return self._first_artifact(response)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """업스트림 메시지가 있으면 그대로, 없으면 상태 코드"""
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"API Error: {response.status_code}"

    @staticmethod
    def _first_artifact(response: httpx.Response) -> GenerationResult:
        try:
            data: Dict[str, Any] = response.json()
        except ValueError:
            raise UpstreamError("Invalid response from image generation service")

        artifacts = data.get("artifacts") if isinstance(data, dict) else None
        if not isinstance(artifacts, list) or not artifacts:
            raise UpstreamError("No image generated")

        artifact = artifacts[0]
        if not isinstance(artifact, dict) or not artifact.get("base64"):
            raise UpstreamError("No image generated")

        if artifact.get("finishReason") == "CONTENT_FILTERED":
            logger.warning("Stability flagged the generated image as CONTENT_FILTERED")

        return GenerationResult(
            image_base64=artifact["base64"],
            finish_reason=artifact.get("finishReason"),
            seed=artifact.get("seed") if isinstance(artifact.get("seed"), int) else None,
        )


# 싱글톤 인스턴스
_stability_service = None


def get_stability_service() -> StabilityService:
    """StabilityService 인스턴스 가져오기"""
    global _stability_service
    if _stability_service is None:
        _stability_service = StabilityService()
    return _stability_service
