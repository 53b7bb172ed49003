"""이미지 생성 요청 처리 중 발생하는 오류"""
from typing import Optional


class GenerationError(Exception):
    """요청 경계에서 {success: false, error} 로 변환되는 오류의 기본 클래스"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GenerationError):
    """API 키 등 필수 설정 누락"""

    status_code = 500


class InputError(GenerationError):
    """업로드된 방 사진이 없거나 이미지로 디코딩되지 않음"""

    status_code = 400


class UpstreamError(GenerationError):
    """Stability API 실패 (non-2xx, 타임아웃, 결과 없음)"""

    status_code = 502

    def __init__(self, message: str, upstream_status: Optional[int] = None):
        super().__init__(message)
        self.upstream_status = upstream_status
