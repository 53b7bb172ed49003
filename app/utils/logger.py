"""로깅 설정"""
import logging
import sys
from pathlib import Path

from ..config import settings

# 요청마다 INFO 로 URL 을 찍는 서드파티 로거
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logger(name: str, level: str = "INFO", log_dir: str = "logs") -> logging.Logger:
    """콘솔 + 파일 로거 설정

    Stability 호출 로그는 이 로거로만 남기고 httpx 자체 로그는 WARNING 이상만 출력한다.
    """

    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for noisy in NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    # 이미 핸들러가 있으면 추가하지 않음 (중복 방지)
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(log_path / "remodel_api.log")
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


# 전역 로거 인스턴스
logger = setup_logger("room_remodel_api", settings.log_level, settings.log_dir)
