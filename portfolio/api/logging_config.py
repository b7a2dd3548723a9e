import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from portfolio.config import config


def setup_logging():
    logger = logging.getLogger("portfolio")
    logger.setLevel(str(config.get("logging", "level", "INFO")).upper())

    # 이미 핸들러가 설정되어 있으면 중복 추가 방지
    if logger.handlers:
        return logger

    formatter = logging.Formatter(config.get("logging", "format"))

    # 콘솔 핸들러
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 파일 핸들러 (로테이션), 테스트 환경에서는 생략
    if os.getenv("APP_ENV") != "test":
        project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
        log_dir = os.path.join(project_root, "logs")
        os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            os.path.join(log_dir, config.get("logging", "file", "portfolio.log")),
            maxBytes=config.get("logging", "max_bytes", 10 * 1024 * 1024),
            backupCount=config.get("logging", "backup_count", 5),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


# 싱글톤처럼 사용하기 위한 전역 로거 인스턴스
logger = setup_logging()
