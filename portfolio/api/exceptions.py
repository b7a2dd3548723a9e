from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class PortfolioException(HTTPException):
    """포트폴리오 전용 기본 예외 클래스"""

    def __init__(
        self, status_code: int, detail: Any = None, headers: Optional[Dict[str, str]] = None
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)


class TemplateNotFoundError(PortfolioException):
    """페이지 템플릿을 찾을 수 없을 때"""

    def __init__(self, detail: str = "페이지 템플릿을 찾을 수 없습니다."):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
