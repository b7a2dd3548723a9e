from typing import List

from fastapi import APIRouter

from portfolio.api.schemas.project import Project
from portfolio.api.services.project_service import list_projects

router = APIRouter()


@router.get("", response_model=List[Project])
def get_projects():
    """포트폴리오 프로젝트 목록 조회"""
    return list_projects()
