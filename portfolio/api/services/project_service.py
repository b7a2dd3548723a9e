"""
프로젝트 목록 서비스 레이어
"""

import logging
from typing import List

from portfolio.api.schemas.project import Project

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = "https://via.placeholder.com/300x200/{color}/ffffff?text={text}"


def list_projects() -> List[Project]:
    """요청마다 새로 생성되는 다섯 개의 고정 프로젝트 목록 (p1..p5 순서)"""
    logger.info("Listing projects")

    # 도시 격자 배치: 교차로 주변에 위치
    return [
        Project(
            id="p1",
            title="E-Commerce Platform",
            description="Full-stack shopping site",
            x=-480,
            y=-400,
            image_url=PLACEHOLDER_IMAGE.format(color="4F46E5", text="E-Commerce"),
            link_url="https://github.com",
        ),
        Project(
            id="p2",
            title="Chat Application",
            description="Real-time messaging app",
            x=480,
            y=-400,
            image_url=PLACEHOLDER_IMAGE.format(color="10B981", text="Chat+App"),
            link_url="https://github.com",
        ),
        Project(
            id="p3",
            title="Game Portal",
            description="Mini game collection",
            x=-480,
            y=400,
            image_url=PLACEHOLDER_IMAGE.format(color="F59E0B", text="Game+Portal"),
            link_url="https://github.com",
        ),
        Project(
            id="p4",
            title="Analytics Dashboard",
            description="Data visualization",
            x=480,
            y=400,
            image_url=PLACEHOLDER_IMAGE.format(color="EF4444", text="Analytics"),
            link_url="https://github.com",
        ),
        Project(
            id="p5",
            title="Music Player",
            description="Web music player",
            x=150,
            y=-500,  # 세로 도로 구간
            image_url=PLACEHOLDER_IMAGE.format(color="8B5CF6", text="Music+Player"),
            link_url="https://github.com",
        ),
    ]
