from pydantic import BaseModel, Field


class Project(BaseModel):
    """캔버스 위에 배치되는 포트폴리오 항목"""

    id: str = Field(..., example="p1")
    title: str = Field(..., example="E-Commerce Platform")
    description: str = Field(..., example="Full-stack shopping site")
    x: float = Field(..., example=-480)  # 캔버스 X 좌표
    y: float = Field(..., example=-400)  # 캔버스 Y 좌표
    image_url: str = Field(
        ...,
        alias="imageUrl",
        example="https://via.placeholder.com/300x200/4F46E5/ffffff?text=E-Commerce",
    )
    link_url: str = Field(..., alias="linkUrl", example="https://github.com")

    class Config:
        populate_by_name = True

    def __repr__(self) -> str:
        return f"Project(id={self.id!r}, title={self.title!r}, x={self.x}, y={self.y})"
