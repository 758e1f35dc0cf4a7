"""Movies 도메인 스키마"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from oscarmatch.core.schemas import BaseSchema


class ThematicTag(BaseModel):
    """장르 태그와 중요도 (0.1 ~ 1.0)"""

    tag: str
    importance: Optional[float] = None


def _is_valid_tag(value) -> bool:
    if isinstance(value, ThematicTag):
        return True
    if not isinstance(value, dict) or not isinstance(value.get("tag"), str):
        return False
    importance = value.get("importance")
    return importance is None or (
        isinstance(importance, (int, float)) and not isinstance(importance, bool)
    )


class MovieRecord(BaseSchema):
    """스코어링/응답에 쓰이는 영화 레코드 (ORM 변환 가능)"""

    id: str
    title: str
    original_title: Optional[str] = None
    year: Optional[int] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    runtime: Optional[int] = None
    vote_average: Optional[float] = None
    vote_count: Optional[int] = None
    popularity: Optional[float] = None
    is_best_picture_nominee: bool = False
    is_best_picture_winner: bool = False
    oscar_year: Optional[int] = None
    mood_tags: list[str] = Field(default_factory=list)
    thematic_tags: list[ThematicTag] = Field(default_factory=list)

    @field_validator("mood_tags", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        if not isinstance(v, (list, tuple)):
            return []
        return [m for m in v if isinstance(m, str)]

    @field_validator("thematic_tags", mode="before")
    @classmethod
    def drop_malformed_tags(cls, v):
        # 형식이 잘못된 항목은 태그가 없는 것으로 취급
        if not isinstance(v, (list, tuple)):
            return []
        return [t for t in v if _is_valid_tag(t)]

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return str(v)


class MovieDetail(MovieRecord):
    """저장된 AI 텍스트까지 포함한 레코드 (discovery 전용)"""

    ai_recommendation_text: Optional[str] = None
    ai_brief_text: Optional[str] = None
