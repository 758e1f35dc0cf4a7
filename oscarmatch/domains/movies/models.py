"""Movies 도메인 모델

TMDB 메타데이터와 Oscar 정보, AI 태그를 담는 카탈로그 테이블입니다.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    ARRAY,
    Boolean,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    Uuid,
    func,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from oscarmatch.core.database import Base


class Movie(Base):
    """Best Picture 후보/수상작

    thematic_tags: [{"tag": "Dramat", "importance": 0.9}, ...] (JSONB)
    mood_tags: ["Inspiracja", "Głębokie emocje", ...] (ARRAY)
    """

    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    tmdb_id: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, unique=True, comment="TMDB ID"
    )

    # 기본 정보
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    original_title: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True
    )
    year: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="개봉 연도"
    )
    overview: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    poster_path: Mapped[Optional[str]] = mapped_column(
        String(500), nullable=True
    )
    runtime: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="상영 시간 (분)"
    )

    # TMDB 지표
    vote_average: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    vote_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    popularity: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # Oscar 정보
    is_best_picture_nominee: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    is_best_picture_winner: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    oscar_year: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True, comment="시상식 연도"
    )

    # AI 태그
    mood_tags: Mapped[Optional[list[str]]] = mapped_column(
        ARRAY(String), nullable=True
    )
    thematic_tags: Mapped[Optional[list[dict]]] = mapped_column(
        JSONB, nullable=True
    )

    # 저장된 AI 텍스트 (첫 요청 시 생성)
    ai_recommendation_text: Mapped[Optional[str]] = mapped_column(
        Text, nullable=True
    )
    ai_brief_text: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), onupdate=func.now(), nullable=True
    )

    __table_args__ = (
        Index("idx_movies_nominee_oscar_year", "is_best_picture_nominee", "oscar_year"),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title={self.title}, oscar_year={self.oscar_year})>"
