"""Smart Match 캐시 모델"""

from datetime import datetime

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from oscarmatch.core.database import Base


class SmartMatchCache(Base):
    """영화 × 선호도 해시별 추천 이유

    만료/삭제 정책은 없습니다. last_used는 향후 정리 작업을 위해 유지합니다.
    """

    __tablename__ = "smart_match_cache"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    movie_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("movies.id", ondelete="CASCADE"),
        nullable=False,
    )
    preferences_hash: Mapped[str] = mapped_column(
        String(64), nullable=False, comment="정규화된 선호도 SHA-256"
    )
    cached_reason: Mapped[str] = mapped_column(Text, nullable=False)
    match_score: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    last_used: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "movie_id",
            "preferences_hash",
            name="uq_smart_match_cache_movie_prefs",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<SmartMatchCache(movie_id={self.movie_id}, "
            f"preferences_hash={self.preferences_hash[:8]})>"
        )
