"""SQLAlchemy model for notification emails sent about builds."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer

from app.infrastructure.database import Base
from app.utils import now_in_app_naive_datetime


class BuildEmailModel(Base):
    """One row per (user, build, category) notification that was sent."""

    __tablename__ = "buildemail"
    __table_args__ = (
        Index("ix_buildemail_user_build_category", "userid", "buildid", "category"),
    )

    id = Column(Integer, primary_key=True)
    userid = Column(Integer, ForeignKey("user.id"), nullable=False)
    buildid = Column(Integer, nullable=False, index=True)
    category = Column(Integer, nullable=False)
    time = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["BuildEmailModel"]
