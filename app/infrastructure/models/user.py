"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, Integer, String
from sqlalchemy.sql import expression

from app.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a dashboard user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, index=True)
    firstname = Column(String(40), nullable=False, default="")
    lastname = Column(String(40), nullable=False, default="")
    institution = Column(String(255), nullable=False, default="")
    admin = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )


__all__ = ["UserModel"]
