"""User ORM model."""

from sqlalchemy import Boolean, Column, Integer, String, true

from database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    identifier = Column(String, nullable=False, index=True)
    enabled = Column(Boolean, nullable=False, default=True, server_default=true())
