"""File ORM model."""

from sqlalchemy import BigInteger, Boolean, Column, Integer, String, true

from database import Base


class FileModel(Base):
    __tablename__ = "files"

    id = Column(Integer, primary_key=True, autoincrement=True)
    original_name = Column(String, nullable=False)
    token = Column(String, nullable=False)
    owner_identifier = Column(String, nullable=False)
    storage_name = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(BigInteger, nullable=False)  # epoch ms
    dead_at = Column(BigInteger, nullable=True)  # epoch ms, NULL = never
    available = Column(Boolean, nullable=False, default=True, server_default=true())
