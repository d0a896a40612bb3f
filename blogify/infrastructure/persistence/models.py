# -*- coding: utf-8 -*-
"""
SQLAlchemy модели — инфраструктурный слой.

Описывают схему Supabase (blogs, profiles) для режима прямого подключения.
Схемой владеет бэкенд: таблицы здесь не создаются.
"""

from sqlalchemy import Column, String, Text, DateTime, Integer, func
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import declarative_base
import uuid

Base = declarative_base()


class BlogModel(Base):
    """SQLAlchemy модель статьи (таблица blogs)."""

    __tablename__ = "blogs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    author_id = Column(UUID(as_uuid=True), nullable=False, index=True)

    title = Column(Text, nullable=False)
    excerpt = Column(Text)
    content = Column(Text, nullable=False)
    featured_image = Column(Text)
    tags = Column(ARRAY(String))

    status = Column(String(20), nullable=False, default="draft", index=True)

    likes_count = Column(Integer, nullable=False, default=0)
    comments_count = Column(Integer, nullable=False, default=0)
    views_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f"<BlogModel(id={self.id}, title='{(self.title or '')[:50]}')>"


class ProfileModel(Base):
    """SQLAlchemy модель профиля (таблица profiles)."""

    __tablename__ = "profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(UUID(as_uuid=True), nullable=False, unique=True, index=True)
    full_name = Column(Text)

    def __repr__(self):
        return f"<ProfileModel(user_id={self.user_id}, full_name='{self.full_name}')>"
