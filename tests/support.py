"""Models, fixture data and fakes shared by the test suite."""

from datetime import date
from typing import Any

from sqlalchemy import Boolean, Date, Integer, String
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from query_composer.db.query import SelectQuery


class Base(DeclarativeBase):
    """Base class for test models."""

    pass


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    author: Mapped[str] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(50))
    category: Mapped[str] = mapped_column(String(50))
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    is_published: Mapped[bool] = mapped_column(Boolean, default=True)
    views: Mapped[int] = mapped_column(Integer, default=0)
    published_at: Mapped[date | None] = mapped_column(Date, nullable=True)


class Account(Base):
    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255))
    status: Mapped[str] = mapped_column(String(50))
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    is_verified: Mapped[bool] = mapped_column(Boolean, default=False)


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    price: Mapped[int] = mapped_column(Integer)


ARTICLES: list[dict[str, Any]] = [
    {"title": "Laravel Best Practices", "author": "John Doe", "status": "published", "category": "tutorial", "is_featured": True, "is_published": True, "views": 1500, "published_at": date(2024, 1, 15)},
    {"title": "Vue 3 Guide", "author": "Jane Smith", "status": "published", "category": "tutorial", "is_featured": False, "is_published": True, "views": 800, "published_at": date(2024, 1, 20)},
    {"title": "PHP 8 Features", "author": "John Doe", "status": "draft", "category": "news", "is_featured": False, "is_published": False, "views": 100, "published_at": None},
    {"title": "Inertia.js Introduction", "author": "Alice Johnson", "status": "published", "category": "tutorial", "is_featured": True, "is_published": True, "views": 2000, "published_at": date(2024, 2, 1)},
    {"title": "Database Optimization", "author": "Bob Wilson", "status": "published", "category": "advanced", "is_featured": False, "is_published": True, "views": 1200, "published_at": date(2024, 2, 10)},
    {"title": "Testing with Pest", "author": "Jane Smith", "status": "draft", "category": "tutorial", "is_featured": False, "is_published": False, "views": 50, "published_at": None},
    {"title": "API Design Patterns", "author": "John Doe", "status": "published", "category": "advanced", "is_featured": True, "is_published": True, "views": 1800, "published_at": date(2024, 3, 1)},
    {"title": "Tailwind CSS Tips", "author": "Alice Johnson", "status": "published", "category": "tutorial", "is_featured": False, "is_published": True, "views": 900, "published_at": date(2024, 3, 15)},
]

PRODUCTS: list[dict[str, Any]] = [
    {"title": "iPhone 15", "price": 999},
    {"title": "Samsung Galaxy", "price": 899},
    {"title": "iPhone 14", "price": 799},
    {"title": "Google Pixel", "price": 699},
]

ACCOUNTS: list[dict[str, Any]] = [
    {"name": "User 1", "email": "user1@example.com", "status": "active", "is_active": True, "is_verified": True},
    {"name": "User 2", "email": "user2@example.com", "status": "inactive", "is_active": False, "is_verified": False},
    {"name": "User 3", "email": "user3@example.com", "status": "active", "is_active": True, "is_verified": False},
    {"name": "User 4", "email": "user4@example.com", "status": "inactive", "is_active": False, "is_verified": True},
]


async def fetch_all(db: AsyncSession, query: SelectQuery) -> list[Any]:
    """Execute a composed query and return the entities."""
    result = await db.execute(query.statement)
    return list(result.scalars().all())


class RecordingQuery:
    """Query double that records every call made on it."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def where_equals(self, column: str, value: Any) -> "RecordingQuery":
        self.calls.append(("where_equals", column, value))
        return self

    def where_compare(self, column: str, op: str, value: Any) -> "RecordingQuery":
        self.calls.append(("where_compare", column, op, value))
        return self

    def where_between(self, column: str, bounds: Any) -> "RecordingQuery":
        self.calls.append(("where_between", column, bounds))
        return self

    def where_like(self, column: str, pattern: str) -> "RecordingQuery":
        self.calls.append(("where_like", column, pattern))
        return self

    def where_in(self, column: str, values: Any) -> "RecordingQuery":
        self.calls.append(("where_in", column, values))
        return self

    def order_by(self, column: str, direction: str = "asc") -> "RecordingQuery":
        self.calls.append(("order_by", column, direction))
        return self
