"""
SQLAlchemy ORM Model Definitions

Defines all database table structures for the system, including:
- countries: Countries Table
- hotels: Hotels Table
- users / roles / user_roles: Identity Tables
- user_claims: Extra per-user claims copied into access tokens
- user_tokens: Named authentication tokens (refresh tokens)
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from hotel_listing.common.time import utc_now_naive


class Base(DeclarativeBase):
    """SQLAlchemy ORM Base Class"""
    pass


class Country(Base):
    """
    Countries Table

    Owns its hotels; deleting a country deletes its hotels at the database level.
    """
    __tablename__ = "countries"

    # Primary Key ID
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Country Name
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    # Short code, e.g. JM
    short_name: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    # Optimistic concurrency token
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Relationship: Hotels in this country
    hotels: Mapped[list["Hotel"]] = relationship(
        "Hotel",
        back_populates="country",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Hotel.id",
    )

    __mapper_args__ = {"version_id_col": version}


class Hotel(Base):
    """Hotels Table"""
    __tablename__ = "hotels"

    # Primary Key ID
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Hotel Name
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    # Address
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    # Rating
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    # Country the hotel belongs to (required)
    country_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("countries.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # Optimistic concurrency token
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    # Relationship: Owning country
    country: Mapped["Country"] = relationship("Country", back_populates="hotels")

    __mapper_args__ = {"version_id_col": version}


user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    """
    Users Table

    The email doubles as the user name; lookups go through the normalized (upper-case) columns.
    """
    __tablename__ = "users"

    # Primary Key, UUID string
    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str] = mapped_column(String(256), nullable=False)
    normalized_email: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    user_name: Mapped[str] = mapped_column(String(256), nullable=False)
    normalized_user_name: Mapped[str] = mapped_column(String(256), nullable=False, unique=True)
    # Salted argon2 hash, never the plain password
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    # Rotated to invalidate previously issued tokens
    security_stamp: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )

    roles: Mapped[list["Role"]] = relationship("Role", secondary=user_roles)
    claims: Mapped[list["UserClaim"]] = relationship(
        "UserClaim", cascade="all, delete-orphan", passive_deletes=True
    )


class Role(Base):
    """Roles Table (seeded, never created through the API)"""
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    normalized_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class UserClaim(Base):
    """Additional claims attached to a user"""
    __tablename__ = "user_claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    claim_type: Mapped[str] = mapped_column(String(200), nullable=False)
    claim_value: Mapped[str] = mapped_column(String(500), nullable=False)


class UserToken(Base):
    """
    User Tokens Table

    One row per (user, login provider, token name); used to store refresh tokens.
    """
    __tablename__ = "user_tokens"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    login_provider: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    # Security stamp of the user when the token was issued
    security_stamp: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=utc_now_naive, nullable=False
    )
