"""
SQLAlchemy ORM models for the movie ratings database.

This module defines the moviedata, movieratings and usermovieratings tables
with their keys and uniqueness constraints.
"""

from typing import List
from sqlalchemy import Integer, Text, ForeignKey, UniqueConstraint, Index
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class Movie(Base):
    """
    Movie table storing an opaque serialized payload.

    Attributes:
        movie_id: Primary key, auto-incremented
        serialized: JSON document describing the movie, stored as text
    """
    __tablename__ = 'moviedata'

    movie_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    serialized: Mapped[str] = mapped_column(Text, nullable=True)

    # Relationships
    rating: Mapped["MovieRating"] = relationship(
        "MovieRating",
        back_populates="movie",
        uselist=False,
        cascade="all, delete-orphan"
    )
    user_ratings: Mapped[List["UserMovieRating"]] = relationship(
        "UserMovieRating",
        back_populates="movie",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Movie(movie_id={self.movie_id})>"


class MovieRating(Base):
    """
    Aggregate rating of a movie across all users.

    Attributes:
        movie_id: Primary key and foreign key to moviedata (one row per movie)
        average_rating: Average rating
        total_ratings: Number of ratings the average is built from
    """
    __tablename__ = 'movieratings'

    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('moviedata.movie_id', ondelete='CASCADE'),
        primary_key=True,
        autoincrement=False
    )
    average_rating: Mapped[int] = mapped_column(Integer, nullable=False)
    total_ratings: Mapped[int] = mapped_column(Integer, nullable=False)

    movie: Mapped["Movie"] = relationship("Movie", back_populates="rating")

    def __repr__(self) -> str:
        return (
            f"<MovieRating(movie_id={self.movie_id}, average_rating={self.average_rating}, "
            f"total_ratings={self.total_ratings})>"
        )


class UserMovieRating(Base):
    """
    A single user's rating of a movie.

    Attributes:
        id: Surrogate primary key, auto-incremented (the resource id)
        user_id: Rating user
        movie_id: Foreign key to moviedata
        rating: Rating value
    """
    __tablename__ = 'usermovieratings'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    movie_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey('moviedata.movie_id', ondelete='CASCADE'),
        nullable=False
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)

    movie: Mapped["Movie"] = relationship("Movie", back_populates="user_ratings")

    # Composite natural key
    __table_args__ = (
        UniqueConstraint('user_id', 'movie_id', name='unique_user_movie'),
        Index('idx_usermovieratings_movie', 'movie_id'),
    )

    def __repr__(self) -> str:
        return (
            f"<UserMovieRating(id={self.id}, user_id={self.user_id}, "
            f"movie_id={self.movie_id}, rating={self.rating})>"
        )
