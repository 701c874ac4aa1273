from __future__ import annotations


from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import declarative_base, relationship


Base = declarative_base()


class Book(Base):
    __tablename__ = "books"

    book_id = Column("id", Integer, primary_key=True)
    work_id = Column("goodreads_work_id", Text, unique=True, nullable=False, index=True)
    title = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    cover_image_url = Column(Text, nullable=True)
    total_quotes = Column(Integer, nullable=False, default=0)
    scraped_at = Column(DateTime(timezone=True), nullable=False)

    quotes = relationship("Quote", back_populates="book", cascade="all, delete-orphan")


class Quote(Base):
    __tablename__ = "quotes"

    quote_id = Column("id", Integer, primary_key=True)
    book_id = Column(Integer, ForeignKey("books.id", ondelete="CASCADE"), nullable=False, index=True)
    quote_text = Column(Text, nullable=False)
    author = Column(Text, nullable=False)
    likes_count = Column(Integer, nullable=False, default=0)
    tags = Column(JSON, nullable=False, default=list)
    page_number = Column(Integer, nullable=False, default=1)

    book = relationship("Book", back_populates="quotes")
