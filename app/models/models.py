import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Float, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


# helpers
now = datetime.utcnow


def new_id() -> str:
    return str(uuid.uuid4())


class Store(Base):
    __tablename__ = "stores"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), index=True)
    address: Mapped[str] = mapped_column(String(1024))
    latitude: Mapped[float] = mapped_column(Float)
    longitude: Mapped[float] = mapped_column(Float)
    categories: Mapped[list] = mapped_column(JSON, default=list)
    # structured weekly schedule; rows from the old schema may still hold a free-text string
    business_hours: Mapped[dict | str | None] = mapped_column(JSON, nullable=True)
    parking_info: Mapped[str] = mapped_column(Text, default="")
    website_url: Mapped[str] = mapped_column(String(1024), default="")
    google_map_url: Mapped[str] = mapped_column(String(1024), default="")
    sns_urls: Mapped[list] = mapped_column(JSON, default=list)
    tags: Mapped[list] = mapped_column(JSON, default=list)
    photos: Mapped[list] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=now, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=now, onupdate=now)
