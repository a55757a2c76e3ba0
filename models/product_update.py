from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, JSON
from sqlalchemy.orm import Mapped, mapped_column

from core.db import Base


class ProductUpdate(Base):
    """Product information suggested by a shopper, kept until an admin reviews it."""

    __tablename__ = "product_updates"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    offer_id: Mapped[int] = mapped_column(ForeignKey("offers.id", ondelete="CASCADE"), index=True)
    updated_info: Mapped[dict] = mapped_column(JSON)
    updated_by: Mapped[str] = mapped_column(String(255), default="consumer")
    update_type: Mapped[str] = mapped_column(String(50), default="product_information")
    status: Mapped[str] = mapped_column(String(30), default="pending_review")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
