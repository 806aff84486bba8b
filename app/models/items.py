from sqlalchemy import Column, Integer, String, Float, DateTime
from datetime import datetime
from app.config.database import Base

class CanteenItem(Base):
    __tablename__ = "canteen_items"

    id = Column(Integer, primary_key=True, index=True)
    item_name = Column(String(120), nullable=False)
    price = Column(Float, nullable=False, default=0)
    quantity = Column(Integer, nullable=False, default=0)
    status = Column(String(30), nullable=False, default="Available")
    created_at = Column(DateTime, default=datetime.utcnow)

class StationeryItem(Base):
    __tablename__ = "stationery_items"

    id = Column(Integer, primary_key=True, index=True)
    item_name = Column(String(120), nullable=False)
    price = Column(Float, nullable=False, default=0)
    stock_level = Column(Integer, nullable=False, default=0)
    category = Column(String(60), nullable=True) # e.g. "Paper", "Pens"
    created_at = Column(DateTime, default=datetime.utcnow)

class HostelItem(Base):
    __tablename__ = "hostel_items"

    id = Column(Integer, primary_key=True, index=True)
    item_name = Column(String(120), nullable=False) # room number or facility name
    type = Column(String(60), nullable=True)
    availability_status = Column(String(30), nullable=False, default="Available")
    created_at = Column(DateTime, default=datetime.utcnow)
