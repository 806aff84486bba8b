"""The fixed set of resource categories.

Each ``Category`` owns a ``CategorySpec``: its table, its input/output
schemas, the staff role that manages it and how its rows appear in the
student catalogue and the admin inventory. Routers are built from these
specs instead of picking tables by name.
"""
import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Tuple, Type
from pydantic import BaseModel, Field
from app.models.account import Role
from app.models.items import CanteenItem, StationeryItem, HostelItem


class Category(str, enum.Enum):
    CANTEEN = "canteen"
    STATIONERY = "stationery"
    HOSTEL = "hostel"


# Pydantic Models
class CanteenItemIn(BaseModel):
    item_name: str = Field(min_length=1, max_length=120)
    price: float = Field(ge=0)
    quantity: int = Field(default=0, ge=0)
    status: str = Field(default="Available", max_length=30)

class CanteenItemOut(CanteenItemIn):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class StationeryItemIn(BaseModel):
    item_name: str = Field(min_length=1, max_length=120)
    price: float = Field(ge=0)
    stock_level: int = Field(default=0, ge=0)
    category: Optional[str] = Field(default=None, max_length=60)

class StationeryItemOut(StationeryItemIn):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class HostelItemIn(BaseModel):
    item_name: str = Field(min_length=1, max_length=120)
    type: Optional[str] = Field(default=None, max_length=60)
    availability_status: str = Field(default="Available", max_length=30)

class HostelItemOut(HostelItemIn):
    id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


@dataclass(frozen=True)
class CategorySpec:
    category: Category
    model: Any
    schema_in: Type[BaseModel]
    schema_out: Type[BaseModel]
    staff_role: Role
    list_order: Tuple[Any, ...]
    menu_path: str
    menu_order: Tuple[Any, ...]
    to_inventory: Callable[[Any], Dict[str, Any]]

    @property
    def name(self) -> str:
        return self.category.value

    @property
    def tag(self) -> str:
        return self.category.value.upper()


def _canteen_row(item: CanteenItem) -> Dict[str, Any]:
    return {"id": item.id, "name": item.item_name, "price": item.price, "category": "CANTEEN", "status": item.status}

def _stationery_row(item: StationeryItem) -> Dict[str, Any]:
    # Stationery has no status column; listed items are always available
    return {"id": item.id, "name": item.item_name, "price": item.price, "category": "STATIONERY", "status": "Available"}

def _hostel_row(item: HostelItem) -> Dict[str, Any]:
    # Rooms are not sold
    return {"id": item.id, "name": item.item_name, "price": 0, "category": "HOSTEL", "status": item.availability_status}


CATEGORIES: Dict[Category, CategorySpec] = {
    Category.CANTEEN: CategorySpec(
        category=Category.CANTEEN,
        model=CanteenItem,
        schema_in=CanteenItemIn,
        schema_out=CanteenItemOut,
        staff_role=Role.CANTEEN,
        list_order=(CanteenItem.created_at.desc(), CanteenItem.id.desc()),
        menu_path="/canteen-menu",
        menu_order=(CanteenItem.status.asc(), CanteenItem.item_name.asc()),
        to_inventory=_canteen_row,
    ),
    Category.STATIONERY: CategorySpec(
        category=Category.STATIONERY,
        model=StationeryItem,
        schema_in=StationeryItemIn,
        schema_out=StationeryItemOut,
        staff_role=Role.STATIONERY,
        list_order=(StationeryItem.created_at.desc(), StationeryItem.id.desc()),
        menu_path="/stationery-list",
        menu_order=(StationeryItem.category.asc(), StationeryItem.id.asc()),
        to_inventory=_stationery_row,
    ),
    Category.HOSTEL: CategorySpec(
        category=Category.HOSTEL,
        model=HostelItem,
        schema_in=HostelItemIn,
        schema_out=HostelItemOut,
        staff_role=Role.HOSTEL,
        list_order=(HostelItem.id.asc(),),
        menu_path="/hostel-status",
        menu_order=(HostelItem.availability_status.asc(), HostelItem.id.asc()),
        to_inventory=_hostel_row,
    ),
}
