from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.features.auth.policy import require_permission
from app.features.inventory.categories import CATEGORIES, CategorySpec

router = APIRouter(prefix="/api/student", tags=["Student"])

can_browse = require_permission("student.browse")

def _add_catalogue_route(spec: CategorySpec):
    @router.get(spec.menu_path, response_model=List[spec.schema_out], name=f"{spec.name}_catalogue")
    def read_catalogue(db: Session = Depends(get_db), session=Depends(can_browse)):
        return db.query(spec.model).order_by(*spec.menu_order).all()

# /canteen-menu, /stationery-list, /hostel-status
for _spec in CATEGORIES.values():
    _add_catalogue_route(_spec)
