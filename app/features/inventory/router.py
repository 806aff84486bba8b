import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.config.database import get_db
from app.features.auth.policy import require_permission
from app.features.auth.session import SessionContext
from app.features.inventory.categories import CATEGORIES, CategorySpec

logger = logging.getLogger(__name__)

def build_category_router(spec: CategorySpec) -> APIRouter:
    """list/add/update/delete for one category under /api/<category>."""
    router = APIRouter(prefix=f"/api/{spec.name}", tags=[spec.name.capitalize()])
    can_list = require_permission(f"{spec.name}.list")
    can_write = require_permission(f"{spec.name}.write")
    Model = spec.model

    def get_item_or_404(db: Session, item_id: int):
        item = db.get(Model, item_id)
        if not item:
            raise HTTPException(status_code=404, detail="Item not found")
        return item

    @router.get("/items", response_model=List[spec.schema_out])
    def list_items(db: Session = Depends(get_db), session: SessionContext = Depends(can_list)):
        return db.query(Model).order_by(*spec.list_order).all()

    @router.post("/add")
    def add_item(item: spec.schema_in, db: Session = Depends(get_db), session: SessionContext = Depends(can_write)):
        new_item = Model(**item.model_dump())
        db.add(new_item)
        db.commit()
        db.refresh(new_item)
        logger.info("%s #%s added %s item #%s", session.role.value, session.subject_id, spec.name, new_item.id)
        return {"message": "Item added successfully", "id": new_item.id}

    @router.put("/update/{item_id}")
    def update_item(item_id: int, item: spec.schema_in, db: Session = Depends(get_db), session: SessionContext = Depends(can_write)):
        existing = get_item_or_404(db, item_id)
        for field, value in item.model_dump().items():
            setattr(existing, field, value)
        db.commit()
        logger.info("%s #%s updated %s item #%s", session.role.value, session.subject_id, spec.name, item_id)
        return {"message": "Item updated successfully"}

    @router.delete("/delete/{item_id}")
    def delete_item(item_id: int, db: Session = Depends(get_db), session: SessionContext = Depends(can_write)):
        existing = get_item_or_404(db, item_id)
        db.delete(existing)
        db.commit()
        logger.info("%s #%s deleted %s item #%s", session.role.value, session.subject_id, spec.name, item_id)
        return {"message": "Item deleted successfully"}

    return router

routers = [build_category_router(spec) for spec in CATEGORIES.values()]
