import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from app.config.database import engine, Base
from app.config.settings import settings
from app.features.auth.router import router as auth_router
from app.features.inventory.router import routers as category_routers
from app.features.student.router import router as student_router
from app.features.admin.router import router as admin_router
from app.features.audit.router import router as audit_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("campus_hub")

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create Database Tables
    Base.metadata.create_all(bind=engine)
    logger.info("%s started", settings.PROJECT_NAME)
    yield

app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})

app.include_router(auth_router)
for category_router in category_routers:
    app.include_router(category_router)
app.include_router(student_router)
app.include_router(admin_router)
app.include_router(audit_router)

@app.get("/")
def read_root():
    return {"message": f"{settings.PROJECT_NAME} is running"}
