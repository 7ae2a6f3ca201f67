import logging

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from school_assessment import config
from school_assessment import models  # noqa: F401  registers every table on Base
from school_assessment.database import Base, engine
from school_assessment.models.user import Role
from school_assessment.routers import (
    answers as answers_router,
    auth as auth_router,
    bootstrap as bootstrap_router,
    directors as directors_router,
    events as events_router,
    schools as schools_router,
    teachers as teachers_router,
)
from school_assessment.services import accounts
from school_assessment.services.errors import ServiceError

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("school_assessment")

if config.JWT_SECRET == "change-me":
    logger.warning("JWT_SECRET is not set, tokens are signed with the development default")

app = FastAPI(
    title="School Assessment API",
    description="Admins manage schools and directors, directors manage teachers, "
                "teachers answer event-based questionnaires.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
Base.metadata.create_all(bind=engine)


def seed_admin() -> None:
    """Creates the admin from SEED_ADMIN_EMAIL / SEED_ADMIN_PASSWORD once."""
    if not (config.SEED_ADMIN_EMAIL and config.SEED_ADMIN_PASSWORD):
        return
    with Session(engine) as db:
        if accounts.find_by_email(db, config.SEED_ADMIN_EMAIL):
            return
        accounts.new_user(db, config.SEED_ADMIN_EMAIL, config.SEED_ADMIN_PASSWORD, config.SEED_ADMIN_NAME, Role.ADMIN)
        db.commit()
        logger.info("Seeded admin account %s", config.SEED_ADMIN_EMAIL)


seed_admin()


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    fields = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        fields.append(f"{loc or 'body'}: {err.get('msg')}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed: " + "; ".join(fields)},
    )


api = APIRouter(prefix=config.API_PREFIX)


@api.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


api.include_router(auth_router.router)
api.include_router(schools_router.router)
api.include_router(directors_router.router)
api.include_router(teachers_router.router)
api.include_router(events_router.router)
api.include_router(answers_router.router)
if config.ENABLE_TEST_ROUTES:
    api.include_router(bootstrap_router.router)

app.include_router(api)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("school_assessment.main:app", host="127.0.0.1", port=8000, reload=True)
