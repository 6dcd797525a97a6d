import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import get_logger, settings
from app.core.exceptions import AppError
from app.db.base import Base, engine
from app.db.models import review as review_model, user as user_model  # noqa: F401  register tables
from app.api.routes import auth
from app.api.routes import review as review_router
from app.api.routes import mobile_reviews as mobile_reviews_router

logger = get_logger("app")

app = FastAPI(title="Shop Reviews API")


@app.on_event("startup")
def startup():
    Base.metadata.create_all(bind=engine)
    logger.info("tables ready (env=%s)", settings.app_env)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # raw inputs are not echoed back; they may hold NaN, which JSON output rejects
    errors = [{k: v for k, v in e.items() if k != "input"} for e in exc.errors()]
    if any(e.get("type") == "json_invalid" for e in errors):
        detail = "Invalid JSON"
    else:
        detail = "Invalid request body"
    return JSONResponse(status_code=400, content={"detail": detail, "errors": jsonable_encoder(errors)})


@app.get("/")
def root():
    return {"message": "Shop Reviews API running"}


@app.get("/health")
def health():
    return {"status": "ok", "environment": settings.app_env}


app.include_router(auth.router)
app.include_router(review_router.router)
app.include_router(mobile_reviews_router.router)


def run():
    """Console entry point (`shop-reviews`)."""
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
