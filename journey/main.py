from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from journey.core.config import settings
from journey.core.errors import ErrorCode, JourneyError
from journey.core.logger import logger
from journey.routes import api_router
from journey.core.redis_lifecycle import init_redis_client, close_redis
from journey.dependencies.store import drain_dispatcher

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.PROJECT_DESCRIPTION,
    openapi_url="/openapi.json"
)

STATUS_BY_CODE = {
    ErrorCode.TRIP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PARTICIPANT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PARTICIPANT_ALREADY_CONFIRMED: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_URL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ACTIVITY_OUTSIDE_TRIP: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
}


@app.exception_handler(JourneyError)
async def journey_error_handler(request: Request, exc: JourneyError):
    status_code = STATUS_BY_CODE.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=status_code, content={"message": exc.user_message})


# Include all API routes
app.include_router(api_router)

@app.get("/")
async def root():
    return {"message": "Welcome to Journey API"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}

@app.on_event("startup")
async def startup_event():
    await init_redis_client()

@app.on_event("shutdown")
async def shutdown_event():
    await drain_dispatcher()
    await close_redis()
