from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from .routes import users, shows
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Show Tracker API",
    description="API for tracking the TV shows a user watches",
    version="1.0.0"
)

@app.on_event("startup")
async def startup_event():
    from .database import engine, init_db, ENV
    logger.info(f"Starting Show Tracker API (ENV={ENV})")
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        # Users and shows tables are created on first start
        init_db()
        logger.info("User and show tables are ready")
    except SQLAlchemyError as e:
        logger.error(f"Show Tracker database unavailable at startup: {str(e)}")
        raise

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed or missing input is a bad request
    logger.info(f"Rejected {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": jsonable_encoder(exc.errors())},
    )

# Include routers
app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(shows.router, prefix="/shows", tags=["Shows"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Show Tracker API"}


if __name__ == "__main__":
    import os
    import uvicorn
    uvicorn.run(app, host=os.environ.get("HOST", "0.0.0.0"), port=int(os.environ.get("PORT", "8000")))
