import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from finance_dashboard.core.config import CORS_ORIGINS, LOG_LEVEL
from finance_dashboard.database import create_db_and_tables
from finance_dashboard.api import auth, dashboard, expenses, export, income, savings_goal
from finance_dashboard.repositories.record_store import RecordNotFoundError
from finance_dashboard.routes import fx
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield

app = FastAPI(title="Personal Finance Dashboard", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return JSONResponse(status_code=400, content={"detail": "; ".join(messages)})

@app.exception_handler(RecordNotFoundError)
async def not_found_exception_handler(request: Request, exc: RecordNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

app.include_router(auth.router)
app.include_router(income.router)
app.include_router(expenses.router)
app.include_router(savings_goal.router)
app.include_router(dashboard.router)
app.include_router(export.router)
app.include_router(fx.router)

@app.get("/")
def root():
    return {"message": "Personal finance dashboard API"}
