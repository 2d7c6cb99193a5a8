# skillexchange/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skillexchange.api import assessment, auth, dashboard, exchange, message, skill
from skillexchange.config import settings
from skillexchange.database import Base, SessionLocal, engine
from skillexchange.errors import AuthenticationError, SkillExchangeError, ValidationError
from skillexchange.logging_config import configure_logging
from skillexchange.services.question_seed import seed_assessment_questions

configure_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Create database tables
    Base.metadata.create_all(bind=engine)
    if settings.SEED_ASSESSMENT_QUESTIONS:
        db = SessionLocal()
        try:
            seed_assessment_questions(db)
        finally:
            db.close()
    yield


# Initialize FastAPI app
app = FastAPI(title="SkillExchange API", debug=settings.DEBUG, lifespan=lifespan)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SkillExchangeError)
async def skill_exchange_error_handler(request: Request, exc: SkillExchangeError):
    body = {"detail": exc.message}
    headers = None
    if isinstance(exc, ValidationError):
        body["errors"] = exc.errors
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)


# API routers
app.include_router(auth.router)                   # /api/register, /api/login, /api/user
app.include_router(skill.router)                  # /api/skills/*
app.include_router(assessment.router)             # /api/assessments/*
app.include_router(assessment.questions_router)   # /api/assessment/questions
app.include_router(message.router)                # /api/messages/*
app.include_router(exchange.router)               # /api/exchanges/*
app.include_router(dashboard.router)              # /api/dashboard/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "SkillExchange API is running",
        "version": "1.0.0",
    }
