import logging

from fastapi import FastAPI

from gradetrack.core.logging_middleware import LoggingMiddleware
from gradetrack.db.init_db import init_db
from gradetrack.routers.reports import router as reports_router
from gradetrack.routers.school_years import router as school_years_router

logging.basicConfig(level=logging.INFO)

app = FastAPI(title="Grade Track")

# Middleware
app.add_middleware(LoggingMiddleware)


# Health check
@app.get("/health")
def health():
    return {"status": "ok"}


# Startup event
@app.on_event("startup")
def on_startup():
    init_db()


# Include routers
app.include_router(school_years_router, prefix="/school-year", tags=["school-year"])
# role checks are the caller's job; mount behind the admin guard in deployment
app.include_router(reports_router, prefix="/admin", tags=["reports"])
