import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.logging_config import configure_logging
from .core.settings import get_settings
from .db import create_tables
from .routers import auth, categories, expenses, distributions, admin

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Expense Tracker API",
    description="Track expenses by category and compare spending with target distributions",
    version="1.0.0",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(expenses.router)
app.include_router(distributions.router)
app.include_router(admin.router)

@app.on_event("startup")
def create_schema():
    create_tables()
    logger.info(f"Expense Tracker API started ({settings.environment})")

@app.get("/health")
async def health_check():
    return {"status": "healthy", "message": "Expense Tracker API is running"}

@app.get("/")
async def root():
    return {"message": "Welcome to Expense Tracker API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("expense_tracker.main:app", host="0.0.0.0", port=8000, reload=True)
