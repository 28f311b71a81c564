"""Todo API FastAPI Application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_explorer.api.config import get_settings
from todo_explorer.api.database import get_db
from todo_explorer.api.exceptions import register_exception_handlers
from todo_explorer.api.routers import todos

settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="API for browsing and editing todos",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(todos.router, prefix="/api/todos", tags=["Todos"])


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": settings.version,
        "docs": "/docs",
        "endpoints": {
            "todos": "/api/todos",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    try:
        db = get_db()
        count = db.fetch_one("SELECT COUNT(*) FROM todos")[0]
        return {
            "status": "healthy",
            "database": "connected",
            "total_todos": count,
        }
    except Exception as e:
        return {
            "status": "unhealthy",
            "database": "disconnected",
            "error": str(e),
        }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
