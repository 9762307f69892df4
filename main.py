from fastapi import FastAPI
from student_reports.api.v1 import api_router
from student_reports.config import settings

app = FastAPI(
    title=settings.app_name,
    description="Filters and summarizes student records fetched from a JSON endpoint",
    version="1.0.0"
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/")
async def root():
    return {
        "message": "Welcome to Student Reports",
        "description": "Runs fixed filter and aggregate queries over fetched student records"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
