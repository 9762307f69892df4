from fastapi import APIRouter
from student_reports.api.v1.endpoints import reports

api_router = APIRouter()
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
