from fastapi import APIRouter

from app.api import loan

api_router = APIRouter()
for module in (loan,):
    api_router.include_router(module.router)
