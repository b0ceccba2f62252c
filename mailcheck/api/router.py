from fastapi import APIRouter

from mailcheck.api.validation import router as validation_router

api_router = APIRouter()

api_router.include_router(validation_router, tags=["Endpoints"])
