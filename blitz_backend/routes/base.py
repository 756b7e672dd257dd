# blitz_backend/routes/base.py
from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root():
    return {"message": "Server Running"}
