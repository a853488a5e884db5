"""Auth Routes — login endpoint over AUTH_HANDLERS."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.api.routes import run_handler
from userapi.infrastructure.database import get_db
from userapi.services.auth_handlers import AUTH_HANDLERS

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/login")
async def login(request: Request, db: AsyncSession = Depends(get_db)):
    return await run_handler(AUTH_HANDLERS["login"], request, db)
