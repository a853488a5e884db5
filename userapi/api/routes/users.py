"""User Routes — thin FastAPI endpoints over USER_HANDLERS.

Invariants:
    - Path parameter is 'userId', never 'id' (ParameterSet strips 'id')
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from userapi.api.routes import run_handler
from userapi.infrastructure.database import get_db
from userapi.services.user_handlers import USER_HANDLERS

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post("")
async def create_user(request: Request, db: AsyncSession = Depends(get_db)):
    """Create a user from firstName, lastName, email, password."""
    return await run_handler(USER_HANDLERS["create"], request, db)


@router.get("/{userId}")
async def get_user(request: Request, db: AsyncSession = Depends(get_db)):
    return await run_handler(USER_HANDLERS["find_one"], request, db)
