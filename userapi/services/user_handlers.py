"""User Handlers — create and find_one, registered through the dispatch context.

Invariants:
    - Every handler is (req, res): req.params_all() + req.db in, one res.json() out
    - Parameters pass delete → apply → validate before any DB access
    - Failures are raised as SymbolicError; the dispatcher writes the error JSON
    - password_hash never leaves this module (responses built from UserOut)

Design Decisions:
    - Explicit registry dict: every handler name visible at the registration site
    - build_user_handlers(dispatch) takes the context as a parameter so tests
      can register against their own DispatchContext
    - Duplicate email checked before insert AND mapped from IntegrityError
      (two concurrent creates can both pass the check)
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from userapi.config import get_settings
from userapi.core.dispatch_context import DispatchContext, get_dispatch_context
from userapi.core.parameter_set import ParameterSet
from userapi.core.passwords import hash_password
from userapi.core.string_util import clean_proper_name
from userapi.core.symbolic_error import SymbolicError
from userapi.models.user import User
from userapi.schemas.user import UserCreate, UserLookup, UserOut

logger = logging.getLogger(__name__)


def public_user(user: User) -> dict:
    return UserOut.model_validate(user).model_dump(mode="json", by_alias=True)


async def create(req, res):
    """Create a user. Names are cleaned (whitespace removed, first letter upper)."""
    params = (
        ParameterSet(req, UserCreate)
        .delete("id")
        .apply(["firstName", "lastName"], clean_proper_name)
        .validate()
        .get_all()
    )
    db = req.db
    existing = await db.execute(
        select(User).where(User.email == params["email"]),
    )
    if existing.scalar_one_or_none() is not None:
        raise SymbolicError(
            "user.emailTaken", f"Email '{params['email']}' is already registered",
        )

    user = User(
        first_name=params["firstName"],
        last_name=params["lastName"],
        email=params["email"],
        password_hash=hash_password(
            params["password"], get_settings().password_hash_iterations,
        ),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise SymbolicError(
            "user.emailTaken", f"Email '{params['email']}' is already registered", e,
        ) from e
    await db.refresh(user)
    logger.info("User created", extra={"user_id": str(user.id)})
    res.json({"data": public_user(user)}, status_code=201)


async def find_one(req, res):
    params = ParameterSet(req, UserLookup).validate()
    user_id = uuid.UUID(str(params.get("userId")))
    result = await req.db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise SymbolicError("user.notFound", f"User '{user_id}' not found")
    res.json({"data": public_user(user)})


def build_user_handlers(dispatch: DispatchContext) -> dict:
    return dispatch.register({
        "create": create,
        "find_one": find_one,
    })


USER_HANDLERS = build_user_handlers(get_dispatch_context())
