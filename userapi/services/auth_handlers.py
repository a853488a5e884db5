"""Auth Handlers — credential check for login.

Invariants:
    - Unknown email and wrong password produce the same 'auth.badCredentials'
      error (no account enumeration)
    - No session or token issued: login only confirms the credential pair
"""

from sqlalchemy import select

from userapi.core.dispatch_context import DispatchContext, get_dispatch_context
from userapi.core.parameter_set import ParameterSet
from userapi.core.passwords import verify_password
from userapi.core.symbolic_error import SymbolicError
from userapi.models.user import User
from userapi.schemas.user import UserLogin
from userapi.services.user_handlers import public_user


async def login(req, res):
    params = (
        ParameterSet(req, UserLogin)
        .apply("email", lambda v: v.strip() if isinstance(v, str) else v)
        .validate()
    )
    result = await req.db.execute(
        select(User).where(User.email == params.get("email")),
    )
    user = result.scalar_one_or_none()
    if user is None or not verify_password(params.get("password"), user.password_hash):
        raise SymbolicError(
            "auth.badCredentials", "Login/Password pair not valid.",
        )
    res.json({"data": public_user(user)})


def build_auth_handlers(dispatch: DispatchContext) -> dict:
    return dispatch.register({"login": login})


AUTH_HANDLERS = build_auth_handlers(get_dispatch_context())
