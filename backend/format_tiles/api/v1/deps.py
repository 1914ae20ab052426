from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from format_tiles.core.config import settings
from format_tiles.crud.access import get_user
from format_tiles.db.session import get_db
from format_tiles.modules.tiles.environment import TilesEnvironment
from format_tiles.modules.tiles.useragent import classify_user_agent
from format_tiles.services.auth import verify_jwt_token


security = HTTPBearer()


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
):
    user_id = verify_jwt_token(credentials.credentials)
    try:
        user = get_user(db, int(user_id))
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload") from exc
    if not user or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


def get_environment(
    request: Request,
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
) -> TilesEnvironment:
    return TilesEnvironment(
        db=db,
        user=current_user,
        client=classify_user_agent(request.headers.get("user-agent")),
        session=request.session,
        params=request.query_params,
        settings=settings,
    )
