import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError
from shared.models.users import Users
from shared.core.config import settings
from shared.core.schemas import UserToken
from shared.core.database import get_facility_db as get_db
from shared.utils.enums import UserStatus, permissions_for
from sqlalchemy.orm import Session

security = HTTPBearer(auto_error=False)


def create_access_token(data: dict, expires_minutes: Optional[int] = None):
    payload = data.copy()

    expires = datetime.now(timezone.utc) + timedelta(
        minutes=expires_minutes or settings.JWT_EXPIRE_MINUTES)
    payload['exp'] = expires

    if 'user_id' in payload:
        payload['user_id'] = str(payload['user_id'])

    token = jwt.encode(payload, settings.JWT_SECRET,
                       algorithm=settings.JWT_ALGORITHM)
    return token


def create_user_token(user: Users) -> str:
    return create_access_token({
        "user_id": str(user.id),
        "name": user.name,
        "email": user.email,
        "role": user.role,
    })


def verify_token(token: str) -> UserToken:
    """Verify and decode a JWT token."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET,
                             algorithms=[settings.JWT_ALGORITHM])
        user = UserToken(**payload)
        uuid.UUID(user.user_id)
        return user
    except (JWTError, PydanticValidationError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


def validate_current_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> UserToken:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_data = verify_token(credentials.credentials)

    # Fetch the user from the database
    user = db.query(Users).filter(
        Users.id == uuid.UUID(user_data.user_id),
        Users.is_deleted == False
    ).first()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found"
        )

    if (user.status or "").lower() != UserStatus.ACTIVE.value:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User is not active. Access denied"
        )

    # role and permissions come from the database, not the token
    user_data.role = user.role
    user_data.status = user.status
    user_data.permissions = permissions_for(user.role)
    return user_data


def ensure_permission(current_user: UserToken, permission: str):
    if permission not in current_user.permissions:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Access forbidden: missing permission '{permission}'"
        )


def require_permission(permission: str):
    def checker(current_user: UserToken = Depends(validate_current_token)) -> UserToken:
        ensure_permission(current_user, permission)
        return current_user

    return checker
