from fastapi import Depends, HTTPException
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session
from club.core.security import decode_actor_claims
from club.db.session import get_db
from club.services.categories import StaticCategoryRegistry
from club.services.permissions import ANONYMOUS, Actor
from club.services.topic_service import TopicService

bearer = HTTPBearer(auto_error=False)

def get_actor(creds: HTTPAuthorizationCredentials = Depends(bearer)) -> Actor:
    if not creds:
        return ANONYMOUS
    try:
        claims = decode_actor_claims(creds.credentials)
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
    try:
        user_id = int(claims.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="Invalid token")
    return Actor(user_id=user_id, is_admin=bool(claims.get("is_admin")))

def require_user(actor: Actor = Depends(get_actor)) -> Actor:
    if actor.is_anonymous:
        raise HTTPException(status_code=401, detail="Authorization token missing")
    return actor

def get_category_registry() -> StaticCategoryRegistry:
    return StaticCategoryRegistry.from_settings()

def get_topic_service(
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
    categories: StaticCategoryRegistry = Depends(get_category_registry),
) -> TopicService:
    return TopicService(db, categories, actor)
