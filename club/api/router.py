from fastapi import APIRouter
from club.api import topics

router = APIRouter()
router.include_router(topics.router, prefix="/topics", tags=["Topics"])
