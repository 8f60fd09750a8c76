import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.services.greeting_service import get_welcome

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
def index():
    logger.debug("Serving welcome message")
    return get_welcome()
