import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.services.greeting_service import get_greeting

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/greet/{name}", response_class=PlainTextResponse)
def greet(name: str):
    logger.debug("Greeting %r", name)
    return get_greeting(name)
