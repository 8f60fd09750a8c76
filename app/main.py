import uvicorn
from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import configure_logging
from app.routes import greet, root

configure_logging(settings.log_level)

app = FastAPI(title=settings.app_name, debug=settings.debug)

app.include_router(root.router)
app.include_router(greet.router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
