import uvicorn

from codelock_watch.config import settings
from codelock_watch.presentation.app_factory import create_app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
