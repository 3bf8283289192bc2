"""FastAPI application entry point."""

import uvicorn
from ddtrace import patch_all

from audio_analysis.app import create_app
from audio_analysis.dependencies import get_config

patch_all()

app = create_app()


def serve():
    """Runs the API server on the configured host and port."""
    config = get_config()
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_config=None)


if __name__ == "__main__":
    serve()
