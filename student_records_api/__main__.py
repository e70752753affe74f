"""Run the Student Records API with uvicorn.

Usage::

    python -m student_records_api

Host and port are read from ``HOST`` and ``PORT`` (defaults
``0.0.0.0`` and ``8080``); see ``app/core/config.py`` for the other
settings.  uvicorn logs through the handlers installed by
``setup_logging`` and exits the process if the port cannot be bound.
"""
from uvicorn import Config, Server

from student_records_api.app.core.config import settings
from student_records_api.app.main import app


def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_config=None)
    server = Server(config)
    server.run()


if __name__ == "__main__":
    main()
