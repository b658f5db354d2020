import platform
import socket
from typing import Any, Dict

import fastapi
import pydantic

from health_aggregator.domain import IEnvironmentCollector


class PlatformEnvironmentCollector(IEnvironmentCollector):
    """Reports the application identity, the Python stack and the host platform."""

    def __init__(self, app_name: str, app_version: str, environment: str):
        self._app_name = app_name
        self._app_version = app_version
        self._environment = environment

    def info(self) -> Dict[str, Any]:
        return {
            "application": {
                "name": self._app_name,
                "version": self._app_version,
                "environment": self._environment,
            },
            "stack": {
                "python": platform.python_version(),
                "implementation": platform.python_implementation(),
                "fastapi": fastapi.__version__,
                "pydantic": pydantic.VERSION,
            },
            "platform": {
                "system": platform.system(),
                "release": platform.release(),
                "machine": platform.machine(),
                "hostname": socket.gethostname(),
            },
        }
