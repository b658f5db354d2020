"""
Health Check Aggregator Package

A Clean Architecture implementation for running health checks and reporting
their aggregated status over HTTP.
"""

from health_aggregator.domain import CheckRegistry, CheckFailure, Ok, Error
from health_aggregator.container import Container, create_container
from health_aggregator.main import create_app

__all__ = [
    "CheckRegistry",
    "CheckFailure",
    "Ok",
    "Error",
    "Container",
    "create_container",
    "create_app",
]
