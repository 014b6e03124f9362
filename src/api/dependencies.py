"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services into routes.
"""

from fastapi import Request

from src.domain.registration import RegistrationService


def get_registration_service(request: Request) -> RegistrationService:
    """
    Get registration service from app state.

    The service is wired during app lifespan startup and stored in app.state.
    """
    return request.app.state.registration_service
