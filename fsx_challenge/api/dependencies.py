"""
Dependency injection for FastAPI.
"""
from typing import Annotated
from fastapi import Depends
from slowapi import Limiter
from slowapi.util import get_remote_address

from fsx_challenge.config import settings
from fsx_challenge.services.domain.challenge_builder import ChallengeBuilder
from fsx_challenge.services.application.challenge_service import ChallengeService


# Rate limiter, shared by the app and the routers
limiter = Limiter(key_func=get_remote_address)


def get_challenge_builder() -> ChallengeBuilder:
    """
    Dependency factory for ChallengeBuilder.

    Each builder draws from fresh, entropy-seeded numpy generators.

    Returns:
        ChallengeBuilder instance
    """
    max_attempts = settings.placement_max_attempts or None
    return ChallengeBuilder(max_attempts=max_attempts)


def get_challenge_service(
    builder: Annotated[ChallengeBuilder, Depends(get_challenge_builder)],
) -> ChallengeService:
    """
    Dependency factory for ChallengeService.

    Args:
        builder: Challenge builder (injected)

    Returns:
        ChallengeService instance
    """
    return ChallengeService(builder=builder, pretty_print=settings.xml_pretty_print)


# Type aliases for cleaner route signatures
ChallengeServiceDep = Annotated[ChallengeService, Depends(get_challenge_service)]
