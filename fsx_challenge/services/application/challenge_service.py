"""
Application service: Orchestration layer for challenge generation.
"""
import logging
from typing import Tuple

from fsx_challenge.domain.models import Challenge
from fsx_challenge.infrastructure.xml_codec import encode_challenge
from fsx_challenge.services.domain.challenge_builder import (
    ChallengeBuilder,
    ChallengeParameters,
)

logger = logging.getLogger(__name__)


class ChallengeService:
    """
    Application service for challenge export.

    Coordinates the domain builder and the XML encoder; no placement
    logic lives here.
    """

    def __init__(
        self,
        builder: ChallengeBuilder,
        pretty_print: bool = False,
    ):
        """
        Initialize the service with dependencies.

        Args:
            builder: Challenge builder for station placement
            pretty_print: Whether to indent exported XML
        """
        self.builder = builder
        self.pretty_print = pretty_print

    def generate(self, params: ChallengeParameters) -> Challenge:
        """
        Build a fresh randomized challenge.

        Args:
            params: Distance range, gap, ring geometry and scores

        Returns:
            Challenge instance

        Raises:
            PlacementError: If placement gives up under the retry cap
            ValueError: If the distance range is empty
        """
        challenge = self.builder.build(params)
        logger.info(f"Generated challenge {challenge.name!r} "
                    f"({challenge.num_stations} stations)")
        return challenge

    def export(self, params: ChallengeParameters) -> Tuple[Challenge, str]:
        """
        Build a challenge and encode it as XML.

        Args:
            params: Distance range, gap, ring geometry and scores

        Returns:
            Tuple of the challenge and its XML document

        Raises:
            ChallengeEncodingError: If XML encoding fails
        """
        challenge = self.generate(params)
        return challenge, encode_challenge(challenge, pretty_print=self.pretty_print)
