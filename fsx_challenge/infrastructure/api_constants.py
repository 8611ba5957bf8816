"""
HTTP-facing constants: query parameter defaults and media types.

Centralizing these values keeps the form, the query model and the
documentation in agreement.
"""


class ChallengeDefaults:
    """Defaults for optional challenge query parameters (yards / points)."""

    MIN_GAP = 10
    INNER_RING = 8
    MID_RING = 16
    OUTER_RING = 24

    INNER_SCORE = 5
    MID_SCORE = 3
    OUTER_SCORE = 1


class ChallengeLimits:
    """Upper bounds accepted for query lengths (yards)."""

    MAX_YARDAGE = 1_000_000


class APIConstants:
    """General API configuration constants."""

    # Media types
    CONTENT_TYPE_XML = "application/xml"
    CONTENT_TYPE_HTML = "text/html"

    # Exported file extension
    CHALLENGE_FILE_SUFFIX = ".xml"

    @classmethod
    def content_disposition(cls, challenge_name: str) -> str:
        """
        Build the Content-Disposition header for an exported challenge.

        Args:
            challenge_name: Challenge name, used as the file stem

        Returns:
            Header value, e.g. ``inline; filename="20 - 40 0a1b2c3d.xml"``
        """
        return f'inline; filename="{challenge_name}{cls.CHALLENGE_FILE_SUFFIX}"'
