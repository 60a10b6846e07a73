"""Landing page personas."""

from enum import Enum


class Role(str, Enum):
    """Persona the generated page is written for."""

    AGENT = "agent"
    LOAN = "loan"
    PROFILE = "profile"
