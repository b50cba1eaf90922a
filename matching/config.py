"""Configuration for answer matching.

The acceptance threshold depends on where matching runs. The client preview
is more lenient than the authoritative server check; each context uses a
single threshold so preview and final feedback stay consistent.
"""

from enum import Enum

from pydantic import BaseModel, Field

from matching.variants import DEFAULT_MAX_VARIANTS


class DeploymentContext(str, Enum):
    CLIENT = "client"
    SERVER = "server"


CONTEXT_THRESHOLDS: dict[DeploymentContext, float] = {
    DeploymentContext.CLIENT: 0.75,
    DeploymentContext.SERVER: 0.8,
}


class MatchingConfig(BaseModel):
    """Tunable parameters of the blank matcher."""

    match_threshold: float = Field(default=0.8, ge=0.0, le=1.0)
    full_credit_threshold: float = Field(default=0.95, ge=0.0, le=1.0)
    short_answer_max_length: int = Field(default=3, ge=0)
    max_variants: int = Field(default=DEFAULT_MAX_VARIANTS, ge=1)

    @classmethod
    def for_context(cls, context: DeploymentContext) -> "MatchingConfig":
        """Build the configuration used by the given deployment context."""
        return cls(match_threshold=CONTEXT_THRESHOLDS[DeploymentContext(context)])


SERVER_CONFIG = MatchingConfig.for_context(DeploymentContext.SERVER)
CLIENT_CONFIG = MatchingConfig.for_context(DeploymentContext.CLIENT)
