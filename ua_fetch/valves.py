"""Valves hold the configuration read by HeaderBuilder and FetchStrategy.
Consumers read fields with getattr defaults, so any object exposing the same
upper-case attributes can stand in for this model.
"""

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from .user_agents import DEFAULT_USER_AGENTS, InvalidInput, validate_user_agent


class Valves(BaseModel):
    DEFAULT_USER_AGENT: str = Field(
        default=DEFAULT_USER_AGENTS[0],
        description="User-Agent sent when rotation is disabled, and the client-wide default",
    )
    USER_AGENT_POOL: List[str] = Field(
        default_factory=lambda: list(DEFAULT_USER_AGENTS),
        description="User-Agents to rotate through, one picked per request",
    )
    ROTATE_USER_AGENT: bool = Field(
        default=True,
        description="Pick a User-Agent from the pool for every request",
    )
    EXTRA_HEADERS: Dict[str, str] = Field(
        default_factory=dict,
        description="Headers sent with every request",
    )

    @field_validator("DEFAULT_USER_AGENT")
    @classmethod
    def check_default_user_agent(cls, v: str) -> str:
        return validate_user_agent(v)

    @field_validator("USER_AGENT_POOL", mode="before")
    @classmethod
    def split_user_agent_pool(cls, v):
        # Newline separated text, as pasted into a settings form
        if isinstance(v, str):
            return [line for line in v.splitlines() if line.strip()]
        return v

    @field_validator("USER_AGENT_POOL")
    @classmethod
    def check_user_agent_pool(cls, v: List[str]) -> List[str]:
        return [validate_user_agent(ua) for ua in v]

    @model_validator(mode="after")
    def check_rotation_has_pool(self) -> "Valves":
        if self.ROTATE_USER_AGENT and not self.USER_AGENT_POOL:
            raise InvalidInput("USER_AGENT_POOL must not be empty while ROTATE_USER_AGENT is on")
        return self
