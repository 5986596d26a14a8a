"""HeaderBuilder constructs request headers for web fetching.
It supports a fixed User-Agent and rotation through a pool.
Configuration values are read from valves.
"""

import logging
import random
from typing import Any, Dict, Mapping, Optional, Sequence

import httpx

from .user_agents import DEFAULT_USER_AGENTS, UserAgentPool, pick

logger = logging.getLogger(__name__)


def decorate(
    url: str,
    options: Optional[Mapping[str, Any]] = None,
    *,
    user_agent: Optional[str] = None,
    pool: Optional[Sequence[str]] = None,
    rng: Optional[random.Random] = None,
    base_headers: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Return a copy of *options* whose headers carry a User-Agent.

    The User-Agent is *user_agent* when given, otherwise one picked from
    *pool*. Headers already present in *options* are laid over it, so a
    caller-supplied User-Agent wins. *options* itself is left untouched.
    """
    options = dict(options or {})
    if user_agent is None:
        user_agent = pick(DEFAULT_USER_AGENTS if pool is None else pool, rng)

    headers = httpx.Headers(base_headers)
    headers["User-Agent"] = user_agent
    caller_headers = options.get("headers")
    if caller_headers:
        headers.update(httpx.Headers(caller_headers))
    options["headers"] = headers

    logger.debug("Decorated request to %s with User-Agent %r", url, headers["User-Agent"])
    return options


class HeaderBuilder:
    def __init__(self, valves, pool: Optional[Sequence[str]] = None, rng: Optional[random.Random] = None):
        self.valves = valves
        self.rng = rng
        self.default_user_agent: str = getattr(valves, "DEFAULT_USER_AGENT", DEFAULT_USER_AGENTS[0])
        # Optional extra headers from config
        self.base_headers = httpx.Headers()
        extra = getattr(valves, "EXTRA_HEADERS", {})
        if isinstance(extra, dict):
            self.base_headers.update(extra)
        self.rotate: bool = getattr(valves, "ROTATE_USER_AGENT", True)
        # Pool is copied, never shared with the valves list
        if pool is None:
            pool = getattr(valves, "USER_AGENT_POOL", DEFAULT_USER_AGENTS)
        self.ua_pool: Sequence[str] = tuple(pool)

    def user_agent(self) -> str:
        if self.rotate:
            return pick(self.ua_pool, self.rng)
        return self.default_user_agent

    def get_headers(self) -> httpx.Headers:
        headers = self.base_headers.copy()
        headers["User-Agent"] = self.user_agent()
        return headers

    def decorate(self, url: str, options: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        return decorate(url, options, user_agent=self.user_agent(), base_headers=self.base_headers)
