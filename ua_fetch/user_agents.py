"""User-Agent pool and random selection.
Pools are immutable; selection draws uniformly from an injectable random source.
"""

import math
import random
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

MAX_USER_AGENT_LENGTH = 8192

DEFAULT_USER_AGENTS = (
    # Chrome on Windows
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    # Chrome on macOS
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    # Firefox on Windows
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:121.0) Gecko/20100101 Firefox/121.0",
    # Firefox on Linux
    "Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0",
    # Safari on macOS
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/17.2 Safari/605.1.15",
    # Edge on Windows
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36 Edg/120.0.0.0",
)

# C0 controls and DEL are not valid in a header field value
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")

_default_rng = random.Random()


class InvalidInput(ValueError):
    """Raised for an empty pool or a malformed user-agent string."""


def validate_user_agent(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidInput(f"User-Agent must be a string, got {type(value).__name__}")
    value = value.strip()
    if not value:
        raise InvalidInput("User-Agent must not be empty")
    if len(value) > MAX_USER_AGENT_LENGTH:
        raise InvalidInput(f"User-Agent longer than {MAX_USER_AGENT_LENGTH} characters")
    if _CONTROL_CHARS.search(value):
        raise InvalidInput("User-Agent contains control characters")
    return value


class UserAgentPool(Sequence[str]):
    """Ordered, read-only collection of user-agent strings."""

    def __init__(self, user_agents: Iterable[str]):
        self._agents = tuple(validate_user_agent(ua) for ua in user_agents)
        if not self._agents:
            raise InvalidInput("User-Agent pool must not be empty")

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "UserAgentPool":
        """Load one user agent per line; blank lines and `#` comments are skipped."""
        lines = Path(path).read_text(encoding="utf-8").splitlines()
        return cls(line for line in lines if line.strip() and not line.lstrip().startswith("#"))

    def __getitem__(self, index):
        return self._agents[index]

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[str]:
        return iter(self._agents)

    def __repr__(self) -> str:
        return f"UserAgentPool({len(self._agents)} agents)"

    def pick(self, rng: Optional[random.Random] = None) -> str:
        return pick(self, rng)


def pick(pool: Sequence[str], rng: Optional[random.Random] = None) -> str:
    """Return one element of *pool*, drawn uniformly with replacement.

    *rng* only needs a ``random()`` method returning a float in [0, 1).
    Raises InvalidInput when the pool is empty.
    """
    if not pool:
        raise InvalidInput("cannot pick from an empty User-Agent pool (index out of range)")
    rng = rng or _default_rng
    index = math.floor(rng.random() * len(pool))
    return pool[index]
