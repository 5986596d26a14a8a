"""Tests for Valves"""
import pytest
from pydantic import ValidationError
from ua_fetch.header_builder import HeaderBuilder
from ua_fetch.user_agents import DEFAULT_USER_AGENTS
from ua_fetch.valves import Valves

def test_defaults():
    valves = Valves()
    assert valves.DEFAULT_USER_AGENT == DEFAULT_USER_AGENTS[0]
    assert valves.USER_AGENT_POOL == list(DEFAULT_USER_AGENTS)
    assert valves.ROTATE_USER_AGENT is True
    assert valves.EXTRA_HEADERS == {}

def test_pool_from_text():
    valves = Valves(USER_AGENT_POOL="A/1\n\nB/2\n")
    assert valves.USER_AGENT_POOL == ["A/1", "B/2"]

def test_rejects_header_injection():
    with pytest.raises(ValidationError):
        Valves(USER_AGENT_POOL=["A/1", "B/2\r\nX-Evil: 1"])
    with pytest.raises(ValidationError):
        Valves(DEFAULT_USER_AGENT="")

def test_header_builder_reads_valves():
    valves = Valves(USER_AGENT_POOL=["A/1"], EXTRA_HEADERS={"Accept": "text/html"})
    headers = HeaderBuilder(valves).get_headers()
    assert headers == {"Accept": "text/html", "User-Agent": "A/1"}

def test_rejects_empty_pool_while_rotating():
    with pytest.raises(ValidationError):
        Valves(USER_AGENT_POOL=[])
    valves = Valves(USER_AGENT_POOL=[], ROTATE_USER_AGENT=False)
    assert HeaderBuilder(valves).get_headers()["User-Agent"] == DEFAULT_USER_AGENTS[0]
