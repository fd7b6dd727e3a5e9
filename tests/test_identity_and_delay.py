from __future__ import annotations

import random
import threading

import pytest

from models.fetch_identity import FetchIdentity
from services.delay_policy import NoDelayPolicy, SleepDelayPolicy
from services.errors import RunCancelled
from services.identity_provider import FixedSequenceIdentityProvider, RandomIdentityProvider


def test_random_provider_is_reproducible_with_seeded_rng():
    agents = ["ua-1", "ua-2", "ua-3"]
    proxies = ["http://p1:1", "http://p2:2"]
    first = RandomIdentityProvider(agents, proxies, random.Random(42))
    second = RandomIdentityProvider(agents, proxies, random.Random(42))

    picks = [first.next() for _ in range(10)]
    assert picks == [second.next() for _ in range(10)]
    assert all(p.user_agent in agents and p.proxy in proxies for p in picks)


def test_random_provider_without_proxies_goes_direct():
    identity = RandomIdentityProvider(["ua"], rng=random.Random(1)).next()
    assert identity.proxy is None
    assert identity.requests_proxies() is None


def test_random_provider_requires_user_agents():
    with pytest.raises(ValueError):
        RandomIdentityProvider([])


def test_fixed_sequence_cycles():
    ids = [FetchIdentity(user_agent="a"), FetchIdentity(user_agent="b")]
    provider = FixedSequenceIdentityProvider(ids)
    assert [provider.next().user_agent for _ in range(5)] == ["a", "b", "a", "b", "a"]


def test_sleep_policy_waits_on_cancel_event():
    waits = []

    class _Event(threading.Event):
        def wait(self, timeout=None):
            waits.append(timeout)
            return False

    policy = SleepDelayPolicy(5, 14, random.Random(3), _Event())
    policy.pacing_delay()
    policy.retry_delay(5)

    assert 5 <= waits[0] <= 14
    assert waits[1] == 5


def test_sleep_policy_raises_when_cancelled():
    event = threading.Event()
    event.set()
    policy = SleepDelayPolicy(0, 0, cancel_event=event)
    with pytest.raises(RunCancelled):
        policy.retry_delay(30)


def test_no_delay_policy_is_a_no_op():
    policy = NoDelayPolicy()
    assert policy.pacing_delay() is None
    assert policy.retry_delay(100) is None
