from .identity import IdentityProviderPort
from .delay import DelayPolicyPort
from .fetcher import FetcherPort

__all__ = [
    "IdentityProviderPort",
    "DelayPolicyPort",
    "FetcherPort",
]
