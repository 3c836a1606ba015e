"""
Campus Data Backend — Identity Provider Interface
==================================================

What:  Turns an incoming request into the caller's identity claims (or None).
Why:   The OAuth2/OIDC login itself is performed by an external collaborator.
       This service only needs the outcome: who is calling. Hiding that
       behind an interface keeps the rest of the code independent of how
       the claims arrive.
How:   IdentityProvider is an abstract class (Strategy pattern).
       ProxyHeaderIdentityProvider, the default, reads claims that the
       authenticating reverse proxy (e.g. oauth2-proxy with
       --set-xauthrequest) adds to every request it lets through.

Security:
    Header-based identity is only sound when the service is reachable
    exclusively through the proxy, which strips client-supplied copies of
    these headers. Deployments must not expose the backend port directly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from starlette.requests import Request

from campusdata.config import Settings, settings as default_settings


@dataclass(frozen=True)
class Principal:
    """
    Identity claims for the current caller, as reported by the provider.

    Only `email` is required; every other claim is optional profile data that
    is copied onto the stored User record.
    """

    email: str
    full_name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    subject: Optional[str] = None
    picture_url: Optional[str] = None
    email_verified: bool = False
    locale: Optional[str] = None
    domain_claim: Optional[str] = None

    @property
    def hosted_domain(self) -> Optional[str]:
        """
        The hosted domain the provider reported, lower-cased.

        Falls back to the domain part of the email ('ucsb.edu' for
        x@UCSB.edu) when the provider sends no domain claim.
        """
        if self.domain_claim:
            return self.domain_claim.lower()
        if "@" not in self.email:
            return None
        return self.email.rsplit("@", 1)[1].lower()


class IdentityProvider(ABC):
    """
    Contract:
        - resolve() returns a Principal for an authenticated request
        - resolve() returns None for an anonymous request; it never raises
          for "not logged in", because some routes allow anonymous callers
    """

    @abstractmethod
    async def resolve(self, request: Request) -> Optional[Principal]:
        """Extract the caller's identity from the request, or None."""


class ProxyHeaderIdentityProvider(IdentityProvider):
    """Reads identity claims from headers set by the authenticating proxy."""

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    async def resolve(self, request: Request) -> Optional[Principal]:
        headers = request.headers
        email = (headers.get(self.config.auth_email_header) or "").strip()
        if not email:
            return None

        def claim(header_name: str) -> Optional[str]:
            value = headers.get(header_name)
            return value.strip() if value and value.strip() else None

        return Principal(
            email=email,
            full_name=claim(self.config.auth_name_header),
            given_name=claim(self.config.auth_given_name_header),
            family_name=claim(self.config.auth_family_name_header),
            subject=claim(self.config.auth_subject_header),
            picture_url=claim(self.config.auth_picture_header),
            locale=claim(self.config.auth_locale_header),
            domain_claim=claim(self.config.auth_hosted_domain_header),
            # The proxy only forwards emails the provider has verified
            email_verified=True,
        )


identity_provider: IdentityProvider = ProxyHeaderIdentityProvider()


def get_identity_provider() -> IdentityProvider:
    """FastAPI dependency; tests override it to impersonate callers."""
    return identity_provider
