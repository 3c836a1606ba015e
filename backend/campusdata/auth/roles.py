"""Granted authorities. Values match what /api/currentUser reports."""

import enum


class Role(str, enum.Enum):
    USER = "ROLE_USER"      # any authenticated caller
    MEMBER = "ROLE_MEMBER"  # caller from the member hosted domain
    ADMIN = "ROLE_ADMIN"    # allow-listed or flagged admin
