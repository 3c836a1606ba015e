"""
Campus Data Backend — Identity & Authorization Package
=======================================================

    identity.py       who is calling (IdentityProvider → Principal)
    roles.py          granted authorities
    authorization.py  explicit capability checks used by handlers
    dependencies.py   FastAPI dependency yielding the CurrentUser
"""
