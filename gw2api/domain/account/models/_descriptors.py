"""Descriptor helper for the authenticated /v2/account endpoints."""

from ....core.models import Authentication, ResourceDescriptor


def account_endpoint(path: str = "") -> ResourceDescriptor:
    uri = "/v2/account" + (f"/{path}" if path else "")
    return ResourceDescriptor(uri, authentication=Authentication.REQUIRED)
