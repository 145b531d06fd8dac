from workspace_auth.sdk.gateway import AuthenticationGateway
from workspace_auth.sdk.lifecycle import AccountLifecycle
from workspace_auth.sdk.client import AuthClient

__all__ = [
    "AuthenticationGateway",
    "AccountLifecycle",
    "AuthClient",
]
