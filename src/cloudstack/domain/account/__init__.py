"""Account bounded context - accounts, users, domains and credentials."""

from .models import (
    Account,
    ApiKeyPair,
    Domain,
    EncryptedPasswordAndPrivateKey,
    LoginResponse,
    ResourceLimit,
    SshKeyPair,
    User,
)
from .value_objects import AccountState, AccountType, ResourceType, UserState

__all__ = [
    "Account",
    "AccountState",
    "AccountType",
    "User",
    "UserState",
    "Domain",
    "ResourceLimit",
    "ResourceType",
    "ApiKeyPair",
    "LoginResponse",
    "EncryptedPasswordAndPrivateKey",
    "SshKeyPair",
]
