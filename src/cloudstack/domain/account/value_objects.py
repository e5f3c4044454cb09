"""Account context enumerations."""
from enum import auto

from cloudstack.domain.base.wire_enum import CodeEnum, LowerCaseEnum, LowerHyphenEnum


class AccountState(LowerHyphenEnum):
    """Account state as reported by listAccounts."""
    ENABLED = auto()
    DISABLED = auto()
    LOCKED = auto()
    UNRECOGNIZED = auto()


class AccountType(CodeEnum):
    """Account role; integer coded on the wire."""
    USER = 0
    ADMIN = 1
    DOMAIN_ADMIN = 2
    UNRECOGNIZED = 2147483647


class UserState(LowerCaseEnum):
    ENABLED = auto()
    DISABLED = auto()
    LOCKED = auto()
    UNRECOGNIZED = auto()


class ResourceType(CodeEnum):
    """Resource kinds a limit can be placed on."""
    INSTANCE = 0
    IP = 1
    VOLUME = 2
    SNAPSHOT = 3
    TEMPLATE = 4
    PROJECT = 5
    NETWORK = 6
    VPC = 7
    CPU = 8
    MEMORY = 9
    PRIMARY_STORAGE = 10
    SECONDARY_STORAGE = 11
    UNRECOGNIZED = 2147483647


__all__ = ["AccountState", "AccountType", "UserState", "ResourceType"]
