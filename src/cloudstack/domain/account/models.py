"""Account context records: accounts, users, domains, limits and credentials."""
from typing import Any, ClassVar, FrozenSet, Optional, Tuple

from pydantic import Field

from cloudstack.domain.account.value_objects import (
    AccountState,
    AccountType,
    ResourceType,
    UserState,
)
from cloudstack.domain.base.codecs import UnlimitedCount, WireDate, natural_key
from cloudstack.domain.base.record import CloudStackRecord


class User(CloudStackRecord):
    """A login belonging to an account."""

    State: ClassVar[type] = UserState
    wire_collection = "user"

    id: str
    name: Optional[str] = Field(default=None, alias="username")
    first_name: Optional[str] = Field(default=None, alias="firstname")
    last_name: Optional[str] = Field(default=None, alias="lastname")
    email: Optional[str] = None
    created: WireDate = None
    state: Optional[UserState] = None
    account: Optional[str] = None
    account_type: Optional[AccountType] = Field(default=None, alias="accounttype")
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    timezone: Optional[str] = None
    api_key: Optional[str] = Field(default=None, alias="apikey")
    secret_key: Optional[str] = Field(default=None, alias="secretkey")


class Account(CloudStackRecord):
    """
    An account and its resource usage.

    The ``*_available`` and ``*_limit`` counters are None when the server
    reports them as ``Unlimited``; the ``*_total`` style counters default to
    zero when absent.

    Equality is deliberately narrowed to ``id``, ``domain_id`` and ``name``
    so that two snapshots of the same account with different usage counters
    compare equal.
    """

    State: ClassVar[type] = AccountState
    Type: ClassVar[type] = AccountType
    equality_fields = ("id", "domain_id", "name")
    wire_collection = "account"

    id: str
    type: Optional[AccountType] = Field(default=None, alias="accounttype")
    network_domain: Optional[str] = Field(default=None, alias="networkdomain")
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    ips_available: UnlimitedCount = Field(default=None, alias="ipavailable")
    ip_limit: UnlimitedCount = Field(default=None, alias="iplimit")
    ips: int = Field(default=0, alias="iptotal")
    cleanup_required: bool = Field(default=False, alias="iscleanuprequired")
    name: Optional[str] = None
    received_bytes: int = Field(default=0, alias="receivedbytes")
    sent_bytes: int = Field(default=0, alias="sentbytes")
    snapshots_available: UnlimitedCount = Field(default=None, alias="snapshotavailable")
    snapshot_limit: UnlimitedCount = Field(default=None, alias="snapshotlimit")
    snapshots: int = Field(default=0, alias="snapshottotal")
    state: Optional[AccountState] = None
    templates_available: UnlimitedCount = Field(default=None, alias="templateavailable")
    template_limit: UnlimitedCount = Field(default=None, alias="templatelimit")
    templates: int = Field(default=0, alias="templatetotal")
    vms_available: UnlimitedCount = Field(default=None, alias="vmavailable")
    vm_limit: UnlimitedCount = Field(default=None, alias="vmlimit")
    vms_running: int = Field(default=0, alias="vmrunning")
    vms_stopped: int = Field(default=0, alias="vmstopped")
    vms: int = Field(default=0, alias="vmtotal")
    volumes_available: UnlimitedCount = Field(default=None, alias="volumeavailable")
    volume_limit: UnlimitedCount = Field(default=None, alias="volumelimit")
    volumes: int = Field(default=0, alias="volumetotal")
    users: FrozenSet[User] = Field(default_factory=frozenset, alias="user")

    def find_user(self, name: str) -> Optional[User]:
        """Return the user with the given login name, if the account has one."""
        for user in self.users:
            if user.name == name:
                return user
        return None


class Domain(CloudStackRecord):
    wire_collection = "domain"

    id: str
    name: Optional[str] = None
    level: int = 0
    parent_domain_id: Optional[str] = Field(default=None, alias="parentdomainid")
    parent_domain_name: Optional[str] = Field(default=None, alias="parentdomainname")
    has_child: bool = Field(default=False, alias="haschild")


class ResourceLimit(CloudStackRecord):
    """Maximum number of a resource kind an account may own; -1 means no limit."""

    ResourceType: ClassVar[type] = ResourceType
    identity_field = None
    wire_collection = "resourcelimit"

    account: Optional[str] = None
    domain: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    max: int = -1
    resource_type: Optional[ResourceType] = Field(default=None, alias="resourcetype")

    def sort_key(self) -> Tuple[Any, ...]:
        code = self.resource_type.code if self.resource_type is not None else -1
        return (natural_key(self.account), code)


class ApiKeyPair(CloudStackRecord):
    identity_field = "api_key"
    wire_collection = "userkeys"

    api_key: Optional[str] = Field(default=None, alias="apikey")
    secret_key: Optional[str] = Field(default=None, alias="secretkey")

    def __repr__(self) -> str:
        return f"ApiKeyPair(api_key={self.api_key!r}, secret_key=<redacted>)"

    __str__ = __repr__


class LoginResponse(CloudStackRecord):
    """Session established by the login command."""

    identity_field = "user_id"

    username: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userid")
    password: Optional[str] = None
    domain_id: Optional[str] = Field(default=None, alias="domainid")
    timeout: int = 0
    registered: bool = False
    account_name: Optional[str] = Field(default=None, alias="account")
    first_name: Optional[str] = Field(default=None, alias="firstname")
    last_name: Optional[str] = Field(default=None, alias="lastname")
    account_type: Optional[AccountType] = Field(default=None, alias="type")
    timezone: Optional[str] = None
    timezone_offset: Optional[str] = Field(default=None, alias="timezoneoffset")
    session_key: Optional[str] = Field(default=None, alias="sessionkey")
    jsession_id: Optional[str] = Field(default=None, alias="jsessionid")


class EncryptedPasswordAndPrivateKey(CloudStackRecord):
    """Windows VM password encrypted with the key pair used at deploy time."""

    identity_field = "encrypted_password"

    encrypted_password: Optional[str] = Field(default=None, alias="encryptedpassword")
    private_key: Optional[str] = Field(default=None, alias="privatekey")

    def __repr__(self) -> str:
        return (f"EncryptedPasswordAndPrivateKey(encrypted_password="
                f"{self.encrypted_password!r}, private_key=<redacted>)")

    __str__ = __repr__


class SshKeyPair(CloudStackRecord):
    identity_field = "name"
    wire_collection = "keypair"

    name: str
    fingerprint: Optional[str] = None
    private_key: Optional[str] = Field(default=None, alias="privatekey")


__all__ = [
    "Account",
    "User",
    "Domain",
    "ResourceLimit",
    "ApiKeyPair",
    "LoginResponse",
    "EncryptedPasswordAndPrivateKey",
    "SshKeyPair",
]
