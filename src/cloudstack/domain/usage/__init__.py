"""Usage bounded context - usage records, events, alerts and configuration."""

from .models import Alert, ConfigurationEntry, Event, UsageRecord
from .value_objects import UsageType

__all__ = ["UsageRecord", "UsageType", "Event", "Alert", "ConfigurationEntry"]
