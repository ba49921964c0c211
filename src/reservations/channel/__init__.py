"""Channel adapter registry — pluggable notification transports.

Provides singleton access to the email and SMS adapters. Uses fake
adapters by default; ``EMAIL_ADAPTER`` / ``SMS_ADAPTER`` select ``log``
adapters that write each message to the structured log instead.
"""

import os

from reservations.reservation.reservation import NotificationChannel

_channel_instances: dict[str, object] = {}


def _build_adapter(channel_type: str):
    if channel_type == NotificationChannel.EMAIL.value:
        adapter = os.environ.get("EMAIL_ADAPTER", "fake")
        if adapter == "fake":
            from reservations.channel.fake_email import FakeEmailAdapter

            return FakeEmailAdapter()
        if adapter == "log":
            from reservations.channel.log_adapters import LogEmailAdapter

            return LogEmailAdapter()
        raise ValueError(f"Unknown email adapter: {adapter}")

    if channel_type == NotificationChannel.SMS.value:
        adapter = os.environ.get("SMS_ADAPTER", "fake")
        if adapter == "fake":
            from reservations.channel.fake_sms import FakeSMSAdapter

            return FakeSMSAdapter()
        if adapter == "log":
            from reservations.channel.log_adapters import LogSMSAdapter

            return LogSMSAdapter()
        raise ValueError(f"Unknown SMS adapter: {adapter}")

    raise ValueError(f"Unknown channel type: {channel_type}")


def get_channel(channel_type: str):
    """Return the configured adapter for one transport (singleton per transport).

    Args:
        channel_type: ``NotificationChannel.EMAIL.value`` or ``NotificationChannel.SMS.value``.
            ``BOTH`` is a preference, not a transport, and is rejected.
    """
    if channel_type not in _channel_instances:
        _channel_instances[channel_type] = _build_adapter(channel_type)

    return _channel_instances[channel_type]


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    _channel_instances.clear()
