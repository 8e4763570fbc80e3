"""Tests for sysfetch data models."""

import dataclasses

import pytest

from sysfetch.models import FALLBACK, HostSnapshot


def test_host_snapshot_creation(snapshot):
    """Test HostSnapshot dataclass creation."""
    assert snapshot.user == "alice"
    assert snapshot.hostname == "devbox"
    assert snapshot.uptime == "1h 1m"
    assert snapshot.memory == "7.6GB / 15.3GB"


def test_host_snapshot_is_frozen(snapshot):
    """Test that HostSnapshot is immutable (frozen)."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.kernel = "other"


def test_host_snapshot_uses_slots(snapshot):
    """Test that HostSnapshot uses __slots__."""
    # Slots-based dataclasses don't have __dict__
    assert not hasattr(snapshot, "__dict__")


def test_host_snapshot_equality(snapshot):
    """Test snapshots with the same facts compare equal."""
    assert snapshot == dataclasses.replace(snapshot)
    assert snapshot != dataclasses.replace(snapshot, uptime="2h 0m")


def test_host_snapshot_fields():
    assert [field.name for field in dataclasses.fields(HostSnapshot)] == [
        "user",
        "hostname",
        "os",
        "kernel",
        "uptime",
        "shell",
        "cpu",
        "cpu_cores",
        "cpu_speed",
        "memory",
    ]


def test_fallback_value():
    assert FALLBACK == "unknown"
