"""Strongly typed identifiers for Threadline domain entities."""

from typing import NewType
from uuid import UUID

# Internal primary keys
UserId = NewType("UserId", UUID)
ThreadId = NewType("ThreadId", UUID)

# Identifier issued by the external auth provider; profiles are keyed on it
ExternalUserId = NewType("ExternalUserId", str)
