"""Strongly typed identifiers for persisted records."""

from typing import NewType
from uuid import UUID

CodeVerifierId = NewType("CodeVerifierId", UUID)
AccessTokenId = NewType("AccessTokenId", UUID)
