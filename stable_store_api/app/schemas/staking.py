"""
Pydantic schemas for staking entries.

A staking entry records an amount of some currency staked by a wallet
address.  ``StakingEntryCreate`` is the POST body, ``StakingEntryUpdate``
the partial PUT body and ``StakingEntry`` the stored record returned
by every endpoint.
"""

from typing import Optional

from pydantic import Field

from .record import CamelModel, NonEmptyStr, PositiveFloat, RecordBase


class StakingEntryBase(CamelModel):
    staker_address: NonEmptyStr = Field(..., examples=["0x5e1f0a7c3b"])
    amount: PositiveFloat = Field(..., examples=[250.0])
    currency: NonEmptyStr = Field(..., examples=["ICP"])


class StakingEntryCreate(StakingEntryBase):
    """Schema for creating a staking entry."""


class StakingEntryUpdate(CamelModel):
    """Schema for updating a staking entry.

    All fields are optional; only provided fields will be updated.
    """

    staker_address: Optional[NonEmptyStr] = None
    amount: Optional[PositiveFloat] = None
    currency: Optional[NonEmptyStr] = None


class StakingEntry(StakingEntryBase, RecordBase):
    """Stored staking entry."""
