"""
Pydantic schemas for donations.

A donation carries an amount, the donor's name and a short message.
All three are required when the donation is created.
"""

from typing import Optional

from pydantic import Field

from .record import CamelModel, NonEmptyStr, PositiveFloat, RecordBase


class DonationBase(CamelModel):
    amount: PositiveFloat = Field(..., examples=[10.0])
    donor_name: NonEmptyStr = Field(..., examples=["Alice"])
    message: NonEmptyStr = Field(..., examples=["Keep up the good work"])


class DonationCreate(DonationBase):
    """Schema for creating a donation."""


class DonationUpdate(CamelModel):
    """Schema for updating a donation.

    All fields are optional; only provided fields will be updated.
    """

    amount: Optional[PositiveFloat] = None
    donor_name: Optional[NonEmptyStr] = None
    message: Optional[NonEmptyStr] = None


class Donation(DonationBase, RecordBase):
    """Stored donation."""
