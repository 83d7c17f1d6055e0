"""
Registry of resource kinds served by the API.

A ``ResourceKind`` bundles everything that differs between resource
types: the URL segment, the backing table, a human readable label used
in messages, the three pydantic models and any fields that must be
unique across stored records.  Store, service and router logic is
shared; adding a kind means adding its schemas, a table migration in
``core.db`` and an entry in ``RESOURCE_KINDS``.
"""

from dataclasses import dataclass
from typing import Tuple, Type

from pydantic import BaseModel

from .schemas.donation import Donation, DonationCreate, DonationUpdate
from .schemas.horoscope import Horoscope, HoroscopeCreate, HoroscopeUpdate
from .schemas.product import Product, ProductCreate, ProductUpdate
from .schemas.record import RecordBase
from .schemas.skill_record import SkillRecord, SkillRecordCreate, SkillRecordUpdate
from .schemas.staking import StakingEntry, StakingEntryCreate, StakingEntryUpdate


@dataclass(frozen=True)
class ResourceKind:
    """Static description of one resource type."""

    name: str
    table: str
    label: str
    record_model: Type[RecordBase]
    create_model: Type[BaseModel]
    update_model: Type[BaseModel]
    unique_fields: Tuple[str, ...] = ()
    plural: str = ""

    @property
    def title(self) -> str:
        """Label with a leading capital, for the start of messages."""
        return self.label[:1].upper() + self.label[1:]

    def __post_init__(self) -> None:
        if not self.plural:
            object.__setattr__(self, "plural", self.label + "s")


STAKING = ResourceKind(
    name="staking",
    table="staking_entries",
    label="staking entry",
    plural="staking entries",
    record_model=StakingEntry,
    create_model=StakingEntryCreate,
    update_model=StakingEntryUpdate,
)

SKILL_RECORDS = ResourceKind(
    name="skill-records",
    table="skill_records",
    label="skill record",
    record_model=SkillRecord,
    create_model=SkillRecordCreate,
    update_model=SkillRecordUpdate,
)

DONATIONS = ResourceKind(
    name="donations",
    table="donations",
    label="donation",
    record_model=Donation,
    create_model=DonationCreate,
    update_model=DonationUpdate,
)

# One horoscope per zodiac sign.
HOROSCOPES = ResourceKind(
    name="horoscopes",
    table="horoscopes",
    label="horoscope",
    record_model=Horoscope,
    create_model=HoroscopeCreate,
    update_model=HoroscopeUpdate,
    unique_fields=("sign",),
)

PRODUCTS = ResourceKind(
    name="products",
    table="products",
    label="product",
    record_model=Product,
    create_model=ProductCreate,
    update_model=ProductUpdate,
)

RESOURCE_KINDS: Tuple[ResourceKind, ...] = (STAKING, SKILL_RECORDS, DONATIONS, HOROSCOPES, PRODUCTS)
