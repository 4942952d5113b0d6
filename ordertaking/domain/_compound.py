"""Compound types — records built from constrained values."""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Option

from ordertaking.domain._simple import (
    EmailAddress,
    String50,
    UsStateCode,
    VipStatus,
    ZipCode,
)


@dataclass(frozen=True, slots=True)
class PersonalName:
    first_name: String50
    last_name: String50


@dataclass(frozen=True, slots=True)
class CustomerInfo:
    name: PersonalName
    email_address: EmailAddress
    vip_status: VipStatus


@dataclass(frozen=True, slots=True)
class Address:
    """A postal address; lines 2–4 are optional."""

    address_line1: String50
    address_line2: Option[String50]
    address_line3: Option[String50]
    address_line4: Option[String50]
    city: String50
    zip_code: ZipCode
    state: UsStateCode
    country: String50


__all__ = ("PersonalName", "CustomerInfo", "Address")
