"""
Booking records.

Each resource follows the same pattern: the caller passes validated
fields, the service prices the booking from the configured rate, stores
the row under the caller's id and returns it.  Listings only ever return
the caller's own rows.
"""
from __future__ import annotations

import logging

from django.db.models import QuerySet

from care.models import Address, AmbulanceBooking, GuidanceRequest, NurseBooking, Subscription, SubscriptionType
from care.pricing import ambulance_rate_per_km, compute_total, nurse_rate_per_hour, subscription_rate_per_day
from care.tokens import Identity

logger = logging.getLogger(__name__)


def add_address(identity: Identity, *, line1: str, city: str, label=None, state=None, pincode=None) -> Address:
    return Address.objects.create(
        user_id=identity.id,
        label=label or None,
        line1=line1,
        city=city,
        state=state or None,
        pincode=pincode or None,
    )


def list_addresses(identity: Identity) -> QuerySet[Address]:
    # insertion order
    return Address.objects.filter(user_id=identity.id).order_by('id')


def book_nurse(identity: Identity, *, area: str, hours: int) -> NurseBooking:
    rate = nurse_rate_per_hour()
    booking = NurseBooking.objects.create(
        user_id=identity.id,
        area=area,
        hours=hours,
        rate_per_hour=rate,
        total=compute_total(rate, hours),
    )
    logger.info('nurse booking id=%s user=%s total=%s', booking.id, identity.id, booking.total)
    return booking


def list_nurse_bookings(identity: Identity) -> QuerySet[NurseBooking]:
    return NurseBooking.objects.filter(user_id=identity.id).order_by('-id')


def subscribe(identity: Identity, *, plan: SubscriptionType, days: int) -> Subscription:
    rate = subscription_rate_per_day()
    sub = Subscription.objects.create(
        user_id=identity.id,
        type=plan,
        days=days,
        rate_per_day=rate,
        total=compute_total(rate, days),
    )
    logger.info('subscription id=%s user=%s type=%s total=%s', sub.id, identity.id, sub.type, sub.total)
    return sub


def list_subscriptions(identity: Identity) -> QuerySet[Subscription]:
    return Subscription.objects.filter(user_id=identity.id).order_by('-id')


def request_guidance(identity: Identity, *, note: str | None = None) -> GuidanceRequest:
    req = GuidanceRequest.objects.create(user_id=identity.id, note=note or None)
    logger.info('guidance request id=%s user=%s', req.id, identity.id)
    return req


def list_guidance_requests(identity: Identity) -> QuerySet[GuidanceRequest]:
    return GuidanceRequest.objects.filter(user_id=identity.id).order_by('-id')


def book_ambulance(identity: Identity, *, distance_km: float, pickup_address: str) -> AmbulanceBooking:
    rate = ambulance_rate_per_km()
    booking = AmbulanceBooking.objects.create(
        user_id=identity.id,
        distance_km=distance_km,
        pickup_address=pickup_address,
        rate_per_km=rate,
        total=compute_total(rate, distance_km),
    )
    logger.info('ambulance booking id=%s user=%s total=%s', booking.id, identity.id, booking.total)
    return booking


def list_ambulance_bookings(identity: Identity) -> QuerySet[AmbulanceBooking]:
    return AmbulanceBooking.objects.filter(user_id=identity.id).order_by('-id')
