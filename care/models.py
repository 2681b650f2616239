"""
Database models for the home-care booking backend.

Users register either as a ``user`` (books services) or a ``provider``
(works the guidance queue).  Every booking-style row is owned by exactly
one user and disappears with it.  Prices are copied onto each row at
creation time so later rate changes never rewrite history.
"""
from __future__ import annotations

from django.contrib.auth.models import AbstractUser
from django.db import models


class Role(models.TextChoices):
    USER = 'user', 'User'
    PROVIDER = 'provider', 'Provider'


class SubscriptionType(models.TextChoices):
    DAY = 'day', 'Day'
    NIGHT = 'night', 'Night'


class GuidanceStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    RESOLVED = 'resolved', 'Resolved'


class User(AbstractUser):
    """Account with a fixed role.

    The password column holds the hasher-encoded digest only.  There is
    no API to edit an account after registration.
    """
    role = models.CharField(max_length=10, choices=Role.choices, default=Role.USER)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(role__in=Role.values), name='users_role_valid'
            ),
        ]

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class Address(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='addresses')
    label = models.CharField(max_length=100, null=True, blank=True)
    line1 = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    state = models.CharField(max_length=100, null=True, blank=True)
    pincode = models.CharField(max_length=20, null=True, blank=True)

    class Meta:
        db_table = 'addresses'

    def __str__(self) -> str:
        return f"{self.line1}, {self.city}"


class NurseBooking(models.Model):
    """Hire of a nurse for a number of hours in an area."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='nurse_bookings')
    area = models.CharField(max_length=255)
    hours = models.PositiveIntegerField()
    rate_per_hour = models.PositiveIntegerField()
    total = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'nurse_bookings'

    def __str__(self) -> str:
        return f"nurse #{self.id} {self.area} x{self.hours}h"


class Subscription(models.Model):
    """Day or night care plan billed per day."""
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='subscriptions')
    type = models.CharField(max_length=10, choices=SubscriptionType.choices)
    days = models.PositiveIntegerField()
    rate_per_day = models.PositiveIntegerField()
    total = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'subscriptions'
        constraints = [
            models.CheckConstraint(
                condition=models.Q(type__in=SubscriptionType.values), name='subscriptions_type_valid'
            ),
        ]

    def __str__(self) -> str:
        return f"{self.type} plan #{self.id} x{self.days}d"


class GuidanceRequest(models.Model):
    """Free-form request for advice.

    Status only ever moves from pending to resolved, by a provider.
    """
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='guidance_requests')
    note = models.TextField(null=True, blank=True)
    # Indexed: the provider queue filters on status
    status = models.CharField(
        max_length=10, choices=GuidanceStatus.choices, default=GuidanceStatus.PENDING, db_index=True
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'guidance_requests'

    def __str__(self) -> str:
        return f"guidance #{self.id} ({self.status})"


class AmbulanceBooking(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='ambulance_bookings')
    distance_km = models.FloatField()
    pickup_address = models.CharField(max_length=255)
    rate_per_km = models.PositiveIntegerField()
    total = models.PositiveIntegerField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'ambulance_bookings'

    def __str__(self) -> str:
        return f"ambulance #{self.id} {self.distance_km}km"
