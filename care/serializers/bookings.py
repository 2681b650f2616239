"""
Input validation and output shape for the booking resources.

Only the fields a client may choose are writable.  ``rate_*`` and
``total`` are always filled in by the booking services, so a client
sending its own total is silently ignored.
"""
from __future__ import annotations

import html
import math

import bleach
from rest_framework import serializers

from ..models import Address, AmbulanceBooking, GuidanceRequest, NurseBooking, Subscription, SubscriptionType
from ..pricing import ambulance_rate_per_km, nurse_rate_per_hour, subscription_rate_per_day, total_fits


class CleanCharField(serializers.CharField):
    """CharField that strips markup; a value empty after cleaning is blank."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        # bleach escapes &, < and > in the text it keeps; store them as typed
        value = html.unescape(bleach.clean(value, tags=set(), strip=True)).strip()
        if not value and not self.allow_blank:
            self.fail('blank')
        return value


class DistanceField(serializers.FloatField):
    """FloatField that refuses JSON booleans instead of reading them as 0 or 1."""

    def to_internal_value(self, data):
        if isinstance(data, bool):
            self.fail('invalid')
        return super().to_internal_value(data)


def _check_fits(rate, quantity, field):
    if not total_fits(rate, quantity):
        raise serializers.ValidationError(f'{field} is too large')
    return quantity


class OwnedRowSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True)


class AddressSerializer(OwnedRowSerializer):
    label = CleanCharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    line1 = CleanCharField(max_length=255)
    city = CleanCharField(max_length=100)
    state = CleanCharField(max_length=100, required=False, allow_blank=True, allow_null=True)
    pincode = CleanCharField(max_length=20, required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = Address
        fields = ['id', 'user_id', 'label', 'line1', 'city', 'state', 'pincode']
        read_only_fields = ['id']


class NurseBookingSerializer(OwnedRowSerializer):
    area = CleanCharField(max_length=255)
    hours = serializers.IntegerField(min_value=1)

    class Meta:
        model = NurseBooking
        fields = ['id', 'user_id', 'area', 'hours', 'rate_per_hour', 'total', 'created_at']
        read_only_fields = ['id', 'rate_per_hour', 'total', 'created_at']

    def validate_hours(self, v):
        return _check_fits(nurse_rate_per_hour(), v, 'hours')


class SubscriptionSerializer(OwnedRowSerializer):
    type = serializers.ChoiceField(choices=SubscriptionType.choices)
    days = serializers.IntegerField(min_value=1)

    class Meta:
        model = Subscription
        fields = ['id', 'user_id', 'type', 'days', 'rate_per_day', 'total', 'created_at']
        read_only_fields = ['id', 'rate_per_day', 'total', 'created_at']

    def validate_days(self, v):
        return _check_fits(subscription_rate_per_day(), v, 'days')


class GuidanceRequestSerializer(OwnedRowSerializer):
    note = CleanCharField(required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = GuidanceRequest
        fields = ['id', 'user_id', 'note', 'status', 'created_at']
        read_only_fields = ['id', 'status', 'created_at']


class AmbulanceBookingSerializer(OwnedRowSerializer):
    distance_km = DistanceField()
    pickup_address = CleanCharField(max_length=255)

    class Meta:
        model = AmbulanceBooking
        fields = ['id', 'user_id', 'distance_km', 'pickup_address', 'rate_per_km', 'total', 'created_at']
        read_only_fields = ['id', 'rate_per_km', 'total', 'created_at']

    def validate_distance_km(self, v):
        if not math.isfinite(v) or v <= 0:
            raise serializers.ValidationError('distance_km must be a positive number')
        return _check_fits(ambulance_rate_per_km(), v, 'distance_km')
