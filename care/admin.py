"""
Django admin registrations.

Exposes accounts and every booking table at ``/admin/`` so staff can
inspect what clients created.  Rates and totals are read-only here: they
are set once when a booking is made.
"""

from django.contrib import admin

from .models import (
    User,
    Address,
    NurseBooking,
    Subscription,
    GuidanceRequest,
    AmbulanceBooking,
)


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('username', 'role', 'is_staff', 'is_superuser', 'created_at')
    list_filter = ('role',)
    search_fields = ('username',)
    exclude = ('password',)


@admin.register(Address)
class AddressAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'label', 'line1', 'city', 'pincode')
    search_fields = ('user__username', 'line1', 'city', 'pincode')


@admin.register(NurseBooking)
class NurseBookingAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'area', 'hours', 'rate_per_hour', 'total', 'created_at')
    search_fields = ('user__username', 'area')
    readonly_fields = ('rate_per_hour', 'total')


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'type', 'days', 'rate_per_day', 'total', 'created_at')
    list_filter = ('type',)
    readonly_fields = ('rate_per_day', 'total')


@admin.register(GuidanceRequest)
class GuidanceRequestAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('user__username', 'note')


@admin.register(AmbulanceBooking)
class AmbulanceBookingAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'distance_km', 'pickup_address', 'rate_per_km', 'total', 'created_at')
    search_fields = ('user__username', 'pickup_address')
    readonly_fields = ('rate_per_km', 'total')
