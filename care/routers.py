"""
URL mappings for the booking API.

Paths have no trailing slash, matching what the browser front end calls.
"""
from django.urls import path

from .views import addresses, ambulance, guidance, health, nurse, provider, subscriptions
from .views.auth import login_view, register_view


urlpatterns = [
    path('healthz', health.healthz),
    # Authentication
    path('auth/register', register_view, name='register_view'),
    path('auth/login', login_view, name='login_view'),
    # Addresses
    path('addresses', addresses.addresses, name='addresses'),
    # Nurse hire
    path('nurse/book', nurse.book_nurse, name='book_nurse'),
    path('nurse/my', nurse.my_nurse_bookings, name='my_nurse_bookings'),
    # Subscriptions
    path('subscriptions', subscriptions.create_subscription, name='create_subscription'),
    path('subscriptions/my', subscriptions.my_subscriptions, name='my_subscriptions'),
    # Guidance
    path('guidance', guidance.create_guidance_request, name='create_guidance_request'),
    path('guidance/my', guidance.my_guidance_requests, name='my_guidance_requests'),
    # Ambulance
    path('ambulance/book', ambulance.book_ambulance, name='book_ambulance'),
    path('ambulance/my', ambulance.my_ambulance_bookings, name='my_ambulance_bookings'),
    # Provider queue
    path('provider/requests', provider.pending_requests, name='pending_requests'),
    path('provider/requests/<int:pk>/resolve', provider.resolve_request, name='resolve_request'),
]
