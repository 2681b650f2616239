"""
Day and night care plans, billed per day.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.bookings import SubscriptionSerializer
from ..services import bookings
from ..tokens import Identity


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_subscription(request):
    identity: Identity = request.user  # type: ignore[assignment]
    s = SubscriptionSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    sub = bookings.subscribe(identity, plan=s.validated_data['type'], days=s.validated_data['days'])
    return Response(SubscriptionSerializer(sub).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_subscriptions(request):
    identity: Identity = request.user  # type: ignore[assignment]
    return Response(SubscriptionSerializer(bookings.list_subscriptions(identity), many=True).data)
