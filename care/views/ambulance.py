"""
Ambulance dispatch requests, billed per kilometre.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.bookings import AmbulanceBookingSerializer
from ..services import bookings
from ..tokens import Identity


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def book_ambulance(request):
    identity: Identity = request.user  # type: ignore[assignment]
    s = AmbulanceBookingSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    booking = bookings.book_ambulance(
        identity,
        distance_km=s.validated_data['distance_km'],
        pickup_address=s.validated_data['pickup_address'],
    )
    return Response(AmbulanceBookingSerializer(booking).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_ambulance_bookings(request):
    identity: Identity = request.user  # type: ignore[assignment]
    return Response(AmbulanceBookingSerializer(bookings.list_ambulance_bookings(identity), many=True).data)
