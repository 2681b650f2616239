"""
Nurse hire, billed per hour.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.bookings import NurseBookingSerializer
from ..services import bookings
from ..tokens import Identity


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def book_nurse(request):
    identity: Identity = request.user  # type: ignore[assignment]
    s = NurseBookingSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    booking = bookings.book_nurse(identity, area=s.validated_data['area'], hours=s.validated_data['hours'])
    return Response(NurseBookingSerializer(booking).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_nurse_bookings(request):
    """The caller's nurse bookings, newest first."""
    identity: Identity = request.user  # type: ignore[assignment]
    return Response(NurseBookingSerializer(bookings.list_nurse_bookings(identity), many=True).data)
