"""
Guidance requests as seen by the user who filed them.

Users can only create and list their own requests; status changes are
the provider queue's job (see ``care.views.provider``).
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.bookings import GuidanceRequestSerializer
from ..services import bookings
from ..tokens import Identity


@api_view(['POST'])
@permission_classes([IsAuthenticated])
def create_guidance_request(request):
    identity: Identity = request.user  # type: ignore[assignment]
    s = GuidanceRequestSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    req = bookings.request_guidance(identity, note=s.validated_data.get('note'))
    return Response(GuidanceRequestSerializer(req).data)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def my_guidance_requests(request):
    identity: Identity = request.user  # type: ignore[assignment]
    return Response(GuidanceRequestSerializer(bookings.list_guidance_requests(identity), many=True).data)
