"""
Provider queue endpoints.

Any provider may see every pending guidance request and resolve any of
them; there is no assignment or ownership.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..permissions import IsProviderRole
from ..serializers.bookings import GuidanceRequestSerializer
from ..services import provider_queue


@api_view(['GET'])
@permission_classes([IsAuthenticated, IsProviderRole])
def pending_requests(request):
    return Response(GuidanceRequestSerializer(provider_queue.list_pending(), many=True).data)


@api_view(['POST'])
@permission_classes([IsAuthenticated, IsProviderRole])
def resolve_request(request, pk: int):
    """Resolve request ``pk``.  Unknown or already resolved ids still get ``ok``."""
    provider_queue.resolve(pk)
    return Response({'ok': True})
