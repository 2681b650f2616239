from __future__ import annotations

from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from ..serializers.bookings import AddressSerializer
from ..services import bookings
from ..tokens import Identity


@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def addresses(request):
    identity: Identity = request.user  # type: ignore[assignment]
    if request.method == 'GET':
        return Response(AddressSerializer(bookings.list_addresses(identity), many=True).data)
    # POST
    s = AddressSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    address = bookings.add_address(identity, **s.validated_data)
    return Response(AddressSerializer(address).data)
