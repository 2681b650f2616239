"""
Registration and login endpoints.

Both are public: they run without authentication classes, so a stale
``Authorization`` header sent by a client does not block logging in
again.
"""
from __future__ import annotations

from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from ..exceptions import AuthError
from ..serializers.auth import LoginSerializer, RegisterSerializer, UserSerializer
from ..services import accounts


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def register_view(request):
    """Create a ``user`` or ``provider`` account and return it with a token."""
    s = RegisterSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    vd = s.validated_data
    user, token = accounts.register(username=vd['username'], password=vd['password'], role=vd['role'])
    return Response({'user': UserSerializer(user).data, 'token': token})


@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """Username/password login.  Any failure is a plain ``Invalid credentials``."""
    s = LoginSerializer(data=request.data)
    if not s.is_valid():
        raise AuthError()
    vd = s.validated_data
    user, token = accounts.login(request, username=vd['username'], password=vd['password'])
    return Response({'user': UserSerializer(user).data, 'token': token})
