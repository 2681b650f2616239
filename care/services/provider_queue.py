"""
Provider view of the guidance queue.
"""
from __future__ import annotations

import logging

from django.db.models import QuerySet

from care.models import GuidanceRequest, GuidanceStatus

logger = logging.getLogger(__name__)


def list_pending() -> QuerySet[GuidanceRequest]:
    """Pending requests from every user, newest first."""
    return GuidanceRequest.objects.filter(status=GuidanceStatus.PENDING).order_by('-id')


def resolve(request_id: int) -> int:
    """Mark a request resolved and return how many rows changed.

    Unknown ids and already resolved requests are not errors; callers get
    the same acknowledgement either way.
    """
    changed = GuidanceRequest.objects.filter(pk=request_id).update(status=GuidanceStatus.RESOLVED)
    if changed:
        logger.info('guidance request id=%s resolved', request_id)
    else:
        logger.info('resolve on unknown guidance request id=%s ignored', request_id)
    return changed
