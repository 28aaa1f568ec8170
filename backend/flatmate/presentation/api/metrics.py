"""
Prometheus Metrics Endpoint.

Exposes everything recorded in flatmate.observability.metrics in the
Prometheus text format. Test with: curl http://localhost:5001/metrics
"""

from fastapi import APIRouter, Response

from flatmate.observability.metrics import get_metrics_content

router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
