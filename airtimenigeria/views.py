"""
Views for AirtimeNigeria delivery report callbacks.
"""

import json
import logging
from django.http import JsonResponse, HttpResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .config import config
from .models import CallbackPayload
from .signals import delivery_report_received

logger = logging.getLogger(__name__)


def _get_client_ip(request):
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        ip = x_forwarded_for.split(',')[0].strip()
    else:
        ip = request.META.get('REMOTE_ADDR')
    return ip


@csrf_exempt
@require_POST
def delivery_callback(request):
    """
    Receive a delivery report for an airtime or data purchase.
    """
    allowed_ips = config.callback_allowed_ips
    client_ip = _get_client_ip(request)
    if allowed_ips and client_ip not in allowed_ips:
        logger.warning(f"Unauthorized callback IP: {client_ip}")
        return HttpResponse(status=403)

    try:
        data = json.loads(request.body)
    except ValueError as e:
        logger.warning(f"Invalid delivery report body: {str(e)}")
        return JsonResponse({'error': 'Invalid JSON'}, status=400)

    logger.info(f"Received delivery report: {data}")

    if not isinstance(data, dict) or not data.get('reference'):
        return JsonResponse({'error': 'Missing reference'}, status=400)

    payload = CallbackPayload.from_dict(data)
    delivery_report_received.send(sender=CallbackPayload, payload=payload)
    return JsonResponse({'status': 'received'})
