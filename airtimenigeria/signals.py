"""
Signals for delivery report events.
"""
from django.dispatch import Signal

# Signal sent when the API posts a delivery report to the callback view
# Provides arguments:
# - payload: The parsed CallbackPayload
delivery_report_received = Signal()
