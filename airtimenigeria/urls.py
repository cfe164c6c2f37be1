"""
URL configuration for airtimenigeria app.
"""

from django.urls import path
from . import views

urlpatterns = [
    path('callback/delivery/', views.delivery_callback, name='delivery_callback'),
]
