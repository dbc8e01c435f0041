from .base import OtpDeliveryError, OtpProvider
from .mock_provider import MockOtpProvider
from .sms_provider import HttpSmsGateway, SmsGateway, SmsOtpProvider

__all__ = [
    "HttpSmsGateway",
    "MockOtpProvider",
    "OtpDeliveryError",
    "OtpProvider",
    "SmsGateway",
    "SmsOtpProvider",
]
