"""
Utility modules for the BTCPay client
"""
from .config_loader import BTCPayConfig, load_btcpay_config

__all__ = [
    'BTCPayConfig',
    'load_btcpay_config',
]
