"""
Product Service configuration
"""

from shared.utils.config import ServiceSettings


class ProductServiceSettings(ServiceSettings):
    service_name: str = "product-service"
    port: int = 3002
