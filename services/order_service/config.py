"""
Order Service configuration
"""

from shared.utils.config import ServiceSettings


class OrderServiceSettings(ServiceSettings):
    service_name: str = "order-service"
    port: int = 3003
