"""
Customer Service configuration
"""

from shared.utils.config import ServiceSettings


class CustomerServiceSettings(ServiceSettings):
    service_name: str = "customer-service"
    port: int = 3001
