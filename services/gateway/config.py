"""
API Gateway configuration

The three backend base addresses have no defaults: the gateway refuses to
start until every one of them is configured.
"""

from pydantic import field_validator

from shared.utils.config import BaseServiceSettings


class GatewaySettings(BaseServiceSettings):
    service_name: str = "api-gateway"
    port: int = 3000

    # Backend base addresses
    customer_service_url: str
    product_service_url: str
    order_service_url: str

    # Upstream HTTP client
    proxy_timeout: float = 30.0
    proxy_max_connections: int = 100
    proxy_max_keepalive: int = 20

    @field_validator("customer_service_url", "product_service_url", "order_service_url")
    @classmethod
    def validate_service_url(cls, v, info):
        v = (v or "").strip()
        if not v:
            raise ValueError(f"{info.field_name.upper()} must be set")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"{info.field_name.upper()} must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("proxy_timeout")
    @classmethod
    def validate_proxy_timeout(cls, v):
        if v <= 0:
            raise ValueError("proxy timeout must be positive")
        return v
