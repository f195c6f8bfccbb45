"""
Gateway HTTP proxy client

Forwards one inbound request to a backend and relays the backend's
response. Uses a single shared AsyncClient initialized at app startup.
"""

from typing import List, Optional, Tuple

import httpx
import structlog
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from services.gateway.routing import RouteMatch

logger = structlog.get_logger(__name__)

PROXY_ERROR_BODY = {"error": "Proxy error occurred"}

# Connection-scoped headers that are never relayed (RFC 7230 section 6.1)
HOP_BY_HOP_HEADERS = frozenset({
    b"connection",
    b"keep-alive",
    b"proxy-authenticate",
    b"proxy-authorization",
    b"proxy-connection",
    b"te",
    b"trailer",
    b"transfer-encoding",
    b"upgrade",
})

RawHeaders = List[Tuple[bytes, bytes]]


def _relayable(headers: RawHeaders, *dropped: bytes) -> RawHeaders:
    skip = HOP_BY_HOP_HEADERS.union(dropped)
    return [(name, value) for name, value in headers if name.lower() not in skip]


class ProxyClient:
    """
    HTTP client for forwarding gateway traffic.

    Lifecycle:
        - Call start() during app startup (FastAPI lifespan)
        - Call stop() during app shutdown
        - If not started, falls back to a per-request client
    """

    KEEPALIVE_EXPIRY = 5.0

    def __init__(
        self,
        timeout: float = 30.0,
        max_connections: int = 100,
        max_keepalive: int = 20,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.max_connections = max_connections
        self.max_keepalive = max_keepalive
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _build_client(self) -> httpx.AsyncClient:
        limits = httpx.Limits(
            max_connections=self.max_connections,
            max_keepalive_connections=self.max_keepalive,
            keepalive_expiry=self.KEEPALIVE_EXPIRY,
        )
        return httpx.AsyncClient(
            limits=limits,
            timeout=httpx.Timeout(self.timeout),
            transport=self.transport,
            follow_redirects=False,
        )

    async def start(self):
        """Initialize the shared HTTP client"""
        if self._client is not None:
            logger.warning("ProxyClient already started")
            return
        self._client = self._build_client()
        logger.info(
            "ProxyClient started",
            max_connections=self.max_connections,
            timeout=self.timeout,
        )

    async def stop(self):
        """Close the HTTP client and release resources"""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("ProxyClient stopped")

    async def forward(self, request: Request, match: RouteMatch) -> Response:
        """
        Forward ``request`` to the matched backend.

        Exactly one attempt is made. Transport failures (unreachable backend,
        timeout, reset connection) produce a fixed 500 body; the underlying
        error is only logged.
        """
        url = match.target_url(request.url.query)
        upstream_host = httpx.URL(match.route.target).netloc.decode("ascii")
        headers = _relayable(request.headers.raw, b"host", b"content-length")
        headers.append((b"host", upstream_host.encode("ascii")))
        body = await request.body()

        logger.info(
            "Forwarding request",
            method=request.method,
            path=request.url.path,
            target=match.route.name,
        )

        if self._client:
            return await self._send(self._client, request.method, url, headers, body, match)

        logger.warning("ProxyClient not initialized, using per-request client")
        async with self._build_client() as client:
            return await self._send(client, request.method, url, headers, body, match)

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        headers: RawHeaders,
        body: bytes,
        match: RouteMatch,
    ) -> Response:
        try:
            upstream_request = client.build_request(method, url, headers=headers, content=body)
            upstream = await client.send(upstream_request, stream=True)
            try:
                if upstream.is_stream_consumed:
                    # Already read (and decoded) by the transport
                    content, decoded = upstream.content, True
                else:
                    content, decoded = b"".join([chunk async for chunk in upstream.aiter_raw()]), False
            finally:
                await upstream.aclose()
        except httpx.HTTPError as e:
            logger.error(
                "Proxy error",
                target=match.route.name,
                url=url,
                error_type=type(e).__name__,
                error=str(e),
            )
            return JSONResponse(status_code=500, content=PROXY_ERROR_BODY)

        response = Response(content=content, status_code=upstream.status_code)
        dropped = (b"content-encoding",) if decoded else ()
        if method == "HEAD":
            response.raw_headers = _relayable(upstream.headers.raw, *dropped)
        else:
            response.raw_headers = _relayable(upstream.headers.raw, b"content-length", *dropped) + [
                (b"content-length", str(len(content)).encode("ascii")),
            ]
        return response
