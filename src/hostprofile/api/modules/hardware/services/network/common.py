from ipaddress import ip_address

from fastapi import Request

from hostprofile.settings import Config

FORWARDED_IP_HEADERS = ("cf-connecting-ip", "x-forwarded-for", "x-real-ip")


def normalize_ip(value: str | None) -> str | None:
    if not value:
        return None

    # X-Forwarded-For lists the original client first.
    candidate = value.split(",", 1)[0].strip()
    try:
        return str(ip_address(candidate))
    except ValueError:
        return None


class RequestIpResolver:
    def __init__(self, config: Config):
        self._trust_forwarded_ip = config.hardware.trust_forwarded_ip

    def get_request_ip(self, request: Request) -> str | None:
        if self._trust_forwarded_ip:
            for header in FORWARDED_IP_HEADERS:
                ip = normalize_ip(request.headers.get(header))
                if ip:
                    return ip

        if request.client and request.client.host:
            return normalize_ip(request.client.host)

        return None


__all__ = ("FORWARDED_IP_HEADERS", "RequestIpResolver", "normalize_ip")
