from flask import current_app, request


def client_ip() -> str:
    """
    The caller's address as used for lockouts, likes and audit rows.

    X-Forwarded-For is only honoured through ProxyFix (TRUSTED_PROXY_HOPS), so
    ``request.remote_addr`` already holds the right hop. CF-Connecting-IP is read
    only when TRUST_CF_CONNECTING_IP is set.
    """
    if current_app.config.get("TRUST_CF_CONNECTING_IP"):
        cf_ip = (request.headers.get("CF-Connecting-IP") or "").strip()
        if cf_ip:
            return cf_ip

    return request.remote_addr or "unknown"
