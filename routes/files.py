from flask import Blueprint, jsonify, make_response, request

from storage import InvalidBlobKey, get_blob_store
from utils.errors import handle_failures

file_bp = Blueprint("files", __name__, url_prefix="/api")


@file_bp.get("/file/<path:key>")
@handle_failures("Failed to fetch file")
def serve_file(key: str):
    """Serves a stored blob (demo page, thumbnail, logo) for the iframe viewer."""
    try:
        obj = get_blob_store().get(key)
    except InvalidBlobKey:
        obj = None
    if obj is None:
        return jsonify(error="File not found"), 404

    if request.if_none_match.contains(obj.etag.strip('"')):
        resp = make_response("", 304)
    else:
        resp = make_response(obj.data)
        content_type = obj.content_type
        if content_type.startswith("text/html"):
            content_type = "text/html; charset=utf-8"
        resp.headers["Content-Type"] = content_type

    resp.headers["ETag"] = obj.etag
    resp.headers["X-Frame-Options"] = "SAMEORIGIN"
    return resp
