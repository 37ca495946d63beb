from functools import wraps
from flask import g, jsonify
from singleactivity.domain.capabilities import has_capability

def user_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if getattr(g, "current_user", None) is None:
            return jsonify({"error": "User context missing"}), 401

        return fn(*args, **kwargs)
    return wrapper

def capability_required(*capabilities):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            user = getattr(g, "current_user", None)
            if user is None:
                return jsonify({"error": "User context missing"}), 401

            missing = [c for c in capabilities if not has_capability(user.role, c)]
            if missing:
                return jsonify({
                    "error": "Insufficient permissions",
                    "missing": missing
                }), 403

            return fn(*args, **kwargs)
        return wrapper
    return decorator
