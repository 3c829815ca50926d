"""
Request Decorators

Contains decorators shared by the HTTP endpoints.
"""

from functools import wraps
from flask import request, jsonify


def require_service(getter, name):
    """
    Decorator to fail fast when a global service has not been initialized.

    Args:
        getter: Zero-argument function returning the service or None
        name: Human-readable service name used in the error message
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            if getter() is None:
                return jsonify({
                    'success': False,
                    'error': f'{name} service unavailable'
                }), 500
            return f(*args, **kwargs)

        return decorated_function

    return decorator


def require_json(f):
    """Decorator to require a JSON object request body."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({
                'success': False,
                'error': 'JSON object body required'
            }), 400
        return f(*args, **kwargs)

    return decorated_function
