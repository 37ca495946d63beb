from flask import g, jsonify
from flask_jwt_extended import verify_jwt_in_request, get_jwt_identity
from singleactivity.models.user import User

def user_context_middleware(app):
    @app.before_request
    def load_user():
        g.current_user = None

        if not verify_jwt_in_request(optional=True):
            return None  # Anonymous request, routes decide if that is fine

        user = User.query.filter_by(id=get_jwt_identity(), is_active=True).first()
        if not user:
            return jsonify({"error": "Unknown or disabled user"}), 401

        # Attach user to global context
        g.current_user = user
