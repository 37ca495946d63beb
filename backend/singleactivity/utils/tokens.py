import hmac
import uuid
from flask_jwt_extended import create_access_token, create_refresh_token, get_jwt


def issue_tokens(user):
    """
    Access and refresh tokens for ``user``. The session key travels as a
    claim and guards state-changing GET requests such as the edit toggle.
    """
    claims = {
        "role": user.role,
        "sesskey": uuid.uuid4().hex,
    }
    return {
        "access_token": create_access_token(identity=user.id, additional_claims=claims),
        "refresh_token": create_refresh_token(identity=user.id, additional_claims=claims),
        "sesskey": claims["sesskey"],
    }


def confirm_sesskey(sesskey) -> bool:
    expected = get_jwt().get("sesskey")
    if not sesskey or not expected:
        return False
    return hmac.compare_digest(str(sesskey), str(expected))
