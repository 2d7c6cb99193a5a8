__all__ = [
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "decode_access_token",
    "authenticate_user",
    "get_current_user",
    "oauth2_scheme",
    "utcnow",
    "average_score",
    "percentage",
    "round_half_up_ratio",
]


def __getattr__(name):
    if name in {
        "verify_password",
        "get_password_hash",
        "create_access_token",
        "decode_access_token",
        "authenticate_user",
        "get_current_user",
        "oauth2_scheme",
    }:
        from . import security as _security
        return getattr(_security, name)
    if name == "utcnow":
        from . import clock as _clock
        return _clock.utcnow
    if name in {"average_score", "percentage", "round_half_up_ratio"}:
        from . import scoring as _scoring
        return getattr(_scoring, name)
    raise AttributeError(f"module 'skillexchange.utils' has no attribute '{name}'")
