"""Guard configuration."""

from __future__ import annotations

from pydantic import BaseModel, SecretStr


class GuardConfig(BaseModel):
    """Credentials and policy switches of a callback guard.

    Attributes:
        token: Shared token configured on the platform, used for request
            signatures.
        app_id: Application identifier issued by the platform.
        always_safe_mode: Treat every request as safe mode, whatever its
            ``encrypt_type`` parameter says.
        enforce_signature: Reject requests that carry no signature.  Off by
            default: unsigned requests are accepted.
        raw_response: Send handler return values back untouched instead of
            rendering them as replies.
    """

    model_config = {"frozen": True}

    token: SecretStr | None = None
    app_id: str | None = None
    always_safe_mode: bool = False
    enforce_signature: bool = False
    raw_response: bool = False

    @property
    def token_value(self) -> str:
        return self.token.get_secret_value() if self.token is not None else ""
