from pydantic import BaseModel


class Session(BaseModel):
    """Authenticated caller context, passed explicitly to services that need it."""

    token: str | None = None
    user_id: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def auth_headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
