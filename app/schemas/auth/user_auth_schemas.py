from pydantic import BaseModel

class AuthenticatedUser(BaseModel):
    uid: str
    email: str = ""
    is_admin: bool = False
