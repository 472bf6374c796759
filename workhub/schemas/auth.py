from pydantic import BaseModel

class LoginRequest(BaseModel):
    password: str

class TokenResponse(BaseModel):
    access_token: str
