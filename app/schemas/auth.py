from pydantic import BaseModel, EmailStr, Field


class Credentials(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class UserRecord(BaseModel):
    id: str
    name: str
    email: str
    password: str  # bcrypt hash
