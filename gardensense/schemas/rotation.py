from pydantic import BaseModel


class RotationRequest(BaseModel):
    plant_name: str
    previous_plants: list[str] = []


class RotationAdvice(BaseModel):
    should_rotate: bool
    reason: str
    suggestions: list[str]
