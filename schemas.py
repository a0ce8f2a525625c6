from pydantic import BaseModel, ConfigDict, Field


class LevelContent(BaseModel):
    """Story, question and expected answer for one adventure level."""

    story: str = Field(description="The adventure scene the math problem is woven into")
    question: str = Field(description="The math question the player has to solve")
    answer: str = Field(description="The correct answer, as short as possible")


class AbilityModel(BaseModel):
    """Closing scorecard shown on the reward screen."""

    model_config = ConfigDict(frozen=True)

    mastery: float = Field(ge=0, le=100, description="Knowledge mastery, 0-100")
    logic: float = Field(ge=0, le=100, description="Logical reasoning, 0-100")
    advice: str = Field(description="Teaching advice for a parent or teacher")
