"""
Description:
Interview session state schema shared by the session store and the session engine.

Dependencies:
- pydantic: Used for data validation and settings management.

Author: @kcaparas1630
"""
from datetime import datetime
from typing import List
from pydantic import BaseModel, Field

class InterviewSession(BaseModel):
    id: str
    owner_id: str
    role: str
    difficulty: str
    questions: List[str] = Field(default_factory=list)
    answers: List[str] = Field(default_factory=list)
    scores: List[int] = Field(default_factory=list)
    created_at: datetime

    @property
    def is_complete(self) -> bool:
        return len(self.answers) >= len(self.questions)

    @property
    def next_question_index(self) -> int:
        return len(self.answers)
