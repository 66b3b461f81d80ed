import json
from dataclasses import dataclass
from typing import Optional

from player.session import ReviewSession


@dataclass
class SessionRecord:
    id: str
    video_url: str
    violations_json: str        # json list of annotation strings
    duration_seconds: Optional[float]
    assessment_id: Optional[str]
    user_id: Optional[str]
    created_at: str
    updated_at: str

    def to_session(self) -> ReviewSession:
        return ReviewSession(
            id=self.id,
            video_url=self.video_url,
            violations=json.loads(self.violations_json or "[]"),
            duration_seconds=self.duration_seconds,
            assessment_id=self.assessment_id,
            user_id=self.user_id,
        )
