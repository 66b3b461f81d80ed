from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class ReviewSession:
    """
    One proctoring recording with its violation annotations.
    """
    id: str
    video_url: str
    violations: List[str] = field(default_factory=list)
    duration_seconds: Optional[float] = None
    assessment_id: Optional[str] = None
    user_id: Optional[str] = None
