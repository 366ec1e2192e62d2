from enum import Enum

# Candidates below this share of the team's required skills are never suggested
MATCH_THRESHOLD_PERCENTAGE = 30


class SkillCategory(Enum):
    FRONTEND = "frontend"
    BACKEND = "backend"
    ML = "ml"
    DESIGN = "design"
    DEVOPS = "devops"
    OTHER = "other"


class SkillProficiency(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"
