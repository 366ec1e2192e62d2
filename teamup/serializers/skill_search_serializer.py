from rest_framework import serializers

from teamup.constants.messages import ValidationErrors


class SkillSearchSerializer(serializers.Serializer):
    """Query parameters for team search. skills is a comma separated list."""

    skills = serializers.CharField()

    def validate_skills(self, value):
        skills = [skill.strip() for skill in value.split(",") if skill.strip()]
        if not skills:
            raise serializers.ValidationError(ValidationErrors.NO_SEARCH_SKILLS)
        return skills
