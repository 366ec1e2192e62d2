from rest_framework import serializers

from teamup.constants.team import DEFAULT_MAX_MEMBERS, MAX_MAX_MEMBERS, MIN_MAX_MEMBERS


class CreateTeamSerializer(serializers.Serializer):
    """
    The creator is taken from the authenticated request and joins as Team Lead.
    """

    name = serializers.CharField(max_length=100)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True, default="")
    hackathon_id = serializers.CharField(max_length=100)
    hackathon_name = serializers.CharField(max_length=200)
    required_skills = serializers.ListField(
        child=serializers.CharField(max_length=100), required=False, default=list
    )
    max_members = serializers.IntegerField(
        min_value=MIN_MAX_MEMBERS, max_value=MAX_MAX_MEMBERS, required=False, default=DEFAULT_MAX_MEMBERS
    )


class JoinTeamByCodeSerializer(serializers.Serializer):
    team_code = serializers.CharField(max_length=20)

    def validate_team_code(self, value):
        return value.strip().upper()
