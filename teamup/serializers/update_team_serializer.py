from rest_framework import serializers

from teamup.constants.messages import ValidationErrors
from teamup.constants.team import MAX_MAX_MEMBERS, MIN_MAX_MEMBERS


class UpdateTeamSerializer(serializers.Serializer):
    """
    Serializer for partial team updates. Omitted fields are left untouched.
    """

    name = serializers.CharField(max_length=100, required=False)
    description = serializers.CharField(max_length=1000, required=False, allow_blank=True)
    hackathon_id = serializers.CharField(max_length=100, required=False)
    hackathon_name = serializers.CharField(max_length=200, required=False)
    required_skills = serializers.ListField(child=serializers.CharField(max_length=100), required=False)
    max_members = serializers.IntegerField(min_value=MIN_MAX_MEMBERS, max_value=MAX_MAX_MEMBERS, required=False)

    def validate(self, data):
        if not data:
            raise serializers.ValidationError(ValidationErrors.EMPTY_UPDATE)
        return data
