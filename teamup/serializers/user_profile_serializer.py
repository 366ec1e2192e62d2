from rest_framework import serializers

from teamup.constants.skill_match import SkillCategory, SkillProficiency


class SkillSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
    category = serializers.ChoiceField(
        choices=[category.value for category in SkillCategory], default=SkillCategory.OTHER.value
    )
    proficiency = serializers.ChoiceField(
        choices=[proficiency.value for proficiency in SkillProficiency], default=SkillProficiency.BEGINNER.value
    )


class ExperienceSerializer(serializers.Serializer):
    id = serializers.CharField()
    title = serializers.CharField(required=False, allow_blank=True)
    company = serializers.CharField(required=False, allow_blank=True)
    start_date = serializers.CharField(required=False, allow_blank=True)
    end_date = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    technologies = serializers.ListField(child=serializers.CharField(), required=False)
    type = serializers.ChoiceField(choices=["work", "project", "hackathon"], required=False)


class EducationSerializer(serializers.Serializer):
    id = serializers.CharField()
    institution = serializers.CharField(required=False, allow_blank=True)
    degree = serializers.CharField(required=False, allow_blank=True)
    major = serializers.CharField(required=False, allow_blank=True)
    start_date = serializers.CharField(required=False, allow_blank=True)
    end_date = serializers.CharField(required=False, allow_blank=True)
    gpa = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    relevant_coursework = serializers.ListField(child=serializers.CharField(), required=False)


class ProjectSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)
    technologies = serializers.ListField(child=serializers.CharField(), required=False)
    role = serializers.CharField(required=False, allow_blank=True)
    start_date = serializers.CharField(required=False, allow_blank=True)
    end_date = serializers.CharField(required=False, allow_blank=True)
    demo_link = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    repo_link = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class ProfileLinksSerializer(serializers.Serializer):
    github = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    linkedin = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    portfolio = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    devpost = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    twitter = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    other = serializers.ListField(child=serializers.CharField(), required=False)


class UserProfileSerializer(serializers.Serializer):
    """
    Profile save payload. Every field is optional; only supplied fields are merged
    into the stored profile.
    """

    name = serializers.CharField(max_length=100, required=False, allow_blank=True)
    title = serializers.CharField(max_length=100, required=False, allow_blank=True)
    bio = serializers.CharField(max_length=2000, required=False, allow_blank=True)
    location = serializers.CharField(max_length=100, required=False, allow_blank=True)
    timezone = serializers.CharField(max_length=50, required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    phone = serializers.CharField(max_length=30, required=False, allow_null=True, allow_blank=True)
    profile_picture = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    technical_skills = SkillSerializer(many=True, required=False)
    soft_skills = serializers.ListField(child=serializers.CharField(), required=False)
    languages = serializers.ListField(child=serializers.CharField(), required=False)
    tools = serializers.ListField(child=serializers.CharField(), required=False)
    experiences = ExperienceSerializer(many=True, required=False)
    education = EducationSerializer(many=True, required=False)
    projects = ProjectSerializer(many=True, required=False)
    links = ProfileLinksSerializer(required=False)
