from django.urls import path
from teamup.views.health import HealthView
from teamup.views.team import (
    TeamListView,
    AvailableTeamListView,
    TeamSearchView,
    TeamByCodeView,
    JoinTeamByCodeView,
    TeamDetailView,
    RefreshTeamMembersView,
    TeamMemberDetailView,
)
from teamup.views.join_request import (
    TeamJoinRequestListView,
    AcceptJoinRequestView,
    TeamJoinRequestDetailView,
    UserJoinRequestListView,
)
from teamup.views.skill_match import SkillMatchListView, SkillMatchCandidateView
from teamup.views.user_profile import ProfileView, UserProfileDetailView

urlpatterns = [
    path("health", HealthView.as_view(), name="health"),
    path("teams", TeamListView.as_view(), name="teams"),
    path("teams/available", AvailableTeamListView.as_view(), name="available_teams"),
    path("teams/search", TeamSearchView.as_view(), name="search_teams"),
    path("teams/code/<str:team_code>", TeamByCodeView.as_view(), name="team_by_code"),
    path("teams/join-by-code", JoinTeamByCodeView.as_view(), name="join_team_by_code"),
    path("teams/<str:team_id>", TeamDetailView.as_view(), name="team_detail"),
    path("teams/<str:team_id>/members/refresh", RefreshTeamMembersView.as_view(), name="refresh_team_members"),
    path("teams/<str:team_id>/members/<str:user_id>", TeamMemberDetailView.as_view(), name="team_member_detail"),
    path("teams/<str:team_id>/join-requests", TeamJoinRequestListView.as_view(), name="team_join_requests"),
    path(
        "teams/<str:team_id>/join-requests/<str:user_id>/accept",
        AcceptJoinRequestView.as_view(),
        name="accept_join_request",
    ),
    path(
        "teams/<str:team_id>/join-requests/<str:user_id>",
        TeamJoinRequestDetailView.as_view(),
        name="team_join_request_detail",
    ),
    path("teams/<str:team_id>/skill-matches", SkillMatchListView.as_view(), name="skill_matches"),
    path(
        "teams/<str:team_id>/skill-matches/<str:user_id>",
        SkillMatchCandidateView.as_view(),
        name="skill_match_candidate",
    ),
    path("join-requests", UserJoinRequestListView.as_view(), name="user_join_requests"),
    path("profile", ProfileView.as_view(), name="profile"),
    path("users/<str:user_id>/profile", UserProfileDetailView.as_view(), name="user_profile"),
]
