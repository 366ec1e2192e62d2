from typing import List, Optional
from pymongo import ReturnDocument

from teamup.models.team import TeamModel, TeamMemberModel
from teamup.repositories.common.mongo_repository import MongoRepository


class TeamRepository(MongoRepository):
    collection_name = TeamModel.collection_name

    @classmethod
    def create(cls, team: TeamModel) -> TeamModel:
        """
        Creates a new team in the repository.

        Raises pymongo's DuplicateKeyError when the team code is already taken.
        """
        teams_collection = cls.get_collection()
        if not team.id:
            team.id = cls.generate_id()

        team_dict = team.model_dump(by_alias=True, exclude_none=True)
        insert_result = teams_collection.insert_one(team_dict)
        team.id = insert_result.inserted_id
        return team

    @classmethod
    def get_by_id(cls, team_id: str) -> Optional[TeamModel]:
        teams_collection = cls.get_collection()
        team_data = teams_collection.find_one({"_id": team_id})
        if team_data:
            return TeamModel(**team_data)
        return None

    @classmethod
    def get_by_team_code(cls, team_code: str) -> Optional[TeamModel]:
        """
        Get a team by its team code. The unique index on team_code guarantees at
        most one match.
        """
        teams_collection = cls.get_collection()
        team_data = teams_collection.find_one({"team_code": team_code})
        if team_data:
            return TeamModel(**team_data)
        return None

    @classmethod
    def get_by_member_id(cls, user_id: str) -> List[TeamModel]:
        teams_collection = cls.get_collection()
        return [TeamModel(**data) for data in teams_collection.find({"members.id": user_id})]

    @classmethod
    def get_by_join_request(cls, user_id: str) -> List[TeamModel]:
        teams_collection = cls.get_collection()
        return [TeamModel(**data) for data in teams_collection.find({"join_requests": user_id})]

    @classmethod
    def get_by_required_skills(cls, skills: List[str]) -> List[TeamModel]:
        teams_collection = cls.get_collection()
        return [TeamModel(**data) for data in teams_collection.find({"required_skills": {"$in": skills}})]

    @classmethod
    def get_all(cls) -> List[TeamModel]:
        teams_collection = cls.get_collection()
        return [TeamModel(**data) for data in teams_collection.find({})]

    @classmethod
    def update(cls, team_id: str, update_data: dict, member_limit: Optional[int] = None) -> Optional[TeamModel]:
        """
        Set only the given fields. Returns the updated team, or None if no team
        matched.

        When member_limit is given the write only applies while the team has at
        most that many members.
        """
        if not update_data:
            return cls.get_by_id(team_id)

        teams_collection = cls.get_collection()
        query = {"_id": team_id}
        if member_limit is not None:
            query["$expr"] = {"$lte": [{"$size": "$members"}, member_limit]}
        updated_doc = teams_collection.find_one_and_update(
            query,
            {"$set": update_data},
            return_document=ReturnDocument.AFTER,
        )
        if updated_doc:
            return TeamModel(**updated_doc)
        return None

    @classmethod
    def delete(cls, team_id: str) -> bool:
        teams_collection = cls.get_collection()
        result = teams_collection.delete_one({"_id": team_id})
        return result.deleted_count > 0

    @classmethod
    def add_member(
        cls, team_id: str, member: TeamMemberModel, require_join_request: bool = False
    ) -> Optional[TeamModel]:
        """
        Append a member and drop any pending join request for the same user in one
        conditional write.

        The filter only matches while the user is not yet a member and the team
        still has a free seat, so concurrent writers cannot push the team past
        max_members. With require_join_request it also only matches while the user
        still has a pending request. Returns None when the filter did not match.
        """
        teams_collection = cls.get_collection()
        member_doc = member.model_dump(exclude_none=True)
        query = {
            "_id": team_id,
            "members.id": {"$ne": member.id},
            "$expr": {"$lt": [{"$size": "$members"}, "$max_members"]},
        }
        if require_join_request:
            query["join_requests"] = member.id
        updated_doc = teams_collection.find_one_and_update(
            query,
            {
                "$push": {"members": member_doc},
                "$pull": {"join_requests": member.id},
            },
            return_document=ReturnDocument.AFTER,
        )
        if updated_doc:
            return TeamModel(**updated_doc)
        return None

    @classmethod
    def remove_member(cls, team_id: str, member_id: str) -> bool:
        """
        Returns whether the team exists. Removing an absent member leaves the
        document untouched.
        """
        teams_collection = cls.get_collection()
        result = teams_collection.update_one({"_id": team_id}, {"$pull": {"members": {"id": member_id}}})
        return result.matched_count > 0

    @classmethod
    def update_member_snapshot(cls, team_id: str, member_id: str, name: str, avatar: Optional[str]) -> bool:
        teams_collection = cls.get_collection()
        update_fields = {"members.$.name": name}
        if avatar:
            update_fields["members.$.avatar"] = avatar
        result = teams_collection.update_one({"_id": team_id, "members.id": member_id}, {"$set": update_fields})
        return result.modified_count > 0

    @classmethod
    def add_join_request(cls, team_id: str, user_id: str) -> Optional[TeamModel]:
        """
        Add user_id to the team's join requests with set semantics.

        Returns None when the team does not exist or the user is already a member.
        """
        teams_collection = cls.get_collection()
        updated_doc = teams_collection.find_one_and_update(
            {"_id": team_id, "members.id": {"$ne": user_id}},
            {"$addToSet": {"join_requests": user_id}},
            return_document=ReturnDocument.AFTER,
        )
        if updated_doc:
            return TeamModel(**updated_doc)
        return None

    @classmethod
    def remove_join_request(cls, team_id: str, user_id: str) -> bool:
        """
        Returns whether the team exists.
        """
        teams_collection = cls.get_collection()
        result = teams_collection.update_one({"_id": team_id}, {"$pull": {"join_requests": user_id}})
        return result.matched_count > 0
