from typing import List, Optional
from pymongo import ReturnDocument

from teamup.models.user_profile import UserProfileModel
from teamup.repositories.common.mongo_repository import MongoRepository


class UserProfileRepository(MongoRepository):
    collection_name = UserProfileModel.collection_name

    @classmethod
    def get_by_id(cls, user_id: str) -> Optional[UserProfileModel]:
        collection = cls.get_collection()
        doc = collection.find_one({"_id": user_id})
        return UserProfileModel(**doc) if doc else None

    @classmethod
    def get_by_ids(cls, user_ids: List[str]) -> List[UserProfileModel]:
        """
        Get multiple profiles in a single query. Only existing profiles are returned.
        """
        if not user_ids:
            return []

        collection = cls.get_collection()
        cursor = collection.find({"_id": {"$in": user_ids}})
        return [UserProfileModel(**doc) for doc in cursor]

    @classmethod
    def get_all(cls) -> List[UserProfileModel]:
        collection = cls.get_collection()
        return [UserProfileModel(**doc) for doc in collection.find({})]

    @classmethod
    def upsert(cls, user_id: str, profile_data: dict) -> UserProfileModel:
        """
        Merge profile_data into the stored profile, creating it if needed.
        """
        collection = cls.get_collection()
        # An empty save still creates the profile document
        update = {"$set": profile_data} if profile_data else {"$setOnInsert": {"name": ""}}
        result = collection.find_one_and_update(
            {"_id": user_id},
            update,
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return UserProfileModel(**result)
