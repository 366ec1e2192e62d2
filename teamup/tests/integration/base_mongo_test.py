import unittest
from django.conf import settings
from django.test import TransactionTestCase, override_settings
from pymongo import MongoClient
from rest_framework.test import APIClient

from teamup.tests.fixtures.user_profile import jwt_user_payload
from teamup.tests.testcontainers.shared_mongo import get_shared_mongo_container
from teamup.utils.jwt_utils import generate_access_token, generate_refresh_token
from teamup_project.db.config import DatabaseManager
from teamup_project.db.migrations import run_all_migrations

TEST_DB_NAME = "teamup_test"


class BaseMongoTestCase(TransactionTestCase):
    @classmethod
    def setUpClass(cls):
        try:
            cls.mongo_container = get_shared_mongo_container()
        except Exception as e:
            raise unittest.SkipTest(f"MongoDB container unavailable: {e}")
        super().setUpClass()

        cls.mongo_url = cls.mongo_container.get_connection_url()
        cls.mongo_client = MongoClient(cls.mongo_url)
        cls.db = cls.mongo_client.get_database(TEST_DB_NAME)

        cls.override = override_settings(MONGODB_URI=cls.mongo_url, DB_NAME=TEST_DB_NAME)
        cls.override.enable()
        DatabaseManager.reset()
        run_all_migrations()

    def setUp(self):
        for collection in self.db.list_collection_names():
            self.db[collection].delete_many({})

    @classmethod
    def tearDownClass(cls):
        DatabaseManager.reset()
        cls.mongo_client.close()
        cls.override.disable()
        super().tearDownClass()


class AuthenticatedMongoTestCase(BaseMongoTestCase):
    def setUp(self):
        super().setUp()
        self.client = APIClient()
        self.user_data = dict(jwt_user_payload)
        self.user_id = self.user_data["user_id"]
        self._set_auth_cookies()

    def _set_auth_cookies(self):
        cookie_names = settings.COOKIE_SETTINGS
        self.client.cookies[cookie_names["ACCESS_COOKIE_NAME"]] = generate_access_token(self.user_data)
        self.client.cookies[cookie_names["REFRESH_COOKIE_NAME"]] = generate_refresh_token(self.user_data)
