import os
import unittest
from unittest.mock import MagicMock, patch

from portal import dependencies
from portal.app import create_app
from portal.baas import MissingCredentialsError, create_anon_client, create_service_client
from portal.config import DEFAULT_BUCKET_REGION, Settings
from portal.db import InMemoryDbClient, SqlDbClient
from portal.storage import CACHE_CONTROL_IMMUTABLE, InMemoryStorageClient, S3StorageClient


def _settings(**values):
    return Settings(_env_file=None, **values)


class DbClientSingletonTests(unittest.TestCase):
    def setUp(self):
        patcher = patch.object(dependencies, "_db_client", None)
        patcher.start()
        self.addCleanup(patcher.stop)

    @patch("portal.dependencies.get_settings")
    def test_repeated_calls_return_same_handle(self, mock_settings):
        mock_settings.return_value = _settings(use_in_memory_backends=True)

        first = dependencies.get_db_client()
        second = dependencies.get_db_client()

        self.assertIs(first, second)
        self.assertIsInstance(first, InMemoryDbClient)
        self.assertEqual(mock_settings.call_count, 1)

    @patch("portal.dependencies.get_settings")
    def test_database_url_selects_sql_client(self, mock_settings):
        mock_settings.return_value = _settings(database_url="sqlite+pysqlite:///:memory:")

        client = dependencies.get_db_client()

        self.assertIsInstance(client, SqlDbClient)
        self.assertIs(dependencies.get_db_client(), client)

    @patch("portal.dependencies.get_settings")
    def test_rebuilt_apps_share_the_handle(self, mock_settings):
        mock_settings.return_value = _settings(use_in_memory_backends=True)

        first_app = create_app()
        second_app = create_app()

        self.assertIs(first_app.state.db, second_app.state.db)
        self.assertIs(first_app.state.db, dependencies.get_db_client())


class SettingsTests(unittest.TestCase):
    def test_bucket_region_fallback_chain(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual(_settings().bucket_region, DEFAULT_BUCKET_REGION)
        with patch.dict(os.environ, {"BUCKET_REGION": "us-east-1"}, clear=True):
            self.assertEqual(_settings().bucket_region, "us-east-1")
        with patch.dict(
            os.environ, {"AWS_REGIO": "me-south-1", "BUCKET_REGION": "us-east-1"}, clear=True
        ):
            self.assertEqual(_settings().bucket_region, "me-south-1")

    def test_supabase_url_prefers_public_variable(self):
        env = {
            "NEXT_PUBLIC_SUPABASE_DATABASE_URL": "https://public.supabase.co",
            "SUPABASE_DATABASE_URL": "https://server.supabase.co",
        }
        with patch.dict(os.environ, env, clear=True):
            self.assertEqual(_settings().supabase_url, "https://public.supabase.co")
        with patch.dict(
            os.environ, {"SUPABASE_DATABASE_URL": "https://server.supabase.co"}, clear=True
        ):
            self.assertEqual(_settings().supabase_url, "https://server.supabase.co")

    def test_storage_credentials(self):
        env = {
            "AWS_ACCESS_KEY": "AKIA123",
            "AWS_SECRET_ACCESS": "secret",
            "BUCKET_NAME": "guest-images",
            "DATABASE_URL": "postgresql://u:p@db/hotel",
            "APP_ENV": "production",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = _settings()
        self.assertEqual(settings.aws_access_key, "AKIA123")
        self.assertEqual(settings.aws_secret_access, "secret")
        self.assertEqual(settings.bucket_name, "guest-images")
        self.assertEqual(settings.database_url, "postgresql://u:p@db/hotel")
        self.assertTrue(settings.is_production)


class BaasClientTests(unittest.TestCase):
    def test_service_client_fails_fast_without_key(self):
        settings = _settings(supabase_url="https://project.supabase.co")

        with self.assertRaises(MissingCredentialsError):
            create_service_client(settings)

    @patch("portal.baas.create_client")
    def test_service_client_disables_session_handling(self, mock_create):
        settings = _settings(
            supabase_url="https://project.supabase.co",
            supabase_service_role_key="service-key",
        )

        client = create_service_client(settings)

        self.assertIs(client, mock_create.return_value)
        args, kwargs = mock_create.call_args
        self.assertEqual(args, ("https://project.supabase.co", "service-key"))
        self.assertFalse(kwargs["options"].auto_refresh_token)
        self.assertFalse(kwargs["options"].persist_session)

    @patch("portal.baas.create_client")
    def test_anon_client_uses_anon_key(self, mock_create):
        settings = _settings(
            supabase_url="https://project.supabase.co", supabase_anon_key="anon-key"
        )

        create_anon_client(settings)

        mock_create.assert_called_once_with("https://project.supabase.co", "anon-key")


class StorageTests(unittest.TestCase):
    @patch("portal.storage.boto3")
    def test_s3_upload_sets_cache_headers(self, mock_boto3):
        s3 = MagicMock()
        mock_boto3.client.return_value = s3
        storage = S3StorageClient(
            bucket="guest-images",
            region="eu-north-1",
            access_key_id="AKIA123",
            secret_access_key="secret",
        )

        storage.upload_bytes("uploads/a.jpg", b"data", "image/jpeg")

        mock_boto3.client.assert_called_once_with(
            "s3",
            region_name="eu-north-1",
            aws_access_key_id="AKIA123",
            aws_secret_access_key="secret",
        )
        s3.put_object.assert_called_once_with(
            Bucket="guest-images",
            Key="uploads/a.jpg",
            Body=b"data",
            ContentType="image/jpeg",
            CacheControl=CACHE_CONTROL_IMMUTABLE,
        )
        self.assertEqual(
            storage.public_url("uploads/a.jpg"),
            "https://s3.eu-north-1.amazonaws.com/guest-images/uploads/a.jpg",
        )

    def test_in_memory_storage(self):
        storage = InMemoryStorageClient(bucket="b", region="us-east-1")

        storage.upload_bytes("k", b"v", "text/plain")

        self.assertEqual(storage.stored_objects["k"]["body"], b"v")
        self.assertEqual(storage.public_url("k"), "https://s3.us-east-1.amazonaws.com/b/k")


if __name__ == "__main__":
    unittest.main()
