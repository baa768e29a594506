"""Tests for translation API views."""

import json
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.db import OperationalError
from django.test import Client, TestCase

from translation.models import SourceText, Translation

User = get_user_model()

BASE_URL = "/translation/api/v1/translations"


class TranslationAPITestCase(TestCase):
    """Base test case for translation API views."""

    def setUp(self):
        """Set up test data."""
        self.client = Client()
        self.user = User.objects.create_user(username="testuser", email="test@example.com", password="testpass123")
        self.client.login(username="testuser", password="testpass123")

        self.welcome = SourceText.objects.create(sid="welcome_message", text="Welcome")
        Translation.objects.create(source_text=self.welcome, lang_id="de-DE", translated_text="Willkommen")
        SourceText.objects.create(sid="goodbye_message", text="Goodbye")

    def put_json(self, url, data):
        """Send a JSON PUT request."""
        return self.client.put(url, data=json.dumps(data), content_type="application/json")


class AuthenticationTest(TranslationAPITestCase):
    """Test cases for API authentication."""

    def test_anonymous_request_is_rejected(self):
        """Test unauthenticated calls receive 401."""
        self.client.logout()

        response = self.client.get(f"{BASE_URL}/sids")

        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"data": None, "isSuccess": False, "errors": ["Authentication required"]})


class ReadAPITest(TranslationAPITestCase):
    """Test cases for read endpoints."""

    def test_list_sids(self):
        """Test listing all keys."""
        response = self.client.get(f"{BASE_URL}/sids")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"data": ["goodbye_message", "welcome_message"], "isSuccess": True, "errors": []})

    def test_get_by_sid(self):
        """Test fetching one key."""
        response = self.client.get(f"{BASE_URL}/welcome_message")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["data"],
            {"sid": "welcome_message", "text": "Welcome", "translations": [{"langId": "de-DE", "text": "Willkommen"}]},
        )

    def test_get_by_sid_not_found(self):
        """Test fetching an unknown key."""
        response = self.client.get(f"{BASE_URL}/unknown")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["errors"], ["SID 'unknown' not found"])

    def test_list_with_language_defaults_to_english(self):
        """Test the language listing without a langId parameter."""
        response = self.client.get(BASE_URL)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json()["data"],
            [{"sid": "goodbye_message", "text": "Goodbye"}, {"sid": "welcome_message", "text": "Welcome"}],
        )

    def test_list_with_language(self):
        """Test the language listing for German."""
        response = self.client.get(BASE_URL, {"langId": "de-DE"})

        self.assertEqual(response.json()["data"], [{"sid": "welcome_message", "text": "Willkommen"}])

    def test_list_with_unknown_language(self):
        """Test an unknown language is an empty success."""
        response = self.client.get(BASE_URL, {"langId": "en_US"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"], [])


class WriteAPITest(TranslationAPITestCase):
    """Test cases for write endpoints."""

    def test_create(self):
        """Test creating a key with translations."""
        payload = {"sid": "save_button", "text": "Save", "translations": [{"langId": "de-DE", "text": "Speichern"}]}

        response = self.client.post(BASE_URL, data=json.dumps(payload), content_type="application/json")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"], payload)
        self.assertTrue(SourceText.objects.filter(sid="save_button").exists())

    def test_create_conflict(self):
        """Test creating an existing key."""
        payload = {"sid": "welcome_message", "text": "Hello"}

        response = self.client.post(BASE_URL, data=json.dumps(payload), content_type="application/json")

        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json()["errors"], ["SID 'welcome_message' already exists"])

    def test_create_invalid(self):
        """Test creating with a missing text."""
        response = self.client.post(BASE_URL, data=json.dumps({"sid": "no_text"}), content_type="application/json")

        self.assertEqual(response.status_code, 400)
        self.assertIn("text: This field is required.", response.json()["errors"])

    def test_create_malformed_json(self):
        """Test a body that is not JSON."""
        response = self.client.post(BASE_URL, data="{not json", content_type="application/json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["errors"], ["Invalid JSON"])

    def test_update_translation(self):
        """Test upserting a translation."""
        response = self.put_json(f"{BASE_URL}/welcome_message/fr-FR", {"text": "Bienvenue"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"], {"langId": "fr-FR", "text": "Bienvenue"})

    def test_update_translation_unknown_sid(self):
        """Test upserting a translation for an unknown key succeeds."""
        response = self.put_json(f"{BASE_URL}/unknown/de-DE", {"text": "Unbekannt"})

        self.assertEqual(response.status_code, 200)
        self.assertTrue(Translation.objects.filter(source_text_id="unknown").exists())

    def test_update_translation_requires_object_body(self):
        """Test a JSON body that is not an object."""
        response = self.put_json(f"{BASE_URL}/welcome_message/de-DE", ["Hallo"])

        self.assertEqual(response.status_code, 400)

    def test_update_source_text(self):
        """Test updating the source text."""
        response = self.put_json(f"{BASE_URL}/welcome_message/source", {"text": "Hello"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["text"], "Hello")
        self.assertFalse(Translation.objects.filter(lang_id="source").exists())

    def test_update_source_text_not_found(self):
        """Test updating the source text of an unknown key."""
        response = self.put_json(f"{BASE_URL}/unknown/source", {"text": "Hello"})

        self.assertEqual(response.status_code, 404)

    def test_delete_translation(self):
        """Test deleting a translation."""
        response = self.client.delete(f"{BASE_URL}/welcome_message/de-DE")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"data": None, "isSuccess": True, "errors": []})

        response = self.client.delete(f"{BASE_URL}/welcome_message/de-DE")
        self.assertEqual(response.status_code, 404)

    def test_delete_source_text(self):
        """Test deleting a key."""
        response = self.client.delete(f"{BASE_URL}/welcome_message")

        self.assertEqual(response.status_code, 200)
        self.assertFalse(Translation.objects.filter(source_text_id="welcome_message").exists())

        response = self.client.delete(f"{BASE_URL}/welcome_message")
        self.assertEqual(response.status_code, 404)

    def test_unsupported_method(self):
        """Test methods without a handler are rejected."""
        response = self.client.post(f"{BASE_URL}/welcome_message")

        self.assertEqual(response.status_code, 405)


class ErrorHandlingTest(TranslationAPITestCase):
    """Test cases for unexpected failures."""

    @patch("translation.store.TranslationStore.list_all_keys", side_effect=OperationalError("connection lost"))
    def test_database_error_returns_generic_failure(self, mock_list):
        """Test storage failures become a generic 500 response."""
        with self.assertLogs("translation.views", level="ERROR"):
            response = self.client.get(f"{BASE_URL}/sids")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["errors"], ["An internal error occurred"])
        mock_list.assert_called_once()


class HealthcheckTest(TestCase):
    """Test cases for the healthcheck endpoint."""

    def test_healthcheck(self):
        """Test the healthcheck answers without authentication."""
        response = Client().get("/healthcheck/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"ok")
