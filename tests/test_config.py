import os
from unittest import TestCase, mock

from core.utils.config import Settings, get_setting


class SettingsTests(TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.CURRENCY_SYMBOL, "₦")
        self.assertEqual(settings.URGENCY_WINDOW_DAYS, 14)
        self.assertFalse(settings.RATING_AVERAGE_RATED_ONLY)

    def test_environment_overrides(self):
        env = {
            "BIZDASH_CURRENCY_SYMBOL": "$",
            "BIZDASH_URGENCY_WINDOW_DAYS": "7",
            "BIZDASH_RATING_AVERAGE_RATED_ONLY": "true",
        }
        with mock.patch.dict(os.environ, env):
            settings = get_setting()
        self.assertEqual(settings.CURRENCY_SYMBOL, "$")
        self.assertEqual(settings.URGENCY_WINDOW_DAYS, 7)
        self.assertTrue(settings.RATING_AVERAGE_RATED_ONLY)

    def test_log_level_feeds_django_logging(self):
        from django.conf import settings as django_settings

        with mock.patch.dict(os.environ, {"BIZDASH_LOG_LEVEL": "DEBUG"}):
            self.assertEqual(Settings(_env_file=None).LOG_LEVEL, "DEBUG")

        level = django_settings.LOGGING["loggers"]["core"]["level"]
        self.assertEqual(level, django_settings.LOG_LEVEL)
