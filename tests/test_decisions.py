import unittest

from launchgate.configuration import AlertSubject, UpdateSubject
from launchgate.decisions import (
    should_show_alert_dialog,
    should_show_optional_update_dialog,
    should_show_required_update_dialog,
)
from launchgate.errors import MalformedVersion
from launchgate.memory import Memory


class AlertDecisionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.memory = Memory()

    def test_blocking_alert_never_shown(self) -> None:
        alert = AlertSubject(message="Hello world", blocking=True)
        self.assertTrue(should_show_alert_dialog(alert, self.memory))

    def test_blocking_alert_already_remembered(self) -> None:
        alert = AlertSubject(message="Hello world", blocking=True)
        self.memory.remember(alert)
        self.assertTrue(should_show_alert_dialog(alert, self.memory))

    def test_blocking_alert_with_empty_message(self) -> None:
        self.assertTrue(should_show_alert_dialog(AlertSubject(message="", blocking=True), self.memory))

    def test_new_alert_with_message(self) -> None:
        alert = AlertSubject(message="Hello world", blocking=False)
        self.assertTrue(should_show_alert_dialog(alert, self.memory))

    def test_alert_with_empty_message(self) -> None:
        alert = AlertSubject(message="", blocking=False)
        self.assertFalse(should_show_alert_dialog(alert, self.memory))

    def test_remembered_alert(self) -> None:
        alert = AlertSubject(message="Hello world", blocking=False)
        self.memory.remember(alert)
        self.assertFalse(should_show_alert_dialog(AlertSubject(message="Hello world"), self.memory))

    def test_predicate_does_not_touch_memory(self) -> None:
        should_show_alert_dialog(AlertSubject(message="Hello world"), self.memory)
        self.assertEqual(self.memory.shown, {})


class OptionalUpdateDecisionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.memory = Memory()
        self.update = UpdateSubject(version="1.2", message="")

    def test_app_older_than_update(self) -> None:
        self.assertTrue(should_show_optional_update_dialog(self.update, "1.1", self.memory))

    def test_app_newer_than_update(self) -> None:
        self.assertFalse(should_show_optional_update_dialog(self.update, "1.3", self.memory))

    def test_app_equal_to_update(self) -> None:
        self.assertFalse(should_show_optional_update_dialog(self.update, "1.2", self.memory))
        self.assertFalse(should_show_optional_update_dialog(self.update, "1.2.0", self.memory))

    def test_already_shown(self) -> None:
        self.memory.remember(self.update)
        self.assertFalse(should_show_optional_update_dialog(self.update, "1.1", self.memory))

    def test_new_message_for_same_version_is_offered_again(self) -> None:
        self.memory.remember(self.update)
        reworded = UpdateSubject(version="1.2", message="Now with dark mode")
        self.assertTrue(should_show_optional_update_dialog(reworded, "1.1", self.memory))

    def test_malformed_version_raises(self) -> None:
        with self.assertRaises(MalformedVersion):
            should_show_optional_update_dialog(UpdateSubject(version="next", message=""), "1.1", self.memory)


class RequiredUpdateDecisionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.update = UpdateSubject(version="1.1", message="")

    def test_app_older_than_required(self) -> None:
        self.assertTrue(should_show_required_update_dialog(self.update, "1.0"))

    def test_app_newer_than_required(self) -> None:
        self.assertFalse(should_show_required_update_dialog(self.update, "1.2"))

    def test_app_equal_to_required(self) -> None:
        self.assertFalse(should_show_required_update_dialog(self.update, "1.1"))

    def test_malformed_app_version_raises(self) -> None:
        with self.assertRaises(MalformedVersion):
            should_show_required_update_dialog(self.update, "")
