import unittest

from urbanshield.core.api.models import Destination
from urbanshield.core.api.router import DEFAULT_DESTINATION, route


class TestRoute(unittest.TestCase):
    def test_known_roles(self):
        self.assertEqual(route("resident"), Destination.RESIDENT_HOME)
        self.assertEqual(route("tourist"), Destination.TOURIST_HOME)

    def test_official_is_the_default(self):
        self.assertEqual(DEFAULT_DESTINATION, Destination.OFFICIAL_HOME)
        for role in ("official", "anything-else", "", None, "Resident", "TOURIST", " resident", "resdent"):
            with self.subTest(role=role):
                self.assertEqual(route(role), Destination.OFFICIAL_HOME)

    def test_repeatable(self):
        self.assertEqual(route("tourist"), route("tourist"))
        self.assertEqual(route("x"), route("x"))


if __name__ == '__main__':
    unittest.main()
