import unittest
from datetime import datetime
from types import SimpleNamespace

from api_test_case import ApiTestCase
from models.post_model import AnimalEntry, PersonEntry, entry_from_row


class EntrySerializationTests(unittest.TestCase):
    def test_person_entry_fills_person_name_only(self):
        entry = PersonEntry(1, "Kim", "Seoul", None, datetime(2024, 5, 1, 12, 0))
        data = entry.to_dict()
        self.assertEqual(data["type"], "person")
        self.assertEqual(data["personName"], "Kim")
        self.assertIsNone(data["animalName"])
        self.assertEqual(data["created_at"], "2024-05-01T12:00:00")

    def test_animal_entry_keeps_null_pairing_without_a_name(self):
        entry = AnimalEntry(2, None, "Busan", None, datetime(2024, 5, 1, 12, 0))
        data = entry.to_dict()
        self.assertEqual(data["type"], "animal")
        self.assertIsNone(data["personName"])
        self.assertIn("animalName", data)

    def test_unknown_row_type_is_rejected(self):
        row = SimpleNamespace(id=1, type="plant", name="x", last_seen_location="y",
                              main_photo_url=None, created_at=None)
        with self.assertRaises(ValueError):
            entry_from_row(row)


class MyPostsTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.register("alice")
        self.register("bob")

    def test_my_posts_unions_both_kinds_newest_first(self):
        person = self.create_person_report("uid-alice", missing_person_name="Kim")
        animal = self.create_animal_report("uid-alice", animal_name="Nabi")
        self.create_person_report("uid-bob", missing_person_name="Not mine")

        resp = self.client.get("/api/users/me/posts", headers=self.auth("uid-alice"))
        self.assertEqual(resp.status_code, 200)
        posts = resp.get_json()
        self.assertEqual([(p["type"], p["id"]) for p in posts], [("animal", animal), ("person", person)])
        self.assertEqual(posts[0]["animalName"], "Nabi")
        self.assertIsNone(posts[0]["personName"])
        self.assertEqual(posts[1]["personName"], "Kim")
        self.assertIsNone(posts[1]["animalName"])
        self.assertEqual(
            set(posts[0]),
            {"id", "type", "personName", "animalName", "last_seen_location",
             "main_photo_url", "created_at"},
        )

    def test_my_posts_includes_closed_reports(self):
        report = self.create_person_report("uid-alice")
        self.client.patch(f"/api/missing-persons/{report}", json={"status": "closed"},
                          headers=self.auth("uid-alice"))
        posts = self.client.get("/api/users/me/posts", headers=self.auth("uid-alice")).get_json()
        self.assertEqual([p["id"] for p in posts], [report])

    def test_my_posts_requires_auth(self):
        self.assertEqual(self.client.get("/api/users/me/posts").status_code, 401)


if __name__ == "__main__":
    unittest.main()
