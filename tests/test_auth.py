import unittest

from api_test_case import ApiTestCase


class SessionResolverTests(ApiTestCase):
    def test_missing_header_is_401(self):
        resp = self.client.get("/api/users/me")
        self.assertEqual(resp.status_code, 401)
        self.assertEqual(resp.get_json()["error"], "Unauthorized: No token provided.")

    def test_non_bearer_header_is_401(self):
        resp = self.client.get("/api/users/me", headers={"Authorization": "Basic abc"})
        self.assertEqual(resp.status_code, 401)

    def test_rejected_token_is_403(self):
        self.register("alice")
        resp = self.client.get("/api/users/me", headers={"Authorization": "Bearer forged"})
        self.assertEqual(resp.status_code, 403)

    def test_unknown_subject_is_404(self):
        resp = self.client.get("/api/users/me", headers=self.auth("nobody"))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.get_json()["error"], "User not found in our database.")

    def test_every_request_verifies_again(self):
        self.register("alice")
        self.client.get("/api/users/me", headers=self.auth("uid-alice"))
        self.client.get("/api/users/me", headers=self.auth("uid-alice"))
        self.assertEqual(self.verify_id_token.call_count, 2)


class RegistrationTests(ApiTestCase):
    def test_register_and_get_me(self):
        user_id = self.register("alice")
        resp = self.client.get("/api/users/me", headers=self.auth("uid-alice"))
        self.assertEqual(resp.status_code, 200)
        me = resp.get_json()
        self.assertEqual(me["id"], user_id)
        self.assertEqual(me["nickname"], "alice")
        self.assertEqual(me["firebase_uid"], "uid-alice")
        self.assertIsNone(me["profile_image_url"])
        self.assertIn("created_at", me)
        self.assertNotIn("ci", me)

    def test_missing_fields_is_400(self):
        resp = self.client.post("/api/auth/register", json={"nickname": "alice"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json()["error"], "Required fields are missing.")

    def test_duplicate_nickname_uid_or_ci_is_409(self):
        self.register("alice")
        duplicates = [
            {"nickname": "alice", "ci": "ci-x", "firebase_uid": "uid-x"},
            {"nickname": "bob", "ci": "ci-alice", "firebase_uid": "uid-y"},
            {"nickname": "carol", "ci": "ci-z", "firebase_uid": "uid-alice"},
        ]
        for body in duplicates:
            body.update(phone_number="010", real_name="Someone")
            resp = self.client.post("/api/auth/register", json=body)
            self.assertEqual(resp.status_code, 409, body)

        # nothing but alice got in
        resp = self.client.get("/api/users/me", headers=self.auth("uid-y"))
        self.assertEqual(resp.status_code, 404)


class ProfileTests(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.register("alice")
        self.headers = self.auth("uid-alice")

    def test_update_nickname(self):
        resp = self.client.patch("/api/users/me", json={"nickname": "alicia"}, headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        me = self.client.get("/api/users/me", headers=self.headers).get_json()
        self.assertEqual(me["nickname"], "alicia")

    def test_profile_image_can_be_cleared(self):
        self.client.patch("/api/users/me", json={"profile_image_url": "https://x/y.png"}, headers=self.headers)
        resp = self.client.patch("/api/users/me", json={"profile_image_url": None}, headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        me = self.client.get("/api/users/me", headers=self.headers).get_json()
        self.assertIsNone(me["profile_image_url"])

    def test_empty_update_is_400(self):
        resp = self.client.patch("/api/users/me", json={}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json()["error"], "No fields to update.")

    def test_identity_fields_are_not_updatable(self):
        resp = self.client.patch("/api/users/me", json={"real_name": "Mallory"}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)
        me = self.client.get("/api/users/me", headers=self.headers).get_json()
        self.assertEqual(me["real_name"], "Alice")

    def test_null_nickname_is_400(self):
        resp = self.client.patch("/api/users/me", json={"nickname": None}, headers=self.headers)
        self.assertEqual(resp.status_code, 400)

    def test_taken_nickname_is_409(self):
        self.register("bob")
        resp = self.client.patch("/api/users/me", json={"nickname": "bob"}, headers=self.headers)
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.get_json()["error"], "Nickname already exists.")

    def test_deactivate(self):
        resp = self.client.delete("/api/users/me", headers=self.headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json()["message"], "User account deactivated successfully.")
        # deactivated accounts no longer resolve to a session
        resp = self.client.get("/api/users/me", headers=self.headers)
        self.assertEqual(resp.status_code, 404)


if __name__ == "__main__":
    unittest.main()
