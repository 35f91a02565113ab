import unittest

from tests.base import ApiTestCase


JOIN = {"name": "Lee", "phone": "010-1111", "id": "a", "pw": "right", "pwCon": "right"}


class UserApiTests(ApiTestCase):
    def join(self, **overrides):
        return self.client.post("/api/user/join", json={**JOIN, **overrides})

    def test_join_and_check(self):
        self.assertFalse(self.client.post("/api/user/check", json={"id": "a"}).json()["exists"])
        response = self.join()
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Data saved successfully"})
        self.assertEqual(self.client.post("/api/user/check", json={"id": "a"}).json(), {"exists": True})

    def test_join_stores_confirmation_without_comparing(self):
        response = self.join(pwCon="different")
        self.assertEqual(response.status_code, 200)
        rows = self.execute("SELECT pw, pwCon FROM user WHERE id = ?", ("a",))
        self.assertEqual(rows[0], {"pw": "right", "pwCon": "different"})

    def test_duplicate_join_is_conflict(self):
        self.join()
        response = self.join(name="Other")
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {"error": "User id already exists"})

    def test_login_returns_full_user_row(self):
        self.join()
        response = self.client.post("/api/user/login", json={"id": "a", "pw": "right"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["message"], "Login successful")
        self.assertEqual(body["user"]["id"], "a")
        self.assertEqual(body["user"]["name"], "Lee")
        self.assertEqual(body["user"]["pw"], "right")
        self.assertEqual(len(self.execute("SELECT * FROM login WHERE id = ?", ("a",))), 1)

    def test_wrong_password_is_unauthorized(self):
        self.join()
        response = self.client.post("/api/user/login", json={"id": "a", "pw": "wrong"})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Invalid credentials"})

    def test_unknown_user_is_unauthorized(self):
        response = self.client.post("/api/user/login", json={"id": "ghost", "pw": "x"})
        self.assertEqual(response.status_code, 401)

    def test_logout_uses_login_cookie(self):
        self.join()
        self.client.post("/api/user/login", json={"id": "a", "pw": "right"})
        response = self.client.post("/api/user/logout")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Logout successful"})
        self.assertEqual(self.execute("SELECT * FROM login WHERE id = ?", ("a",)), [])

    def test_logout_accepts_express_style_cookie(self):
        self.execute("INSERT INTO login (id) VALUES (?)", ("b",))
        self.client.cookies.set("user", 'j%3A%7B%22id%22%3A%22b%22%7D')
        response = self.client.post("/api/user/logout")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.execute("SELECT * FROM login WHERE id = ?", ("b",)), [])

    def test_logout_without_cookie_is_unauthorized(self):
        response = self.client.post("/api/user/logout")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"error": "Not logged in"})


class HashedPasswordTests(ApiTestCase):
    settings_overrides = {"password_hashing": True}

    def test_password_is_hashed_and_verified(self):
        self.client.post("/api/user/join", json=JOIN)
        stored = self.execute("SELECT pw FROM user WHERE id = ?", ("a",))[0]["pw"]
        self.assertNotEqual(stored, "right")
        self.assertIn("$", stored)

        ok = self.client.post("/api/user/login", json={"id": "a", "pw": "right"})
        self.assertEqual(ok.status_code, 200)
        bad = self.client.post("/api/user/login", json={"id": "a", "pw": "wrong"})
        self.assertEqual(bad.status_code, 401)


if __name__ == "__main__":
    unittest.main()
