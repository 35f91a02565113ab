import unittest

from tests.base import ApiTestCase


class MemberApiTests(ApiTestCase):
    def test_register_then_list(self):
        response = self.register()
        self.assertEqual(response.json(), {"message": "Data saved successfully"})

        listed = self.client.get("/api/member", params={"userId": "u1"})
        self.assertEqual(listed.status_code, 200)
        members = listed.json()
        self.assertEqual(len(members), 1)
        self.assertEqual(members[0]["name"], "Kim")
        self.assertEqual(members[0]["phone"], "010")
        self.assertEqual(members[0]["lesson"], 4)
        self.assertEqual(members[0]["userId"], "u1")

    def test_list_is_scoped_by_owner(self):
        self.register(user_id="u1")
        self.register(name="Park", user_id="u2")
        members = self.client.get("/api/member", params={"userId": "u2"}).json()
        self.assertEqual([m["name"] for m in members], ["Park"])

    def test_list_requires_user_id(self):
        response = self.client.get("/api/member")
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.json()["error"], "Invalid request")

    def test_charge_adds_delta(self):
        self.register(lesson=4)
        response = self.client.put("/api/member/charge/Kim", params={"userId": "u1"}, json={"lesson": 3})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Member lesson increased successfully"})
        self.assertEqual(self.member()["lesson"], 7)

    def test_charge_repeated_and_negative(self):
        self.register(lesson=1)
        for delta in (2, 2, -4):
            self.client.put("/api/member/charge/Kim", params={"userId": "u1"}, json={"lesson": delta})
        self.assertEqual(self.member()["lesson"], 1)

    def test_charge_accepts_numeric_string(self):
        self.register(lesson=0)
        response = self.client.put("/api/member/charge/Kim", params={"userId": "u1"}, json={"lesson": "5"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.member()["lesson"], 5)

    def test_charge_rejects_non_numeric(self):
        self.register(lesson=2)
        response = self.client.put("/api/member/charge/Kim", params={"userId": "u1"}, json={"lesson": "abc"})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(self.member()["lesson"], 2)

    def test_cancel_adds_one_even_from_zero_or_negative(self):
        self.register(lesson=0)
        self.client.put("/api/member/cancel/Kim", params={"userId": "u1"})
        self.assertEqual(self.member()["lesson"], 1)

        self.client.put("/api/member/Kim", params={"userId": "u1"}, json={"lesson": -2})
        response = self.client.put("/api/member/cancel/Kim", params={"userId": "u1"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(self.member()["lesson"], -1)

    def test_complete_sets_explicit_value(self):
        self.register(lesson=4)
        response = self.client.put("/api/member/Kim", params={"userId": "u1"}, json={"lesson": 3})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Lesson data updated successfully"})
        self.assertEqual(self.member()["lesson"], 3)
        # Setting the balance does not write the lesson log.
        lessons = self.client.get("/api/lessonList/detail/Kim", params={"userId": "u1"}).json()
        self.assertEqual(lessons, [])

    def test_detail_of_unknown_member_is_null(self):
        response = self.client.get("/api/member/detail/Nobody", params={"userId": "u1"})
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json())

    def test_delete_keeps_lesson_and_payment_records(self):
        self.register()
        self.client.post("/api/lessonList", json={"userId": "u1", "name": "Kim", "phone": "010"})
        self.client.post("/api/payList", json={"userId": "u1", "name": "Kim", "pay": 100000})

        response = self.client.delete("/api/member/Kim", params={"userId": "u1"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Member deleted successfully"})

        self.assertEqual(self.client.get("/api/member", params={"userId": "u1"}).json(), [])
        lessons = self.client.get("/api/lessonList/detail/Kim", params={"userId": "u1"}).json()
        payments = self.client.get("/api/payList/detail/Kim", params={"userId": "u1"}).json()
        self.assertEqual(len(lessons), 1)
        self.assertEqual(len(payments), 1)

    def test_store_failure_is_opaque_500(self):
        self.execute("DROP TABLE member")
        response = self.client.get("/api/member", params={"userId": "u1"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "Internal server error"})


if __name__ == "__main__":
    unittest.main()
