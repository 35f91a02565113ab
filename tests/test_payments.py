import unittest

from tests.base import ApiTestCase


class PaymentApiTests(ApiTestCase):
    def pay(self, name="Kim", amount=200000, day=None, user_id="u1"):
        body = {"userId": user_id, "name": name, "pay": amount}
        if day:
            body["payDay"] = day
        response = self.client.post("/api/payList", json=body)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Payment data saved successfully"})

    def test_record_and_list_for_member(self):
        self.pay(amount=150000)
        self.pay(name="Park", amount=90000)

        response = self.client.get("/api/payList/detail/Kim", params={"userId": "u1"})
        self.assertEqual(response.status_code, 200)
        payments = response.json()
        self.assertEqual(len(payments), 1)
        self.assertEqual(payments[0]["pay"], 150000)
        self.assertEqual(payments[0]["userId"], "u1")
        self.assertIn("payDay", payments[0])

    def test_payment_does_not_charge_lessons(self):
        self.register(lesson=2)
        self.pay()
        self.assertEqual(self.member()["lesson"], 2)

    def test_month_filter_ignores_year(self):
        self.pay(day="2022-03-31T20:00:00")
        self.pay(day="2024-03-01T08:00:00")
        self.pay(day="2024-02-29T08:00:00")

        response = self.client.get("/api/payListmonth", params={"month": 3, "userId": "u1"})
        self.assertEqual(response.status_code, 200)
        days = sorted(payment["payDay"][:10] for payment in response.json())
        self.assertEqual(days, ["2022-03-31", "2024-03-01"])

    def test_amount_must_be_integer(self):
        response = self.client.post("/api/payList", json={"userId": "u1", "name": "Kim", "pay": "lots"})
        self.assertEqual(response.status_code, 422)


if __name__ == "__main__":
    unittest.main()
