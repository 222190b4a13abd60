"""Endpoint tests for the admin-scoped search endpoints."""
from fastapi.testclient import TestClient


class TestAdminSearch:
    def test_standard_user_is_rejected(self, client: TestClient, auth_headers):
        for path in (
            "/admin/category/search",
            "/admin/expense/search",
            "/admin/expected-category-distribution/search",
        ):
            response = client.post(path, json={}, headers=auth_headers)
            assert response.status_code == 403
            assert response.json()["detail"] == "Administrator role required"

    def test_admin_sees_every_users_records(
        self, client: TestClient, user, other_user, admin_user,
        make_category, make_expense, make_distribution, headers_for
    ):
        alice_food = make_category(user, title="Food")
        bob_food = make_category(other_user, title="Food")
        make_expense(alice_food)
        make_expense(bob_food)
        make_distribution(alice_food)
        make_distribution(bob_food)
        headers = headers_for(admin_user)

        categories = client.post("/admin/category/search", json={"title": "food"}, headers=headers).json()
        expenses = client.post("/admin/expense/search", json={}, headers=headers).json()
        distributions = client.post(
            "/admin/expected-category-distribution/search", json={}, headers=headers
        ).json()

        assert categories["totalCount"] == 2
        assert {c["createdById"] for c in categories["items"]} == {user.id, other_user.id}
        assert expenses["totalCount"] == 2
        assert distributions["totalCount"] == 2

    def test_regular_search_stays_scoped_for_admin(
        self, client: TestClient, user, admin_user, make_category, headers_for
    ):
        make_category(user)

        response = client.post("/category/search", json={}, headers=headers_for(admin_user))

        assert response.json()["totalCount"] == 0
