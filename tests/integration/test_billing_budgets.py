"""Integration tests for organization and enterprise billing budgets."""

from github_binding.billing_budgets import Budget, BudgetAlerting, BudgetList, BudgetResponse

BUDGET_JSON = {
    "id": "2066deda-923f-43f9-88d2-62395a28c0cdd",
    "budget_name": "Actions budget",
    "target_sub_account": "",
    "target_type": "organization",
    "target_id": 1,
    "target_name": "octo-org",
    "pricing_model": "metered",
    "pricing_model_id": "actions",
    "pricing_model_display_name": "Actions",
    "budget_type": "ProductPricing",
    "limit_amount": 1000,
    "current_amount": 250.5,
    "currency": "USD",
    "exclude_cost_center_usage": False,
    "budget_alerting": {"will_alert": True, "alert_recipients": ["mona", "lisa"]},
}


class TestGetOrganizationBudget:
    def test_decodes_every_field(self, client, api):
        api.add("GET", "/organizations/o/settings/billing/budgets/1", BUDGET_JSON)

        budget, resp = client.billing.get_organization_budget("o", "1")

        assert api.last.method == "GET"
        assert str(api.last.url) == "https://api.github.test/organizations/o/settings/billing/budgets/1"
        assert resp.status == 200
        assert budget == Budget(
            id="2066deda-923f-43f9-88d2-62395a28c0cdd",
            budget_name="Actions budget",
            target_sub_account="",
            target_type="organization",
            target_id=1,
            target_name="octo-org",
            pricing_model="metered",
            pricing_model_id="actions",
            pricing_model_display_name="Actions",
            budget_type="ProductPricing",
            limit_amount=1000.0,
            current_amount=250.5,
            currency="USD",
            exclude_cost_center_usage=False,
            budget_alerting=BudgetAlerting(will_alert=True, alert_recipients=["mona", "lisa"]),
        )

    def test_renders_for_debugging(self, client, api):
        api.add("GET", "/organizations/o/settings/billing/budgets/1", {"id": "1", "limit_amount": 100.5})

        budget, _ = client.billing.get_organization_budget("o", "1")

        assert str(budget) == 'github.Budget{ID:"1", LimitAmount:100.5}'


class TestListOrganizationBudgets:
    def test_returns_budget_list(self, client, api):
        api.add(
            "GET",
            "/organizations/o/settings/billing/budgets",
            {"budgets": [{"id": "1", "budget_name": "Budget 1", "limit_amount": 100.5}], "has_next_page": False},
        )

        budgets, _ = client.billing.list_organization_budgets("o")

        assert budgets == BudgetList(
            budgets=[Budget(id="1", budget_name="Budget 1", limit_amount=100.5)],
            has_next_page=False,
        )


class TestUpdateOrganizationBudget:
    def test_sends_only_set_fields(self, client, api):
        api.add(
            "PATCH",
            "/organizations/o/settings/billing/budgets/1",
            {"message": "Budget successfully updated.", "budget": {"id": "1", "budget_name": "Updated Budget"}},
        )

        result, _ = client.billing.update_organization_budget("o", "1", Budget(budget_name="Updated Budget"))

        assert api.last.method == "PATCH"
        assert api.last_json() == {"budget_name": "Updated Budget"}
        assert api.last.headers["Content-Type"] == "application/json"
        assert result == BudgetResponse(
            budget=Budget(id="1", budget_name="Updated Budget"),
            message="Budget successfully updated.",
        )


class TestDeleteOrganizationBudget:
    def test_returns_response_only(self, client, api):
        api.add("DELETE", "/organizations/o/settings/billing/budgets/1", status=204)

        resp = client.billing.delete_organization_budget("o", "1")

        assert api.last.method == "DELETE"
        assert resp.status == 204


class TestEnterpriseBudgets:
    def test_list(self, client, api):
        api.add("GET", "/enterprises/e/settings/billing/budgets", [{"id": "1"}, {"id": "2"}])

        budgets, _ = client.enterprise.list_budgets("e")

        assert budgets == [Budget(id="1"), Budget(id="2")]

    def test_create(self, client, api):
        api.add("POST", "/enterprises/e/settings/billing/budgets", {"id": "3", "limit_amount": 50})

        budget, _ = client.enterprise.create_budget("e", Budget(budget_name="b", limit_amount=50.0))

        assert api.last_json() == {"budget_name": "b", "limit_amount": 50.0}
        assert budget == Budget(id="3", limit_amount=50.0)

    def test_update_and_delete(self, client, api):
        api.add("PATCH", "/enterprises/e/settings/billing/budgets/3", {"id": "3", "currency": "USD"})
        api.add("DELETE", "/enterprises/e/settings/billing/budgets/3", status=204)

        budget, _ = client.enterprise.update_budget("e", "3", Budget(currency="USD"))
        resp = client.enterprise.delete_budget("e", "3")

        assert budget.currency == "USD"
        assert resp.status == 204

    def test_get(self, client, api):
        api.add("GET", "/enterprises/e/settings/billing/budgets/3", {"id": "3"})

        budget, _ = client.enterprise.get_budget("e", "3")

        assert budget == Budget(id="3")
