"""Organization billing budgets."""

from .resource import Resource, json_field
from .service import Response, Service, escape


class BudgetAlerting(Resource):
    will_alert: bool | None = None
    alert_recipients: list[str] | None = None


class Budget(Resource):
    """A spending limit on a product or SKU for an organization or enterprise."""

    id: str | None = None
    budget_name: str | None = None
    target_sub_account: str | None = None
    target_type: str | None = None
    target_id: int | None = None
    target_name: str | None = None
    pricing_model: str | None = None
    pricing_model_id: str | None = None
    pricing_model_display_name: str | None = None
    budget_type: str | None = None
    limit_amount: float | None = None
    current_amount: float | None = None
    currency: str | None = None
    exclude_cost_center_usage: bool | None = None
    budget_alerting: BudgetAlerting | None = None


class BudgetList(Resource):
    budgets: list[Budget] | None = json_field(omitempty=False)
    has_next_page: bool | None = None


class BudgetResponse(Resource):
    """Body returned by budget updates: the stored budget plus a status message."""

    budget: Budget | None = json_field(omitempty=False)
    message: str | None = None


class BillingService(Service):
    def list_organization_budgets(self, org: str) -> tuple[BudgetList, Response]:
        """GitHub API docs: https://docs.github.com/rest/billing/budgets#get-all-budgets-for-an-organization"""
        req = self.client.new_request("GET", f"organizations/{escape(org)}/settings/billing/budgets")
        return self.client.do(req, BudgetList)

    def get_organization_budget(self, org: str, budget_id: str) -> tuple[Budget, Response]:
        """GitHub API docs: https://docs.github.com/rest/billing/budgets#get-a-budget-by-id-for-an-organization"""
        u = f"organizations/{escape(org)}/settings/billing/budgets/{escape(budget_id)}"
        req = self.client.new_request("GET", u)
        return self.client.do(req, Budget)

    def update_organization_budget(
        self, org: str, budget_id: str, budget: Budget
    ) -> tuple[BudgetResponse, Response]:
        """Send only the fields set on budget; absent fields are left untouched.

        GitHub API docs: https://docs.github.com/rest/billing/budgets#update-a-budget-for-an-organization
        """
        req = self.client.new_request(
            "PATCH", f"organizations/{escape(org)}/settings/billing/budgets/{escape(budget_id)}", budget
        )
        return self.client.do(req, BudgetResponse)

    def delete_organization_budget(self, org: str, budget_id: str) -> Response:
        """GitHub API docs: https://docs.github.com/rest/billing/budgets#delete-a-budget-for-an-organization"""
        u = f"organizations/{escape(org)}/settings/billing/budgets/{escape(budget_id)}"
        req = self.client.new_request("DELETE", u)
        _, resp = self.client.do(req)
        return resp
