"""Enterprise billing budgets; same records as the organization endpoints."""

from .billing_budgets import Budget
from .service import Response, Service, escape


class EnterpriseService(Service):
    def list_budgets(self, enterprise: str) -> tuple[list[Budget], Response]:
        req = self.client.new_request("GET", f"enterprises/{escape(enterprise)}/settings/billing/budgets")
        return self.client.do(req, list[Budget])

    def get_budget(self, enterprise: str, budget_id: str) -> tuple[Budget, Response]:
        u = f"enterprises/{escape(enterprise)}/settings/billing/budgets/{escape(budget_id)}"
        req = self.client.new_request("GET", u)
        return self.client.do(req, Budget)

    def create_budget(self, enterprise: str, budget: Budget) -> tuple[Budget, Response]:
        req = self.client.new_request("POST", f"enterprises/{escape(enterprise)}/settings/billing/budgets", budget)
        return self.client.do(req, Budget)

    def update_budget(self, enterprise: str, budget_id: str, budget: Budget) -> tuple[Budget, Response]:
        req = self.client.new_request(
            "PATCH", f"enterprises/{escape(enterprise)}/settings/billing/budgets/{escape(budget_id)}", budget
        )
        return self.client.do(req, Budget)

    def delete_budget(self, enterprise: str, budget_id: str) -> Response:
        u = f"enterprises/{escape(enterprise)}/settings/billing/budgets/{escape(budget_id)}"
        req = self.client.new_request("DELETE", u)
        _, resp = self.client.do(req)
        return resp
